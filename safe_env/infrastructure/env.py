"""Typed access to environment variables.

``get_env`` reads one variable and maps it to the Python type declared by its
spec. An empty value counts as unset. A default is only used when the
variable is unset, and is returned as given: it is not parsed or checked
against enum choices. The call-site default wins over one stored on the spec.
"""

from __future__ import annotations

import math
import os
import re
from typing import Mapping, TypeVar, overload

from safe_env.domain import (
    BooleanSpec,
    EnumSpec,
    InvalidChoiceError,
    InvalidNumberError,
    MissingVariableError,
    NumberSpec,
    SafeEnvType,
    Spec,
    SpecError,
    StringSpec,
)

T = TypeVar("T", bound=str)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
# ASCII decimal literal with optional sign, fraction and exponent.
_NUMBER_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


@overload
def get_env(
    name: str,
    spec: StringSpec = ...,
    default: str | None = ...,
    *,
    environ: Mapping[str, str] | None = ...,
) -> str: ...


@overload
def get_env(
    name: str,
    spec: NumberSpec,
    default: float | None = ...,
    *,
    environ: Mapping[str, str] | None = ...,
) -> float: ...


@overload
def get_env(
    name: str,
    spec: BooleanSpec,
    default: bool | None = ...,
    *,
    environ: Mapping[str, str] | None = ...,
) -> bool: ...


@overload
def get_env(
    name: str,
    spec: EnumSpec[T],
    default: T | None = ...,
    *,
    environ: Mapping[str, str] | None = ...,
) -> T: ...


def get_env(
    name: str,
    spec: Spec = SafeEnvType.String,
    default: object = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> object:
    source = os.environ if environ is None else environ
    raw = source.get(name)
    if raw is None or raw == "":
        if default is None:
            default = getattr(spec, "default", None)
        if default is None:
            raise MissingVariableError(name)
        return default

    if isinstance(spec, StringSpec):
        return raw
    if isinstance(spec, NumberSpec):
        return _parse_number(name, raw)
    if isinstance(spec, BooleanSpec):
        return raw.lower() in _TRUTHY
    if isinstance(spec, EnumSpec):
        if raw not in spec.choices:
            raise InvalidChoiceError(name, spec.choices)
        return raw
    raise SpecError(
        "Unsupported environment spec", context={"spec": repr(spec)}
    )


def _parse_number(name: str, raw: str) -> float:
    literal = raw.strip()
    if _NUMBER_PATTERN.fullmatch(literal) is None:
        raise InvalidNumberError(name, raw)
    value = float(literal)
    # Overflowing literals such as 1e999 parse to inf.
    if not math.isfinite(value):
        raise InvalidNumberError(name, raw)
    return value


class SafeEnvGetter:
    """Namespace entry point: ``SafeEnvGetter.get_env(name, spec, default)``."""

    get_env = staticmethod(get_env)
