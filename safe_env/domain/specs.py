from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Literal, TypeVar, Union

from .errors import SpecError

T = TypeVar("T", bound=str)


@dataclass(frozen=True)
class StringSpec:
    default: str | None = None
    type: Literal["string"] = field(default="string", init=False)


@dataclass(frozen=True)
class NumberSpec:
    default: float | None = None
    type: Literal["number"] = field(default="number", init=False)


@dataclass(frozen=True)
class BooleanSpec:
    default: bool | None = None
    type: Literal["boolean"] = field(default="boolean", init=False)


@dataclass(frozen=True)
class EnumSpec(Generic[T]):
    choices: tuple[T, ...]
    default: T | None = None
    type: Literal["enum"] = field(default="enum", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "choices", _normalize_choices(self.choices))


def _normalize_choices(choices: Iterable[T]) -> tuple[T, ...]:
    if isinstance(choices, str):
        raise SpecError(
            "Enum spec choices must be a collection of strings, not a string",
            context={"choices": choices},
        )
    # Ordered set: keep the first occurrence of each choice.
    normalized = tuple(dict.fromkeys(choices))
    if not normalized:
        raise SpecError("Enum spec requires at least one choice")
    invalid = [choice for choice in normalized if not isinstance(choice, str)]
    if invalid:
        raise SpecError(
            "Enum spec choices must be strings",
            context={"choices": repr(invalid)},
        )
    return normalized


Spec = Union[StringSpec, NumberSpec, BooleanSpec, EnumSpec]


class SafeEnvType:
    """Predefined specs to pass as the second argument of ``get_env``.

    The constants carry no default, so they can be shared by every caller.
    Pass the fallback to ``get_env`` or derive a spec with
    ``dataclasses.replace(SafeEnvType.Number, default=8080)``.
    """

    String = StringSpec()
    Number = NumberSpec()
    Boolean = BooleanSpec()

    @staticmethod
    def Enum(choices: Iterable[T], default: T | None = None) -> EnumSpec[T]:
        return EnumSpec(_normalize_choices(choices), default)
