from __future__ import annotations

import pytest

from safe_env import (
    EnvVarError,
    InvalidChoiceError,
    InvalidNumberError,
    MissingVariableError,
    SafeEnvError,
    SpecError,
)


@pytest.mark.parametrize(
    "error_type",
    [MissingVariableError, InvalidNumberError, InvalidChoiceError],
)
def test_env_errors_share_base(error_type: type[Exception]) -> None:
    assert issubclass(error_type, EnvVarError)
    assert issubclass(error_type, SafeEnvError)


def test_spec_error_is_not_env_error() -> None:
    assert issubclass(SpecError, SafeEnvError)
    assert not issubclass(SpecError, EnvVarError)


def test_missing_variable_error_payload() -> None:
    error = MissingVariableError("PORT")

    assert str(error) == "Missing required environment variable: PORT"
    assert error.name == "PORT"
    assert error.context == {"env_var": "PORT"}


def test_invalid_number_error_payload() -> None:
    error = InvalidNumberError("PORT", "eighty")

    assert str(error) == 'Env PORT: expected number, got "eighty"'
    assert error.raw == "eighty"
    assert error.context == {"env_var": "PORT", "value": "eighty"}


def test_invalid_choice_error_payload() -> None:
    error = InvalidChoiceError("MODE", ["dev", "prod"])

    assert str(error) == "Env MODE: must be one of [dev, prod]"
    assert error.choices == ("dev", "prod")
    assert error.context == {"env_var": "MODE", "choices": "dev, prod"}


def test_base_error_copies_context() -> None:
    context = {"env_var": "X"}
    error = SafeEnvError("boom", context=context)
    context["env_var"] = "Y"

    assert error.context == {"env_var": "X"}
    assert SafeEnvError("boom").context == {}
