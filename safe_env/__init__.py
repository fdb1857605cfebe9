from .domain import (
    BooleanSpec,
    EnumSpec,
    EnvVarError,
    InvalidChoiceError,
    InvalidNumberError,
    MissingVariableError,
    NumberSpec,
    SafeEnvError,
    SafeEnvType,
    Spec,
    SpecError,
    StringSpec,
)
from .infrastructure import SafeEnvGetter, configure_logging, get_env

__all__ = (
    "BooleanSpec",
    "EnumSpec",
    "EnvVarError",
    "InvalidChoiceError",
    "InvalidNumberError",
    "MissingVariableError",
    "NumberSpec",
    "SafeEnvError",
    "SafeEnvGetter",
    "SafeEnvType",
    "Spec",
    "SpecError",
    "StringSpec",
    "configure_logging",
    "get_env",
)
