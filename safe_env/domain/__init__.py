from .errors import (
    EnvVarError,
    InvalidChoiceError,
    InvalidNumberError,
    MissingVariableError,
    SafeEnvError,
    SpecError,
)
from .specs import (
    BooleanSpec,
    EnumSpec,
    NumberSpec,
    SafeEnvType,
    Spec,
    StringSpec,
)

__all__ = (
    "BooleanSpec",
    "EnumSpec",
    "EnvVarError",
    "InvalidChoiceError",
    "InvalidNumberError",
    "MissingVariableError",
    "NumberSpec",
    "SafeEnvError",
    "SafeEnvType",
    "Spec",
    "SpecError",
    "StringSpec",
)
