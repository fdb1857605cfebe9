from __future__ import annotations

from typing import Mapping, Sequence

ErrorContext = Mapping[str, str]


class SafeEnvError(Exception):
    def __init__(
        self, message: str, *, context: ErrorContext | None = None
    ) -> None:
        self.context = dict(context) if context else {}
        super().__init__(message)


class SpecError(SafeEnvError):
    pass


class EnvVarError(SafeEnvError):
    pass


class MissingVariableError(EnvVarError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Missing required environment variable: {name}",
            context={"env_var": name},
        )


class InvalidNumberError(EnvVarError):
    def __init__(self, name: str, raw: str) -> None:
        self.name = name
        self.raw = raw
        super().__init__(
            f'Env {name}: expected number, got "{raw}"',
            context={"env_var": name, "value": raw},
        )


class InvalidChoiceError(EnvVarError):
    def __init__(self, name: str, choices: Sequence[str]) -> None:
        self.name = name
        self.choices = tuple(choices)
        joined = ", ".join(self.choices)
        super().__init__(
            f"Env {name}: must be one of [{joined}]",
            context={"env_var": name, "choices": joined},
        )
