from .env import SafeEnvGetter, get_env
from .logging import configure_logging

__all__ = [
    "SafeEnvGetter",
    "configure_logging",
    "get_env",
]
