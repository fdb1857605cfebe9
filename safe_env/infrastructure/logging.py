from __future__ import annotations

import logging
from typing import Callable, Mapping

from safe_env.domain import EnvVarError, SafeEnvType
from .env import get_env

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

LOG_LEVEL_SPEC = SafeEnvType.Enum(
    ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
)


def _build_console_handler(environ: Mapping[str, str] | None) -> logging.Handler:
    return logging.StreamHandler()


def _build_file_handler(environ: Mapping[str, str] | None) -> logging.Handler:
    path = get_env("LOG_FILE_PATH", SafeEnvType.String, environ=environ)
    return logging.FileHandler(path)


_HANDLER_BUILDERS: dict[
    str, Callable[[Mapping[str, str] | None], logging.Handler]
] = {
    "console": _build_console_handler,
    "file": _build_file_handler,
}


def configure_logging(environ: Mapping[str, str] | None = None) -> None:
    dest_value = get_env(
        "LOG_DEST", SafeEnvType.String, "console", environ=environ
    )
    dest_names = [
        name.strip().lower() for name in dest_value.split(",") if name.strip()
    ]
    if not dest_names:
        raise EnvVarError(
            "LOG_DEST must include at least one destination",
            context={"env_var": "LOG_DEST", "value": dest_value},
        )

    handlers: list[logging.Handler] = []
    for name in dest_names:
        builder = _HANDLER_BUILDERS.get(name)
        if builder is None:
            raise EnvVarError(
                "LOG_DEST must be 'console' or 'file'",
                context={"env_var": "LOG_DEST", "value": name},
            )
        handlers.append(builder(environ))

    level = get_env("LOG_LEVEL", LOG_LEVEL_SPEC, "INFO", environ=environ)
    logging.basicConfig(
        level=level,
        format=_LOG_FORMAT,
        handlers=handlers,
    )
    logger.debug(
        "event=configure_logging level=%s destinations=%s",
        level,
        ",".join(dest_names),
    )
