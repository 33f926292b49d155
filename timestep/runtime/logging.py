"""Handler wiring for the ``timestep`` logger namespace.

Only ``logging.getLogger("timestep")`` is touched. The root logger and any
handlers the host application installed are left alone.
"""

from __future__ import annotations

import logging
from pathlib import Path

from timestep.api.logging import (
    LOGGER_NAMESPACE,
    JsonFormatter,
    KeyValueFormatter,
    TimestepLoggingConfig,
)
from timestep.runtime.config import resolve_log_level_name

_INSTALLED_HANDLERS: list[logging.Handler] = []


def configure_timestep_logging(
    config: TimestepLoggingConfig,
    *,
    propagate: bool = False,
) -> logging.Logger:
    """Route ``timestep.*`` records to a console and an optional file handler."""
    reset_timestep_logging()
    logger = logging.getLogger(LOGGER_NAMESPACE)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_resolve_formatter(config.console_format))
    handlers: list[logging.Handler] = [console_handler]
    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_resolve_formatter(config.file_format))
        handlers.append(file_handler)

    for handler in handlers:
        logger.addHandler(handler)
    _INSTALLED_HANDLERS.extend(handlers)
    logger.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))
    logger.propagate = propagate
    return logger


def setup_timestep_logging() -> logging.Logger | None:
    """Install console output for ``timestep.*`` unless logging is already configured."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    if logger.handlers or logging.getLogger().handlers:
        return None
    return configure_timestep_logging(
        TimestepLoggingConfig(level_name=resolve_log_level_name(default="INFO"))
    )


def reset_timestep_logging() -> None:
    """Remove and close handlers installed here and restore propagation."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    while _INSTALLED_HANDLERS:
        handler = _INSTALLED_HANDLERS.pop()
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return KeyValueFormatter()


__all__ = ["configure_timestep_logging", "reset_timestep_logging", "setup_timestep_logging"]
