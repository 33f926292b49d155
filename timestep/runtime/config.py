"""Environment-sourced configuration for fixed-step clocks and logging."""

from __future__ import annotations

import math
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from timestep.api.logging import TimestepLoggingConfig
from timestep.runtime.clock import MonotonicFixedStep

DEFAULT_STEP_SECONDS = 1.0 / 60.0


@dataclass(frozen=True, slots=True)
class TimestepConfig:
    """Immutable fixed-step and logging configuration."""

    step_seconds: float
    log_level: str
    log_console_format: str
    log_file_path: str | None
    log_file_format: str

    def logging_config(self) -> TimestepLoggingConfig:
        return TimestepLoggingConfig(
            level_name=self.log_level,
            console_format=self.log_console_format,
            file_path=self.log_file_path,
            file_format=self.log_file_format,
        )


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _positive_float(name: str, default: float, *, env: Mapping[str, str] | None = None) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return float(default)
    try:
        value = float(raw.strip())
    except ValueError:
        return float(default)
    if not math.isfinite(value) or value <= 0.0:
        return float(default)
    return value


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _log_format(raw: str, fallback: str) -> str:
    value = raw.strip().lower()
    if value not in {"text", "json"}:
        return fallback
    return value


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with the library-prefixed override winning."""
    value = _raw("TIMESTEP_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_timestep_config(*, env: Mapping[str, str] | None = None) -> TimestepConfig:
    """Load immutable configuration from env vars (or an explicit mapping)."""
    file_path = _text("TIMESTEP_LOG_FILE", "", env=env)
    return TimestepConfig(
        step_seconds=_positive_float("TIMESTEP_STEP_SECONDS", DEFAULT_STEP_SECONDS, env=env),
        log_level=resolve_log_level_name(env=env),
        log_console_format=_log_format(
            _text("TIMESTEP_LOG_CONSOLE_FORMAT", "text", env=env), "text"
        ),
        log_file_path=file_path or None,
        log_file_format=_log_format(_text("TIMESTEP_LOG_FILE_FORMAT", "json", env=env), "json"),
    )


def create_fixed_step_clock_from_config(
    config: TimestepConfig,
    *,
    time_source_ns: Callable[[], int] | None = None,
) -> MonotonicFixedStep:
    """Build a monotonic fixed-step clock using the configured step length."""
    return MonotonicFixedStep(config.step_seconds, time_source_ns=time_source_ns)


__all__ = [
    "DEFAULT_STEP_SECONDS",
    "TimestepConfig",
    "create_fixed_step_clock_from_config",
    "load_timestep_config",
    "resolve_log_level_name",
]
