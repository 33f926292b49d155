from __future__ import annotations

import pytest

from tests.timestep.conftest import FakeNanoClock
from timestep.runtime.config import (
    DEFAULT_STEP_SECONDS,
    TimestepConfig,
    create_fixed_step_clock_from_config,
    load_timestep_config,
    resolve_log_level_name,
)
from timestep.runtime.errors import TimestepRangeError


def test_load_timestep_config_defaults() -> None:
    cfg = load_timestep_config(env={})
    assert cfg.step_seconds == DEFAULT_STEP_SECONDS
    assert cfg.log_level == "INFO"
    assert cfg.log_console_format == "text"
    assert cfg.log_file_path is None
    assert cfg.log_file_format == "json"


def test_load_timestep_config_parses_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIMESTEP_STEP_SECONDS", " 0.02 ")
    monkeypatch.setenv("TIMESTEP_LOG_LEVEL", "debug")
    monkeypatch.setenv("TIMESTEP_LOG_CONSOLE_FORMAT", "JSON")
    monkeypatch.setenv("TIMESTEP_LOG_FILE", "logs/timestep.log")
    monkeypatch.setenv("TIMESTEP_LOG_FILE_FORMAT", "text")

    cfg = load_timestep_config()
    assert cfg.step_seconds == 0.02
    assert cfg.log_level == "DEBUG"
    assert cfg.log_console_format == "json"
    assert cfg.log_file_path == "logs/timestep.log"
    assert cfg.log_file_format == "text"


@pytest.mark.parametrize("raw", ["abc", "0", "-1", "nan", "inf", ""])
def test_invalid_step_seconds_fall_back_to_default(raw: str) -> None:
    cfg = load_timestep_config(env={"TIMESTEP_STEP_SECONDS": raw})
    assert cfg.step_seconds == DEFAULT_STEP_SECONDS


def test_unknown_log_format_falls_back() -> None:
    cfg = load_timestep_config(env={"TIMESTEP_LOG_CONSOLE_FORMAT": "xml"})
    assert cfg.log_console_format == "text"


def test_resolve_log_level_prefers_timestep_prefix() -> None:
    env = {"LOG_LEVEL": "WARNING", "TIMESTEP_LOG_LEVEL": "ERROR"}
    assert resolve_log_level_name(env=env) == "ERROR"
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning"}) == "WARNING"
    assert resolve_log_level_name(default="debug", env={}) == "DEBUG"


def test_logging_config_mirrors_fields() -> None:
    cfg = load_timestep_config(env={"TIMESTEP_LOG_FILE": "out.log"})
    logging_cfg = cfg.logging_config()
    assert logging_cfg.level_name == "INFO"
    assert logging_cfg.console_format == "text"
    assert logging_cfg.file_path == "out.log"
    assert logging_cfg.file_format == "json"


def test_create_fixed_step_clock_from_config_uses_step_seconds() -> None:
    cfg = load_timestep_config(env={"TIMESTEP_STEP_SECONDS": "0.5"})
    fixed = create_fixed_step_clock_from_config(cfg, time_source_ns=FakeNanoClock([0, 750_000_000]))

    result = fixed.poll()

    assert fixed.step_length.ticks == 5_000_000
    assert result.steps.full_steps == 1
    assert result.steps.alpha == pytest.approx(0.5)


def test_create_fixed_step_clock_rejects_oversized_step() -> None:
    cfg = TimestepConfig(
        step_seconds=3600.0,
        log_level="INFO",
        log_console_format="text",
        log_file_path=None,
        log_file_format="json",
    )
    with pytest.raises(TimestepRangeError):
        create_fixed_step_clock_from_config(cfg, time_source_ns=FakeNanoClock([0]))
