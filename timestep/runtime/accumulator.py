"""Fixed-step accumulator converting observed real time into whole steps."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

from timestep.runtime.errors import TimestepRangeError, require
from timestep.runtime.values import (
    MAX_STEP_COUNT,
    MAX_TICKS,
    ElapsedDuration,
    StepResult,
    ticks_to_timedelta,
)

_LOG = logging.getLogger("timestep.accumulator")

# Largest step length for which MAX_STEP_COUNT steps still fit in MAX_TICKS (about 7 minutes).
MAX_STEP_TICKS = MAX_TICKS // MAX_STEP_COUNT

type StepLength = ElapsedDuration | timedelta | float


def coerce_step_length(step_length: StepLength) -> ElapsedDuration:
    """Normalize a step length given as duration, ``timedelta`` or seconds."""
    if isinstance(step_length, ElapsedDuration):
        duration = step_length
    elif isinstance(step_length, timedelta):
        if step_length <= timedelta(0):
            raise TimestepRangeError("step_length", step_length, "must be > 0")
        duration = ElapsedDuration.from_timedelta(step_length)
    elif isinstance(step_length, int | float) and not isinstance(step_length, bool):
        if not step_length > 0.0:
            raise TimestepRangeError("step_length", step_length, "must be > 0")
        duration = ElapsedDuration.from_seconds(step_length)
    else:
        raise TypeError(f"unsupported step_length type: {type(step_length).__name__}")
    require(
        0 < duration.ticks <= MAX_STEP_TICKS,
        "step_length",
        step_length,
        f"must be in (0, {MAX_STEP_TICKS}] ticks",
    )
    return duration


class FixedStepAccumulator:
    """Accumulates observed elapsed time into whole fixed-length steps.

    Each ``advance`` reports the steps completed since the previous call and
    the fraction of the next step already accumulated. Nothing is scheduled;
    callers run one update per reported step and may use ``alpha`` to blend
    rendered state.

    Not thread-safe: one owner, one calling thread.
    """

    def __init__(self, step_length: StepLength, *, start_time: datetime | None = None) -> None:
        self._step = coerce_step_length(step_length)
        self._start_time = start_time if start_time is not None else datetime.now(UTC)
        self._timestep_ticks = 0
        self._accumulated_ticks = 0

    def advance(self, elapsed: ElapsedDuration) -> StepResult:
        """Record ``elapsed`` and return the whole steps and alpha it completes."""
        if not isinstance(elapsed, ElapsedDuration):
            raise TypeError(f"elapsed must be ElapsedDuration, got {type(elapsed).__name__}")
        step_ticks = self._step.ticks
        self._accumulated_ticks += elapsed.ticks

        whole_steps = self._accumulated_ticks // step_ticks
        if whole_steps > MAX_STEP_COUNT:
            # Saturate; the leftover whole steps are reported by later calls.
            _LOG.debug(
                "step_count_saturated",
                extra={"available_steps": whole_steps, "reported_steps": MAX_STEP_COUNT},
            )
            whole_steps = MAX_STEP_COUNT
        consumed_ticks = whole_steps * step_ticks  # <= MAX_TICKS by MAX_STEP_TICKS

        # Unguarded: only exceeds MAX_TICKS after roughly 29 000 years of run-time.
        self._timestep_ticks += consumed_ticks
        self._accumulated_ticks -= consumed_ticks
        alpha = (self._accumulated_ticks % step_ticks) / step_ticks
        return StepResult(full_steps=whole_steps, alpha=alpha)

    @property
    def step_length(self) -> ElapsedDuration:
        return self._step

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def total_timestep_time(self) -> ElapsedDuration:
        """Sum of consumed whole steps; changes only through ``advance``."""
        return ElapsedDuration.from_ticks(self._timestep_ticks)

    @property
    def total_time(self) -> ElapsedDuration:
        """Consumed steps plus the partial step; changes only through ``advance``."""
        return ElapsedDuration.from_ticks(self._timestep_ticks + self._accumulated_ticks)

    @property
    def last_update_time(self) -> datetime:
        """Instant of the latest ``advance``, assuming ``start_time`` was accurate."""
        return self._start_time + ticks_to_timedelta(self._timestep_ticks + self._accumulated_ticks)

    def __repr__(self) -> str:
        return (
            f"FixedStepAccumulator(step_ticks={self._step.ticks}, "
            f"timestep_ticks={self._timestep_ticks}, accumulated_ticks={self._accumulated_ticks})"
        )


__all__ = ["MAX_STEP_TICKS", "FixedStepAccumulator", "StepLength", "coerce_step_length"]
