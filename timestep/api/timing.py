"""Public fixed-step timing API contracts."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from timestep.runtime.clock import PollResult
    from timestep.runtime.values import ElapsedDuration, StepResult


class FixedStep(Protocol):
    """Fixed-step accumulator contract fed with explicit elapsed durations."""

    def advance(self, elapsed: ElapsedDuration) -> StepResult:
        """Record elapsed time and return steps completed since the previous call."""

    @property
    def step_length(self) -> ElapsedDuration:
        """Return the fixed step length."""

    @property
    def total_timestep_time(self) -> ElapsedDuration:
        """Return the sum of consumed whole steps."""

    @property
    def total_time(self) -> ElapsedDuration:
        """Return consumed steps plus the partial step."""

    @property
    def last_update_time(self) -> datetime:
        """Return start time plus total time."""


class FixedStepClock(Protocol):
    """Fixed-step contract that measures elapsed time itself."""

    def poll(self) -> PollResult:
        """Measure time since the previous poll and return the steps it completed."""

    @property
    def step_length(self) -> ElapsedDuration:
        """Return the fixed step length."""

    @property
    def total_timestep_time(self) -> ElapsedDuration:
        """Return the sum of consumed whole steps."""

    @property
    def total_time(self) -> ElapsedDuration:
        """Return consumed steps plus the partial step."""

    @property
    def last_update_time(self) -> datetime:
        """Return start time plus total time."""


def create_fixed_step(
    step_length: ElapsedDuration | timedelta | float,
    *,
    start_time: datetime | None = None,
) -> FixedStep:
    """Create default fixed-step accumulator implementation."""
    from timestep.runtime.accumulator import FixedStepAccumulator

    return FixedStepAccumulator(step_length, start_time=start_time)


def create_fixed_step_clock(
    step_length: ElapsedDuration | timedelta | float,
    *,
    start_time: datetime | None = None,
    time_source_ns: Callable[[], int] | None = None,
) -> FixedStepClock:
    """Create default monotonic-clock fixed-step implementation."""
    from timestep.runtime.clock import MonotonicFixedStep

    return MonotonicFixedStep(step_length, start_time=start_time, time_source_ns=time_source_ns)


__all__ = ["FixedStep", "FixedStepClock", "create_fixed_step", "create_fixed_step_clock"]
