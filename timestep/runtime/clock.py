"""Monotonic real-time source driving a fixed-step accumulator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from time import monotonic_ns

from timestep.runtime.accumulator import FixedStepAccumulator, StepLength
from timestep.runtime.values import NANOSECONDS_PER_TICK, ElapsedDuration, StepResult

_LOG = logging.getLogger("timestep.clock")


@dataclass(frozen=True, slots=True)
class PollResult:
    """Real time observed by one poll and the steps it produced."""

    elapsed: ElapsedDuration
    steps: StepResult


class MonotonicFixedStep:
    """Fixed-step accumulator fed from a monotonic nanosecond clock.

    Measurement starts at construction. A reading that does not move past the
    previous one is treated as zero elapsed time; the returned alpha can still
    be non-zero in that case.

    Not thread-safe.
    """

    def __init__(
        self,
        step_length: StepLength,
        *,
        start_time: datetime | None = None,
        time_source_ns: Callable[[], int] | None = None,
    ) -> None:
        self._accumulator = FixedStepAccumulator(step_length, start_time=start_time)
        self._time_source_ns = time_source_ns or monotonic_ns
        self._last_ns = self._time_source_ns()
        self._carry_ns = 0

    def poll(self) -> PollResult:
        """Measure time since the previous poll and advance the accumulator."""
        now_ns = self._time_source_ns()
        if now_ns > self._last_ns:
            total_ns = now_ns - self._last_ns + self._carry_ns
            ticks, self._carry_ns = divmod(total_ns, NANOSECONDS_PER_TICK)
            elapsed = ElapsedDuration.from_ticks(ticks)
            self._last_ns = now_ns
        else:
            if now_ns < self._last_ns:
                _LOG.debug(
                    "clock_regression", extra={"last_ns": self._last_ns, "now_ns": now_ns}
                )
            elapsed = ElapsedDuration.ZERO
        return PollResult(elapsed=elapsed, steps=self._accumulator.advance(elapsed))

    @property
    def accumulator(self) -> FixedStepAccumulator:
        return self._accumulator

    @property
    def step_length(self) -> ElapsedDuration:
        return self._accumulator.step_length

    @property
    def total_timestep_time(self) -> ElapsedDuration:
        return self._accumulator.total_timestep_time

    @property
    def total_time(self) -> ElapsedDuration:
        return self._accumulator.total_time

    @property
    def last_update_time(self) -> datetime:
        return self._accumulator.last_update_time


__all__ = ["MonotonicFixedStep", "PollResult"]
