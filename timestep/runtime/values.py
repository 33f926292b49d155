"""Validated duration and step-count value types.

Durations are integer counts of 100 ns ticks. Tick counts are limited to a
signed 64-bit range and step counts to a signed 32-bit range, so arithmetic
here behaves the same as on a fixed-width runtime.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import timedelta
from typing import ClassVar

from timestep.runtime.errors import require

TICKS_PER_SECOND = 10_000_000
TICKS_PER_MICROSECOND = 10
NANOSECONDS_PER_TICK = 100
MAX_TICKS = 2**63 - 1
MAX_STEP_COUNT = 2**31 - 1


def seconds_to_ticks(seconds: float) -> int:
    """Convert seconds to the nearest whole tick count."""
    return round(seconds * TICKS_PER_SECOND)


def ticks_to_seconds(ticks: int) -> float:
    return ticks / TICKS_PER_SECOND


def ticks_to_timedelta(ticks: int) -> timedelta:
    """Convert ticks to ``timedelta``, flooring to whole microseconds."""
    return timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)


def timedelta_to_ticks(delta: timedelta) -> int:
    return (delta // timedelta(microseconds=1)) * TICKS_PER_MICROSECOND


@dataclass(frozen=True, slots=True)
class ElapsedDuration:
    """Non-negative amount of real time observed since the previous poll."""

    ticks: int
    seconds: float = field(compare=False)

    ZERO: ClassVar[ElapsedDuration]

    def __post_init__(self) -> None:
        require(
            isinstance(self.ticks, int) and not isinstance(self.ticks, bool),
            "ticks",
            self.ticks,
            "must be an int",
        )
        require(0 <= self.ticks <= MAX_TICKS, "ticks", self.ticks, f"must be in [0, {MAX_TICKS}]")
        require(
            math.isfinite(self.seconds) and self.seconds >= 0.0,
            "seconds",
            self.seconds,
            "must be finite and >= 0",
        )
        # Exact tick quotient for from_ticks, rounded seconds for from_seconds.
        require(
            self.seconds == ticks_to_seconds(self.ticks)
            or seconds_to_ticks(self.seconds) == self.ticks,
            "seconds",
            self.seconds,
            f"must round to {self.ticks} ticks",
        )

    @classmethod
    def from_ticks(cls, ticks: int) -> ElapsedDuration:
        require(
            isinstance(ticks, int) and not isinstance(ticks, bool), "ticks", ticks, "must be an int"
        )
        require(0 <= ticks <= MAX_TICKS, "ticks", ticks, f"must be in [0, {MAX_TICKS}]")
        return cls(ticks=ticks, seconds=ticks_to_seconds(ticks))

    @classmethod
    def from_seconds(cls, seconds: float) -> ElapsedDuration:
        """Build from seconds, rounding to the nearest tick.

        ``seconds`` keeps the value as given; ``ticks`` holds its rounded form.
        """
        value = float(seconds)
        require(math.isfinite(value) and value >= 0.0, "seconds", seconds, "must be finite and >= 0")
        return cls(ticks=seconds_to_ticks(value), seconds=value)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> ElapsedDuration:
        require(delta >= timedelta(0), "delta", delta, "must be >= 0")
        return cls.from_ticks(timedelta_to_ticks(delta))

    def as_timedelta(self) -> timedelta:
        return ticks_to_timedelta(self.ticks)


ElapsedDuration.ZERO = ElapsedDuration(ticks=0, seconds=0.0)


@dataclass(frozen=True, slots=True)
class StepResult:
    """Whole fixed steps elapsed plus fractional progress toward the next one."""

    full_steps: int
    alpha: float

    ZERO: ClassVar[StepResult]

    def __post_init__(self) -> None:
        require(
            isinstance(self.full_steps, int) and not isinstance(self.full_steps, bool),
            "full_steps",
            self.full_steps,
            "must be an int",
        )
        require(
            0 <= self.full_steps <= MAX_STEP_COUNT,
            "full_steps",
            self.full_steps,
            f"must be in [0, {MAX_STEP_COUNT}]",
        )
        require(
            math.isfinite(self.alpha) and 0.0 <= self.alpha < 1.0,
            "alpha",
            self.alpha,
            "must be in [0, 1)",
        )


StepResult.ZERO = StepResult(full_steps=0, alpha=0.0)


__all__ = [
    "MAX_STEP_COUNT",
    "MAX_TICKS",
    "NANOSECONDS_PER_TICK",
    "TICKS_PER_MICROSECOND",
    "TICKS_PER_SECOND",
    "ElapsedDuration",
    "StepResult",
    "seconds_to_ticks",
    "ticks_to_seconds",
    "ticks_to_timedelta",
    "timedelta_to_ticks",
]
