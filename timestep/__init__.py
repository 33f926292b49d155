"""Fixed-timestep accumulation for simulation and render loops."""

from timestep.api import FixedStep, FixedStepClock, create_fixed_step, create_fixed_step_clock
from timestep.runtime import (
    MAX_STEP_TICKS,
    ElapsedDuration,
    FixedStepAccumulator,
    MonotonicFixedStep,
    PollResult,
    StepResult,
    TimestepRangeError,
    lerp,
    update_position,
    update_position_inplace,
)

__all__ = [
    "MAX_STEP_TICKS",
    "ElapsedDuration",
    "FixedStep",
    "FixedStepAccumulator",
    "FixedStepClock",
    "MonotonicFixedStep",
    "PollResult",
    "StepResult",
    "TimestepRangeError",
    "create_fixed_step",
    "create_fixed_step_clock",
    "lerp",
    "update_position",
    "update_position_inplace",
]
