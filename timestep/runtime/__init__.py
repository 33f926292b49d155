"""Fixed-step runtime modules."""

from timestep.runtime.accumulator import MAX_STEP_TICKS, FixedStepAccumulator
from timestep.runtime.clock import MonotonicFixedStep, PollResult
from timestep.runtime.config import (
    TimestepConfig,
    create_fixed_step_clock_from_config,
    load_timestep_config,
)
from timestep.runtime.errors import TimestepRangeError
from timestep.runtime.integration import lerp, update_position, update_position_inplace
from timestep.runtime.logging import (
    configure_timestep_logging,
    reset_timestep_logging,
    setup_timestep_logging,
)
from timestep.runtime.values import (
    MAX_STEP_COUNT,
    MAX_TICKS,
    TICKS_PER_SECOND,
    ElapsedDuration,
    StepResult,
)

__all__ = [
    "MAX_STEP_COUNT",
    "MAX_STEP_TICKS",
    "MAX_TICKS",
    "TICKS_PER_SECOND",
    "ElapsedDuration",
    "FixedStepAccumulator",
    "MonotonicFixedStep",
    "PollResult",
    "StepResult",
    "TimestepConfig",
    "TimestepRangeError",
    "configure_timestep_logging",
    "create_fixed_step_clock_from_config",
    "lerp",
    "load_timestep_config",
    "reset_timestep_logging",
    "setup_timestep_logging",
    "update_position",
    "update_position_inplace",
]
