"""Public fixed-step API contracts."""

from timestep.api.logging import (
    LOGGER_NAMESPACE,
    JsonFormatter,
    KeyValueFormatter,
    TimestepLoggingConfig,
)
from timestep.api.timing import (
    FixedStep,
    FixedStepClock,
    create_fixed_step,
    create_fixed_step_clock,
)

__all__ = [
    "LOGGER_NAMESPACE",
    "FixedStep",
    "FixedStepClock",
    "JsonFormatter",
    "KeyValueFormatter",
    "TimestepLoggingConfig",
    "create_fixed_step",
    "create_fixed_step_clock",
]
