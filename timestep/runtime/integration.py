"""Semi-implicit Euler integration and render-time interpolation helpers."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from timestep.runtime.values import ElapsedDuration

type Scalar = float | NDArray[np.floating]


def update_position[T: Scalar](
    position: T,
    velocity: T,
    acceleration: Scalar,
    dt: ElapsedDuration,
) -> tuple[T, T]:
    """Return ``(position, velocity)`` after one semi-implicit Euler step.

    Velocity is updated first and the new velocity moves the position.
    """
    seconds = dt.seconds
    new_velocity = velocity + acceleration * seconds
    new_position = position + new_velocity * seconds
    return new_position, new_velocity


def update_position_inplace(
    position: NDArray[np.floating],
    velocity: NDArray[np.floating],
    acceleration: ArrayLike,
    dt: ElapsedDuration,
) -> None:
    """Semi-implicit Euler step applied to ``position`` and ``velocity`` in place."""
    seconds = dt.seconds
    np.add(velocity, np.multiply(acceleration, seconds), out=velocity)
    np.add(position, np.multiply(velocity, seconds), out=position)


def lerp[T: Scalar](old_value: T, new_value: T, alpha: float) -> T:
    """Blend the last two simulated states; ``alpha`` is expected in ``[0, 1]``."""
    return old_value * (1.0 - alpha) + new_value * alpha


__all__ = ["lerp", "update_position", "update_position_inplace"]
