from __future__ import annotations

import numpy as np
import pytest

from timestep.runtime.integration import lerp, update_position, update_position_inplace
from timestep.runtime.values import ElapsedDuration


def test_update_position_is_semi_implicit_euler() -> None:
    dt = ElapsedDuration.from_seconds(1.0)
    position, velocity = 0.0, 0.0

    position, velocity = update_position(position, velocity, 10.0, dt)
    assert (position, velocity) == (10.0, 10.0)
    position, velocity = update_position(position, velocity, 10.0, dt)
    assert (position, velocity) == (30.0, 20.0)
    position, velocity = update_position(position, velocity, 10.0, dt)
    assert (position, velocity) == (60.0, 30.0)


def test_update_position_handles_arrays() -> None:
    dt = ElapsedDuration.from_seconds(0.5)
    position = np.array([0.0, 1.0])
    velocity = np.array([2.0, 0.0])

    new_position, new_velocity = update_position(position, velocity, np.array([0.0, 4.0]), dt)

    np.testing.assert_allclose(new_velocity, [2.0, 2.0])
    np.testing.assert_allclose(new_position, [1.0, 2.0])
    np.testing.assert_allclose(position, [0.0, 1.0])


def test_update_position_inplace_mutates_state() -> None:
    dt = ElapsedDuration.from_seconds(1.0)
    position = np.zeros(3)
    velocity = np.zeros(3)
    acceleration = np.array([10.0, 0.0, -10.0])

    for _ in range(3):
        update_position_inplace(position, velocity, acceleration, dt)

    np.testing.assert_array_equal(velocity, [30.0, 0.0, -30.0])
    np.testing.assert_array_equal(position, [60.0, 0.0, -60.0])


def test_update_position_with_zero_elapsed_is_identity() -> None:
    assert update_position(3.0, 4.0, 9.8, ElapsedDuration.ZERO) == (3.0, 4.0)


@pytest.mark.parametrize(
    ("alpha", "expected"),
    [(0.0, 3.0), (1.0, 5.0), (0.5, 4.0), (0.1, 3.2)],
)
def test_lerp(alpha: float, expected: float) -> None:
    assert lerp(3.0, 5.0, alpha) == pytest.approx(expected)


def test_lerp_blends_arrays() -> None:
    blended = lerp(np.array([0.0, 10.0]), np.array([10.0, 20.0]), 0.25)
    np.testing.assert_allclose(blended, [2.5, 12.5])
