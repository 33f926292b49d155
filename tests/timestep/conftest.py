from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

import pytest


class FakeNanoClock:
    def __init__(self, readings: Iterable[int]) -> None:
        self._readings = iter(readings)
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        return next(self._readings)


@pytest.fixture
def start_time() -> datetime:
    return datetime(1989, 3, 14, 0, 0, 0)
