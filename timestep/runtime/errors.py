"""Shared runtime exception types."""

from __future__ import annotations


class TimestepRangeError(ValueError):
    """Argument outside its valid range (negative duration, bad step length, ...)."""

    def __init__(self, name: str, value: object, requirement: str) -> None:
        super().__init__(f"{name} {requirement}, got {value!r}")
        self.name = name
        self.value = value


def require(condition: bool, name: str, value: object, requirement: str) -> None:
    """Raise ``TimestepRangeError`` unless ``condition`` holds."""
    if not condition:
        raise TimestepRangeError(name, value, requirement)
