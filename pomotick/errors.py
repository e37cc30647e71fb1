"""Exceptions raised by PomoTick."""

from __future__ import annotations


class PomoTickError(Exception):
    """Base class for every error this package raises."""


class InvalidConfiguration(PomoTickError, ValueError):
    """A timer duration was not a positive whole number of seconds."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field} {reason} (got {value!r})")
