from __future__ import annotations

from typing import Any


class SakaError(ValueError):
    """Base error."""

    label = "value"

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid {self.label} [{value}].")


class InvalidYear(SakaError):
    """Year is not a positive integer of at most four digits."""

    label = "year"


class InvalidMonth(SakaError):
    """Month is not an integer in 1..12."""

    label = "month"


class InvalidDay(SakaError):
    """Day is not an integer in 1..31."""

    label = "day"


class InvalidCount(SakaError):
    """Raised by date arithmetic when the count is malformed or negative."""

    def __init__(self, value: Any, unit: str = "day"):
        self.unit = unit
        self.label = f"{unit} count"
        super().__init__(value)
