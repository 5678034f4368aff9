"""
sakacal.engines.arithmetic
--------------------------
Field-level month/year arithmetic on Saka (year, month, day) labels.

Month and year shifts move the month/year fields only. What happens to
the day field afterwards is decided in one place, `resolve_day`.
"""

from __future__ import annotations

from typing import Callable, Literal, Tuple

DayPolicy = Literal["keep", "clamp"]
DAY_POLICIES: Tuple[str, ...] = ("keep", "clamp")


def add_months(year: int, month: int, n: int) -> Tuple[int, int]:
    """Carry whole months forward across year ends. n >= 0."""
    while month + n > 12:
        to_year_end = 12 - month
        year += 1
        month = 1
        n -= to_year_end + 1
    return year, month + n


def subtract_months(year: int, month: int, n: int) -> Tuple[int, int]:
    """Borrow whole months backward across year starts. n >= 0."""
    while month - n < 1:
        year -= 1
        n -= month
        month = 12
    return year, month - n


def resolve_day(
    year: int,
    month: int,
    day: int,
    policy: DayPolicy,
    month_days: Callable[[int, int], int],
) -> int:
    """
    Day field after a month/year shift.

    "keep" leaves the day as is, even past the end of the new month.
    "clamp" limits it to month_days(year, month).
    """
    if policy == "keep":
        return day
    if policy == "clamp":
        return min(day, month_days(year, month))
    raise ValueError(f"Unknown day policy '{policy}'. Available: {list(DAY_POLICIES)}")
