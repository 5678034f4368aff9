from __future__ import annotations

from typing import Any, Optional

from .errors import InvalidCount, InvalidDay, InvalidMonth, InvalidYear, SakaError

MIN_YEAR = 1
MAX_YEAR = 9999


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def validation_error(year: Any, month: Any, day: Any) -> Optional[SakaError]:
    """
    Structural check of a (year, month, day) triple.

    Returns the first failing condition as an error instance, or None.
    Day is checked against 1..31 only, not against the month's real length.
    """
    if not (_is_int(year) and MIN_YEAR <= year <= MAX_YEAR):
        return InvalidYear(year)
    if not (_is_int(month) and 1 <= month <= 12):
        return InvalidMonth(month)
    if not (_is_int(day) and 1 <= day <= 31):
        return InvalidDay(day)
    return None


def validate(year: Any, month: Any, day: Any) -> None:
    err = validation_error(year, month, day)
    if err is not None:
        raise err


def validate_month(month: Any) -> int:
    validate(2000, month, 1)
    return month


def check_count(n: Any, *, unit: str = "day", allow_negative: bool = False) -> int:
    """Return n if it is a well-formed count for date arithmetic."""
    if not _is_int(n) or (n < 0 and not allow_negative):
        raise InvalidCount(n, unit)
    return n
