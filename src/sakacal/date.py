from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Tuple

from .core.clock import Clock, today_gregorian
from .core.types import GregorianDate
from .core.validate import check_count, validate
from .engines import calendar as cal
from .engines.arithmetic import DAY_POLICIES, DayPolicy
from .render import render_month_grid, render_text

log = logging.getLogger(__name__)


class SakaDate:
    """
    A mutable Saka calendar date.

    SakaDate(1932, 12, 26) builds a date from its fields; SakaDate() (or
    SakaDate.today()) takes today's date from `clock`. The add_*/subtract_*
    methods change the date in place.

    Month and year shifts do not re-check the day against the new month's
    length unless day_policy="clamp".
    """

    __slots__ = ("year", "month", "day", "day_policy")

    def __init__(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        *,
        clock: Optional[Clock] = None,
        day_policy: DayPolicy = "keep",
    ):
        given = [x is not None for x in (year, month, day)]
        if all(given):
            validate(year, month, day)
        elif any(given):
            raise TypeError("SakaDate() takes year, month and day together, or none of them")
        else:
            g = today_gregorian(clock)
            year, month, day = cal.from_gregorian(*g)
            validate(year, month, day)

        if day_policy not in DAY_POLICIES:
            raise ValueError(f"Unknown day policy '{day_policy}'. Available: {list(DAY_POLICIES)}")

        self.year: int = year
        self.month: int = month
        self.day: int = day
        self.day_policy: DayPolicy = day_policy

    # ---------------------------------------------------------
    # Alternate constructors
    # ---------------------------------------------------------

    @classmethod
    def today(cls, clock: Optional[Clock] = None, **kwargs: Any) -> "SakaDate":
        return cls(clock=clock, **kwargs)

    @classmethod
    def from_gregorian(cls, year: int, month: int, day: int, **kwargs: Any) -> "SakaDate":
        return cls(*cal.from_gregorian(year, month, day), **kwargs)

    @classmethod
    def from_date(cls, d: date, **kwargs: Any) -> "SakaDate":
        return cls.from_gregorian(d.year, d.month, d.day, **kwargs)

    @classmethod
    def from_julian(cls, jd: float, **kwargs: Any) -> "SakaDate":
        return cls(*cal.from_julian(jd), **kwargs)

    def copy(self) -> "SakaDate":
        return SakaDate(self.year, self.month, self.day, day_policy=self.day_policy)

    # ---------------------------------------------------------
    # Value protocol
    # ---------------------------------------------------------

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SakaDate):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, tuple):
            return self.as_tuple() == other
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"SakaDate({self.year}, {self.month}, {self.day})"

    def __str__(self) -> str:
        return self.render_text()

    # ---------------------------------------------------------
    # Conversion and queries
    # ---------------------------------------------------------

    def to_julian(self) -> float:
        return cal.to_julian(self.year, self.month, self.day)

    def to_gregorian(self) -> GregorianDate:
        return cal.to_gregorian(self.year, self.month, self.day)

    def to_date(self) -> date:
        return self.to_gregorian().to_date()

    def day_of_week(self, year: Optional[int] = None, month: Optional[int] = None, day: Optional[int] = None) -> int:
        """0 = Sunday. Defaults to this date's own fields."""
        return cal.day_of_week(
            self.year if year is None else year,
            self.month if month is None else month,
            self.day if day is None else day,
        )

    def days_in_month(self, year: Optional[int] = None, month: Optional[int] = None) -> int:
        return cal.days_in_month(self.year if year is None else year, self.month if month is None else month)

    def month_name(self, month: Optional[int] = None) -> str:
        return cal.month_name(self.month if month is None else month)

    def weekday_name(self) -> str:
        return cal.weekday_name(self.day_of_week())

    def render_text(self) -> str:
        return render_text(self.year, self.month, self.day)

    def render_month_grid(self, year: Optional[int] = None, month: Optional[int] = None) -> str:
        return render_month_grid(self.year if year is None else year, self.month if month is None else month)

    # ---------------------------------------------------------
    # In-place arithmetic
    # ---------------------------------------------------------

    def _assign(self, year: int, month: int, day: int) -> None:
        validate(year, month, day)
        log.debug("%r -> SakaDate(%d, %d, %d)", self, year, month, day)
        self.year, self.month, self.day = year, month, day

    def add_days(self, n: int) -> None:
        """
        Move forward n days (backward if n is negative).

        The shift runs through the Gregorian calendar, so a result past
        Gregorian year 9999 (around Saka 9922) raises InvalidYear.
        """
        self._assign(*cal.shift_days(self.year, self.month, self.day, n))

    def subtract_days(self, n: int) -> None:
        n = check_count(n, unit="day")
        self._assign(*cal.shift_days(self.year, self.month, self.day, -n))

    def add_months(self, n: int, *, day_policy: Optional[DayPolicy] = None) -> None:
        n = check_count(n, unit="month")
        self._assign(*cal.shift_months(self.year, self.month, self.day, n, policy=day_policy or self.day_policy))

    def subtract_months(self, n: int, *, day_policy: Optional[DayPolicy] = None) -> None:
        n = check_count(n, unit="month")
        self._assign(*cal.shift_months(self.year, self.month, self.day, -n, policy=day_policy or self.day_policy))

    def add_years(self, n: int, *, day_policy: Optional[DayPolicy] = None) -> None:
        n = check_count(n, unit="year")
        self._assign(*cal.shift_years(self.year, self.month, self.day, n, policy=day_policy or self.day_policy))

    def subtract_years(self, n: int, *, day_policy: Optional[DayPolicy] = None) -> None:
        n = check_count(n, unit="year")
        self._assign(*cal.shift_years(self.year, self.month, self.day, -n, policy=day_policy or self.day_policy))
