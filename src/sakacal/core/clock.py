from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from .types import GregorianDate


class Clock(Protocol):
    def today(self) -> date: ...


class SystemClock:
    """Local calendar date from the host clock."""

    def today(self) -> date:
        return date.today()


@dataclass(frozen=True)
class FixedClock:
    """Always reports the same day. Useful for tests and reproducible output."""

    day: date

    def today(self) -> date:
        return self.day


DEFAULT_CLOCK: Clock = SystemClock()


def today_gregorian(clock: Clock | None = None) -> GregorianDate:
    return GregorianDate.from_date((clock or DEFAULT_CLOCK).today())
