from __future__ import annotations

from datetime import date
from typing import NamedTuple, Tuple

# Offset in years from the Saka era to the Gregorian epoch.
SAKA_EPOCH_OFFSET = 78

# Day of the Gregorian year (0-based) on which 1 Chaitra falls.
SAKA_NEW_YEAR_YDAY = 80

# Julian day of 0001-01-01 (proleptic Gregorian) at midnight.
GREGORIAN_EPOCH = 1721425.5

MONTH_NAMES: Tuple[str, ...] = (
    "Chaitra", "Vaisakha", "Jyaistha", "Asadha", "Sravana", "Bhadra",
    "Asvina", "Kartika", "Agrahayana", "Pausa", "Magha", "Phalguna",
)

# Indexed by day of week, 0 = Sunday.
WEEKDAY_NAMES: Tuple[str, ...] = (
    "Ravivara", "Somvara", "Mangalavara", "Budhavara",
    "Brahaspativara", "Sukravara", "Sanivara",
)


class GregorianDate(NamedTuple):
    """Gregorian (year, month, day) used as interchange at module boundaries."""

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
