"""Field normalization: raw date text -> integers.

No range checks happen here; `rules` decides whether the integers form a
real date.
"""

from __future__ import annotations
from dataclasses import dataclass

from .records import RawFields


MONTH_NAMES = ("jan", "feb", "mar", "apr", "may", "jun",
               "jul", "aug", "sep", "oct", "nov", "dec")

# Month value for a three-letter name that is not in MONTH_NAMES.
UNKNOWN_MONTH = 0


@dataclass(frozen=True)
class NormalizedDate:
    day: int
    month: int
    year: int


def day_to_int(day: str) -> int:
    return int(day)


def month_to_int(month: str) -> int:
    """Return the month number, or UNKNOWN_MONTH for an unrecognised name."""
    if month.isdigit():
        return int(month)
    try:
        return MONTH_NAMES.index(month.lower()) + 1
    except ValueError:
        return UNKNOWN_MONTH


def year_to_int(year: str) -> int:
    """Return the four-digit year.

    Two-digit years are windowed: 00-49 -> 2000-2049, 50-99 -> 1950-1999.
    The window depends on the length of the text, so "0049" is year 49.
    """
    value = int(year)
    if len(year) != 2:
        return value
    if value < 50:
        return 2000 + value
    return 1900 + value


def normalize_fields(raw: RawFields) -> NormalizedDate:
    return NormalizedDate(
        day=day_to_int(raw.day),
        month=month_to_int(raw.month),
        year=year_to_int(raw.year),
    )
