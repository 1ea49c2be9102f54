"""Calendar validation rules.

A rule rejects a NormalizedDate for one reason. Rules run in order and the
first one that fires wins:

- "unknown_month": month 0, or three letters that are not a month name
- "range": year outside 1753..3000, month outside 1..12, day outside 1..31
- "thirty_day_month": day 31 in April, June, September or November
- "february": day 30 or 31 in February
- "leap_day": 29 February outside a leap year

Months not named above may run to day 31, which the "range" rule already
bounds. There is no per-month day table.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable

from .errors import DateNotValid
from .fields import UNKNOWN_MONTH, NormalizedDate


logger = logging.getLogger(__name__)

MIN_YEAR = 1753
MAX_YEAR = 3000
THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})

Check = Callable[[NormalizedDate], bool]


@dataclass(frozen=True)
class Rule:
    """A single validation rule. `rejects` returns True for a bad date."""
    name: str
    reason: str
    rejects: Check


@dataclass(frozen=True)
class ValidatedDate:
    """A date that passed every rule. Only `validate` builds these."""
    day: int
    month: int
    year: int


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and not (year % 100 == 0 and year % 400 != 0)


def _out_of_range(d: NormalizedDate) -> bool:
    return (d.year < MIN_YEAR or d.year > MAX_YEAR
            or d.month < 1 or d.month > 12
            or d.day < 1 or d.day > 31)


RULES: tuple[Rule, ...] = (
    Rule(
        name="unknown_month",
        reason="month is 0 or not a month name",
        rejects=lambda d: d.month == UNKNOWN_MONTH,
    ),
    Rule(
        name="range",
        reason=f"year must be {MIN_YEAR}-{MAX_YEAR}, month 1-12, day 1-31",
        rejects=_out_of_range,
    ),
    Rule(
        name="thirty_day_month",
        reason="month has 30 days",
        rejects=lambda d: d.month in THIRTY_DAY_MONTHS and d.day > 30,
    ),
    Rule(
        name="february",
        reason="February has at most 29 days",
        rejects=lambda d: d.month == 2 and d.day > 29,
    ),
    Rule(
        name="leap_day",
        reason="not a leap year",
        rejects=lambda d: d.month == 2 and d.day > 28 and not is_leap_year(d.year),
    ),
)


def validate(date: NormalizedDate) -> ValidatedDate:
    """Check `date` against RULES.

    Raises:
        DateNotValid: naming the first rule that rejected the date.
    """
    for rule in RULES:
        if rule.rejects(date):
            logger.debug("rule %s rejected %r", rule.name, date)
            raise DateNotValid(rule.name, rule.reason)
    return ValidatedDate(day=date.day, month=date.month, year=date.year)


def is_valid_date(day: int, month: int, year: int) -> bool:
    try:
        validate(NormalizedDate(day=day, month=month, year=year))
    except DateNotValid:
        return False
    return True
