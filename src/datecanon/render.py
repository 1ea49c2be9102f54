"""Render a validated date as 'dd Mon yyyy'."""

from __future__ import annotations

from .rules import ValidatedDate


MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                       "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def render_date(date: ValidatedDate) -> str:
    return f"{date.day:02d} {MONTH_ABBREVIATIONS[date.month - 1]} {date.year}"
