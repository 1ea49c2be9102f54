"""Errors raised while canonicalising a date line."""

from __future__ import annotations


class DateCanonError(Exception):
    """Base error for this package.

    Subclasses set `message`, the fixed text written after the offending
    line on the diagnostic stream.
    """
    message: str


class FormatNotRecognised(DateCanonError):
    """Raised when a line does not have the shape of a date."""
    message = "Format not recognised."


class DateNotValid(DateCanonError):
    """Raised when a line has a date shape but is not a real calendar date."""
    message = "Date not valid."

    def __init__(self, rule: str, reason: str) -> None:
        super().__init__(f"{rule}: {reason}")
        self.rule = rule
        self.reason = reason
