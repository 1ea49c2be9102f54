"""Line-oriented date shape matching.

A date line has the shape:
    <day><sep><month><sep><year>

Example:
    1/Feb/99

Design notes:
- `day` is one or two digits.
- `month` is one or two digits, or three letters in lower, upper or title
  case. Other casings ("jAN", "JaN") are not a date shape at all.
- `year` is two or four digits.
- `sep` is a space, hyphen or slash, and both separators must be the same
  character.
- The whole line must match; nothing here checks that the numbers make sense.
"""

from __future__ import annotations
import re
from dataclasses import dataclass

from .errors import FormatNotRecognised


# [0-9] rather than \d: only ASCII digits count.
DATE_SHAPE = re.compile(
    r"(?P<day>[0-9]{1,2})"
    r"(?P<sep>[ /-])"
    r"(?P<month>[0-9]{1,2}|[a-z]{3}|[A-Z]{3}|[A-Z][a-z]{2})"
    r"(?P=sep)"
    r"(?P<year>[0-9]{2}|[0-9]{4})"
)


@dataclass(frozen=True)
class RawFields:
    day: str
    month: str
    year: str
    sep: str


def strip_terminator(line: str) -> str:
    """Drop the line terminator, leaving any other whitespace alone."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def match_line(line: str) -> RawFields:
    """Split one line into its raw date fields.

    Raises:
        FormatNotRecognised: if the line is not a date shape.
    """
    m = DATE_SHAPE.fullmatch(line)
    if m is None:
        raise FormatNotRecognised(f"not a date shape: {line!r}")

    return RawFields(
        day=m.group("day"),
        month=m.group("month"),
        year=m.group("year"),
        sep=m.group("sep"),
    )
