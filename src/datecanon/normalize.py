"""Date canonicalisation pipeline.

Pipeline shape, per line:
- match the date shape -> raw fields
- normalize fields -> integers
- validate against the calendar rules
- render -> 'dd Mon yyyy'

A bad line never stops the stream: each line ends as exactly one canonical
date or exactly one diagnostic.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TextIO

from .errors import DateCanonError, DateNotValid, FormatNotRecognised
from .fields import normalize_fields
from .records import match_line, strip_terminator
from .render import render_date
from .rules import validate


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineResult:
    line: str
    output: Optional[str] = None
    error: Optional[DateCanonError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def diagnostic(self) -> str:
        if self.error is None:
            return ""
        return f"{self.line} - {self.error.message}"


@dataclass
class Summary:
    accepted: int = 0
    unrecognised: int = 0
    invalid: int = 0

    @property
    def rejected(self) -> int:
        return self.unrecognised + self.invalid


def handle_line(line: str) -> LineResult:
    """Canonicalise one line (without its terminator)."""
    try:
        raw = match_line(line)
        date = validate(normalize_fields(raw))
    except (FormatNotRecognised, DateNotValid) as ex:
        logger.debug("rejected %r: %s", line, ex)
        return LineResult(line=line, error=ex)
    return LineResult(line=line, output=render_date(date))


def normalize_lines(lines: Iterable[str]) -> Iterator[LineResult]:
    """Lazily canonicalise each line in order."""
    for line in lines:
        yield handle_line(strip_terminator(line))


def run(lines: Iterable[str], out: TextIO, err: TextIO) -> Summary:
    """Write every result to `out` or `err` as soon as it is produced."""
    summary = Summary()
    for res in normalize_lines(lines):
        if res.ok:
            summary.accepted += 1
            out.write(res.output + "\n")
        else:
            if isinstance(res.error, FormatNotRecognised):
                summary.unrecognised += 1
            else:
                summary.invalid += 1
            err.write(res.diagnostic + "\n")
    logger.debug("accepted=%d unrecognised=%d invalid=%d",
                 summary.accepted, summary.unrecognised, summary.invalid)
    return summary
