"""Command-line interface for datecanon.

- reads dates from stdin or a file, one per line
- writes canonical dates to stdout
- writes rejected lines, with the reason, to stderr
"""

from __future__ import annotations
import argparse
import io
import logging
import sys
from typing import TextIO

from .normalize import run


def _open_input(path: str) -> TextIO:
    # Undecodable bytes become U+FFFD so the line is rejected on its own.
    if path == "-":
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors="replace")
        return sys.stdin
    return open(path, "r", encoding="utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="datecanon", description="Rewrite dates as 'dd Mon yyyy'.")
    p.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    p.add_argument("--strict", action="store_true", help="Exit with status 1 if any line was rejected")
    p.add_argument("-v", "--verbose", action="store_true", help="Log each rejection reason to stderr")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("datecanon").setLevel(logging.DEBUG)

    try:
        fh = _open_input(args.path)
    except OSError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2

    if fh is sys.stdin:
        summary = run(fh, sys.stdout, sys.stderr)
    else:
        with fh:
            summary = run(fh, sys.stdout, sys.stderr)

    if args.strict and summary.rejected:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
