import io

import pytest

from datecanon.errors import DateNotValid, FormatNotRecognised
from datecanon.normalize import handle_line, normalize_lines, run
from datecanon.records import match_line
from datecanon.fields import normalize_fields
from datecanon.render import render_date
from datecanon.rules import ValidatedDate


@pytest.mark.parametrize("line, expected", [
    ("01/02/49", "01 Feb 2049"),
    ("01/02/50", "01 Feb 1950"),
    ("01/02/99", "01 Feb 1999"),
    ("01/02/00", "01 Feb 2000"),
    ("29 02 2000", "29 Feb 2000"),
    ("29 02 2004", "29 Feb 2004"),
    ("1 JAN 2000", "01 Jan 2000"),
    ("1 jan 2000", "01 Jan 2000"),
    ("1 Jan 2000", "01 Jan 2000"),
    ("30 04 2000", "30 Apr 2000"),
    ("1-1-1753", "01 Jan 1753"),
    ("5/dec/3000", "05 Dec 3000"),
])
def test_handle_line_accepts(line, expected):
    res = handle_line(line)
    assert res.ok
    assert res.output == expected


@pytest.mark.parametrize("line", [
    "1-2/1999",
    "1 JaN 2000",
    "123/4/2000",
    "1/130/2000",
    "",
    "1/2/2000 ",
])
def test_handle_line_format_not_recognised(line):
    res = handle_line(line)
    assert isinstance(res.error, FormatNotRecognised)
    assert res.output is None
    assert res.diagnostic == f"{line} - Format not recognised."


@pytest.mark.parametrize("line", [
    "29 02 1900",
    "1 1 1752",
    "1 1 3001",
    "31 04 2000",
    "1 xyz 2000",
    "0/1/2000",
])
def test_handle_line_date_not_valid(line):
    res = handle_line(line)
    assert isinstance(res.error, DateNotValid)
    assert res.diagnostic == f"{line} - Date not valid."


@pytest.mark.parametrize("day, month, year", [
    (1, 1, 1753),
    (29, 2, 2000),
    (9, 11, 1984),
    (31, 12, 3000),
])
def test_canonical_output_parses_back_to_same_date(day, month, year):
    text = render_date(ValidatedDate(day, month, year))
    again = normalize_fields(match_line(text))
    assert (again.day, again.month, again.year) == (day, month, year)


def test_normalize_lines_strips_terminators_and_keeps_order():
    results = list(normalize_lines(["1/2/2000\n", "bad\n", "3/4/05"]))
    assert [r.line for r in results] == ["1/2/2000", "bad", "3/4/05"]
    assert [r.ok for r in results] == [True, False, True]


def test_run_splits_results_across_sinks():
    out, err = io.StringIO(), io.StringIO()
    summary = run(io.StringIO("1/2/2000\n1-2/1999\n31 04 2000\n9 SEP 84\n"), out, err)

    assert out.getvalue() == "01 Feb 2000\n09 Sep 1984\n"
    assert err.getvalue() == (
        "1-2/1999 - Format not recognised.\n"
        "31 04 2000 - Date not valid.\n"
    )
    assert (summary.accepted, summary.unrecognised, summary.invalid) == (2, 1, 1)
    assert summary.rejected == 2


@pytest.mark.parametrize("line", ["1/00/2000", "1/0/2000", "1 xyz 2000"])
def test_zero_or_unknown_month_names_the_rule(line):
    res = handle_line(line)
    assert res.error.rule == "unknown_month"
    assert res.diagnostic == f"{line} - Date not valid."
