"""Tests for the text reports."""

from wildcsp.benchmark.timing import TimingRecord
from wildcsp.domain.result import Result
from wildcsp.domain.string_set import StringSet
from wildcsp.presentation.reports import (
    format_solutions,
    format_string_set,
    format_timing_table,
)


def test_format_string_set():
    text = format_string_set(StringSet(3, ["01*", "110"]))
    assert text == "Input:\n01*\n110"


def test_format_empty_string_set():
    text = format_string_set(StringSet(5))
    assert text == "Input:\n(no strings, length 5)"


def test_format_solutions_same_form():
    text = format_solutions(Result("1100", 1), Result("0101", 1))
    lines = text.splitlines()
    assert lines == [
        "Heuristic solution:   1100 (score: 1)",
        "Brute-force solution: 0101 (score: 1)",
    ]


def test_format_solutions_skipped_brute_force():
    text = format_solutions(Result("0", 0), "skipped (n=30 exceeds limit 24)")
    assert text.splitlines()[1] == "Brute-force solution: skipped (n=30 exceeds limit 24)"


def test_format_solutions_heuristic_only():
    assert format_solutions(Result("01", 2), None) == "Heuristic solution:   01 (score: 2)"


def test_format_timing_table():
    records = [
        TimingRecord(
            n=4,
            m=3,
            runs=2,
            heuristic_time=0.0001,
            heuristic_score=1.5,
            brute_force_time=0.002,
            brute_force_score=1.0,
            optimal_runs=1,
        ),
        TimingRecord(n=30, m=3, runs=2, heuristic_time=0.0003, heuristic_score=9.0),
    ]
    table = format_timing_table(records)
    assert "Heuristic (s)" in table
    assert "Brute force (s)" in table
    assert "0.000100" in table
    assert "1/2" in table
    assert "1.50" in table
    assert table.startswith("+")
    lines = [line for line in table.splitlines() if "30" in line]
    assert lines and "-" in lines[0]
