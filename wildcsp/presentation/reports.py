"""
Human-readable reports for string sets, solver results and timing sweeps.

Functions:
    format_string_set(string_set): Input block, one string per line.
    format_solutions(heuristic_result, brute_force_result): Side-by-side results.
    format_timing_table(records): Grid table of a timing sweep.
"""

from typing import Iterable, Optional, Union

from tabulate import tabulate

from wildcsp.benchmark.timing import TimingRecord
from wildcsp.domain.result import Result
from wildcsp.domain.string_set import StringSet

TIMING_HEADERS = [
    "n",
    "m",
    "Runs",
    "Heuristic (s)",
    "Brute force (s)",
    "Heuristic score",
    "Brute-force score",
    "Optimal runs",
]


def format_string_set(string_set: StringSet) -> str:
    lines = ["Input:"]
    if string_set.num_strings:
        lines.append(str(string_set))
    else:
        lines.append(f"(no strings, length {string_set.string_length})")
    return "\n".join(lines)


def format_solutions(
    heuristic_result: Result, brute_force_result: Optional[Union[Result, str]]
) -> str:
    """
    Render both solver results in the same canonical form.

    ``brute_force_result`` may be a message explaining why brute force did
    not run, or None to leave its line out.
    """
    lines = [f"Heuristic solution:   {heuristic_result}"]
    if brute_force_result is not None:
        lines.append(f"Brute-force solution: {brute_force_result}")
    return "\n".join(lines)


def _cell(value: Optional[float], fmt: str) -> str:
    return "-" if value is None else format(value, fmt)


def format_timing_table(records: Iterable[TimingRecord]) -> str:
    rows = [
        [
            r.n,
            r.m,
            r.runs,
            _cell(r.heuristic_time, ".6f"),
            _cell(r.brute_force_time, ".6f"),
            _cell(r.heuristic_score, ".2f"),
            _cell(r.brute_force_score, ".2f"),
            "-" if r.optimal_runs is None else f"{r.optimal_runs}/{r.runs}",
        ]
        for r in records
    ]
    return tabulate(
        rows,
        headers=TIMING_HEADERS,
        tablefmt="grid",
        stralign="center",
        disable_numparse=True,
    )
