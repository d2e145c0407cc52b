"""
Step-by-step trace of the heuristic for interactive runs.

``TracePrinter`` is a HeuristicObserver: after each incorporated string it
prints the current key, the string, the per-string match counts (``mL``) and
the per-position groups of agreeing strings (``mS``), then waits for Enter.
When stdin is exhausted (for instance the set itself was piped in) the
remaining steps are printed without pausing.
"""

import logging
from typing import Callable, Optional, Sequence

import typer

from wildcsp.domain.string_set import StringSet
from wildcsp.utils.config import is_automated

logger = logging.getLogger(__name__)

NEXT_STEP_PROMPT = "[Enter] next step "


def format_trace_step(
    key: str,
    string_set: StringSet,
    match_counts: Sequence[int],
    position_groups: Sequence[Sequence[int]],
    current_index: int,
    key_changed: bool,
) -> str:
    counts = "  ".join(f"{i}({match_counts[i]})" for i in range(current_index + 1))
    lines = [
        f"Key: {key}" + (" (new)" if key_changed else ""),
        f"{current_index:<3}: {string_set[current_index]}",
        f"mL:  {counts}",
        "mS:",
    ]
    for position, group in enumerate(position_groups):
        members = ", ".join(str(i) for i in group)
        lines.append(f"{position}({key[position]}): [{members}]")
    return "\n".join(lines)


class TracePrinter:
    """
    Print each heuristic step and block until the user presses Enter.

    Args:
        echo: Output function, ``typer.echo`` by default
        wait: Blocking callable run after each step; ``None`` disables waiting
    """

    def __init__(
        self,
        echo: Callable[[str], None] = typer.echo,
        wait: Optional[Callable[[], object]] = None,
    ):
        self._echo = echo
        self._wait = wait
        self.steps = 0

    @classmethod
    def interactive(cls) -> "TracePrinter":
        printer = cls()
        printer._wait = printer._wait_for_enter
        return printer

    def _wait_for_enter(self) -> None:
        if is_automated():
            return
        try:
            input(NEXT_STEP_PROMPT)
        except EOFError:
            logger.info("End of input reached, tracing remaining steps without pausing")
            self._echo("")
            self._wait = None

    def __call__(
        self,
        key: str,
        string_set: StringSet,
        match_counts: Sequence[int],
        position_groups: Sequence[Sequence[int]],
        current_index: int,
        key_changed: bool,
    ) -> None:
        self.steps += 1
        self._echo(
            format_trace_step(
                key,
                string_set,
                match_counts,
                position_groups,
                current_index,
                key_changed,
            )
        )
        if self._wait is not None:
            self._wait()
