"""
Monitoring Interfaces for WildCSP Algorithms.

Pure domain module with two contracts:

* ``AlgorithmMonitor``: progress and warning sink used by the registered
  algorithm wrappers. Best-effort, never expected to raise.
* ``HeuristicObserver``: synchronous step callback threaded through the
  heuristic's incremental loop, called once per incorporated string. The
  solver waits for it to return, so an observer may block (for instance on a
  keypress) to give a human-paced trace.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, Tuple, runtime_checkable

if TYPE_CHECKING:
    from .string_set import StringSet


@runtime_checkable
class AlgorithmMonitor(Protocol):
    """
    Minimal contract for algorithm execution monitoring.

    Common Parameters:
        progress (float): Progress fraction from 0.0 to 1.0.
        message (str): Short, descriptive event message.
        **data (Any): Additional serializable payload data.
    """

    def on_progress(self, progress: float, message: str, /, **data: Any) -> None:
        """Report algorithm progress event."""
        ...  # pragma: no cover

    def on_warning(self, message: str, /, **data: Any) -> None:
        """Report non-fatal warning event."""
        ...  # pragma: no cover

    def is_cancelled(self) -> bool:
        """Check if execution has been cancelled externally."""
        return False  # pragma: no cover


class HeuristicObserver(Protocol):
    """
    Step callback of the heuristic solver.

    Args:
        key: Center under construction, undecided positions hold ``-``
        string_set: The set being solved
        match_counts: Agreeing-position count per incorporated string,
            exactly ``current_index + 1`` entries
        position_groups: Per position, indices of incorporated strings that
            agree with ``key`` there
        current_index: Index of the string just incorporated
        key_changed: Whether any position of ``key`` took a new value in
            this step

    All arguments are immutable snapshots.
    """

    def __call__(
        self,
        key: str,
        string_set: "StringSet",
        match_counts: Tuple[int, ...],
        position_groups: Tuple[Tuple[int, ...], ...],
        current_index: int,
        key_changed: bool,
    ) -> None: ...  # pragma: no cover


class NoOpMonitor:
    """Default monitor that does nothing (safe fallback)."""

    def on_progress(self, progress: float, message: str, /, **data: Any) -> None:
        pass

    def on_warning(self, message: str, /, **data: Any) -> None:
        pass

    def is_cancelled(self) -> bool:
        return False


class LoggingMonitor(NoOpMonitor):
    """Simple logging based monitor."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def on_progress(self, progress: float, message: str, /, **data: Any) -> None:
        self._logger.debug("[PROGRESS] p=%.0f%% msg=%s", progress * 100, message)

    def on_warning(self, message: str, /, **data: Any) -> None:
        self._logger.warning("[WARNING] %s ctx=%s", message, data)
