"""
Incremental majority heuristic for the wildcard closest string problem.

The input strings are folded in one at a time, in input order. Each position
of the center ("key") is decided by a running majority vote over the concrete
characters seen so far; wildcards never vote and always agree with the key.

WORKING STATE (one instance per run, never shared):

    key              center under construction, ``-`` while undecided
    zeros / ones     per-position tallies of concrete characters
    match_counts     per incorporated string, positions agreeing with key
    position_groups  per position, incorporated strings agreeing with key

ROUND FOR STRING ``i``:

    1. Tally its concrete characters.
    2. Decide each undecided position it has a concrete character at
       (the first concrete vote always wins). Flip a decided position when the
       other value becomes a strict majority (ties keep the current value).
       On the last string, still-undecided positions get ``undecided_fill``.
    3. Record which positions of string ``i`` agree with the key.
    4. Regroup every flipped position: earlier strings that stopped agreeing
       leave the group (count -1), the ones that now agree join (count +1).
    5. Notify the observer, if any.

The final score is recomputed from scratch with the radius metric, the
bookkeeping is only used to drive and trace the construction.

Functions:
    heuristic(string_set): Run the heuristic.
    heuristic_interactive(string_set, observer): Run it with a step observer.
"""

import logging
from typing import List, Optional

from wildcsp.domain.metrics import radius
from wildcsp.domain.monitoring import HeuristicObserver
from wildcsp.domain.result import Result
from wildcsp.domain.string_set import WILDCARD, StringSet

logger = logging.getLogger(__name__)

UNDECIDED = "-"


class _HeuristicState:
    """Bookkeeping of a single heuristic run."""

    __slots__ = (
        "data",
        "undecided_fill",
        "key",
        "zeros",
        "ones",
        "match_counts",
        "position_groups",
    )

    def __init__(self, string_set: StringSet, undecided_fill: str):
        n = string_set.string_length
        self.data = string_set.data
        self.undecided_fill = undecided_fill
        self.key: List[str] = [UNDECIDED] * n
        self.zeros = [0] * n
        self.ones = [0] * n
        self.match_counts: List[int] = []
        self.position_groups: List[List[int]] = [[] for _ in range(n)]

    def _majority(self, position: int) -> str:
        zeros, ones = self.zeros[position], self.ones[position]
        if zeros > ones:
            return "0"
        if ones > zeros:
            return "1"
        # Even vote: only reachable on a decided position
        return self.key[position]

    def incorporate(self, index: int, is_last: bool) -> bool:
        """Fold string ``index`` in; return whether the key changed."""
        string = self.data[index]
        key = self.key
        changed = False
        flipped = []

        for position, char in enumerate(string):
            if char == WILDCARD:
                if is_last and key[position] == UNDECIDED:
                    key[position] = self.undecided_fill
                    changed = True
                continue

            if char == "0":
                self.zeros[position] += 1
            else:
                self.ones[position] += 1

            current = key[position]
            majority = self._majority(position)
            if majority != current:
                key[position] = majority
                changed = True
                if current != UNDECIDED:
                    flipped.append(position)

        agreeing = 0
        for position, char in enumerate(string):
            if char == WILDCARD or char == key[position]:
                self.position_groups[position].append(index)
                agreeing += 1
        self.match_counts.append(agreeing)

        for position in flipped:
            self._regroup(position, index)

        return changed

    def _regroup(self, position: int, last_index: int) -> None:
        value = self.key[position]
        members = set(self.position_groups[position])
        group = []
        for j in range(last_index + 1):
            char = self.data[j][position]
            agrees = char == WILDCARD or char == value
            if agrees:
                group.append(j)
                if j not in members:
                    self.match_counts[j] += 1
            elif j in members:
                self.match_counts[j] -= 1
        self.position_groups[position] = group

    def notify(
        self,
        observer: HeuristicObserver,
        string_set: StringSet,
        index: int,
        key_changed: bool,
    ) -> None:
        observer(
            "".join(self.key),
            string_set,
            tuple(self.match_counts),
            tuple(tuple(group) for group in self.position_groups),
            index,
            key_changed,
        )

    def center(self) -> str:
        return "".join(self.undecided_fill if c == UNDECIDED else c for c in self.key)


def _solve(
    string_set: StringSet,
    observer: Optional[HeuristicObserver],
    undecided_fill: str,
) -> Result:
    state = _HeuristicState(string_set, undecided_fill)
    last = string_set.num_strings - 1

    for index in range(string_set.num_strings):
        key_changed = state.incorporate(index, index == last)
        if observer is not None:
            state.notify(observer, string_set, index, key_changed)

    center = state.center()
    score = radius(center, string_set)
    logger.debug("[HEURISTIC] center=%s score=%d", center, score)
    return Result(center, score)


def heuristic(string_set: StringSet, *, undecided_fill: str = "0") -> Result:
    """
    Build a center string with the incremental majority heuristic.

    Args:
        string_set: Input set (not mutated)
        undecided_fill: Value for positions that are wildcards in every string

    Returns:
        Result: Center and its exact radius. An empty set gives an all
        ``undecided_fill`` center with score 0.
    """
    return _solve(string_set, None, undecided_fill)


def heuristic_interactive(
    string_set: StringSet,
    observer: HeuristicObserver,
    *,
    undecided_fill: str = "0",
) -> Result:
    """
    Same as :func:`heuristic`, calling ``observer`` after each string.

    The observer runs synchronously, once per string and in input order; the
    solver does not continue until it returns.
    """
    return _solve(string_set, observer, undecided_fill)
