"""
Exhaustive search for the wildcard closest string problem.

Every binary string of length ``n`` is scored with the radius metric and the
best one is kept. Candidates come from a lazy generator in binary counter
order (``00..0``, ``00..1``, ..., ``11..1``), so memory stays O(n) while time
is O(2^n * n * m). Ties keep the first candidate seen, which is the
numerically smallest one.

Two shortcuts never change the answer:
    - scoring a candidate stops as soon as it can no longer beat the best
      score so far;
    - the search ends once a candidate with score 0 is found.

Functions:
    iter_candidates(length): Lazy enumeration of the candidate space.
    brute_force(string_set): Optimal center by exhaustive search.
"""

import logging
from itertools import product
from typing import Iterator

from wildcsp.domain.metrics import bounded_radius, radius
from wildcsp.domain.result import Result
from wildcsp.domain.string_set import BINARY_ALPHABET, StringSet

logger = logging.getLogger(__name__)


def iter_candidates(length: int) -> Iterator[str]:
    """
    Yield all binary strings of ``length`` in increasing numeric order.

    Each call returns a fresh generator, so the enumeration can be restarted.
    """
    for bits in product(BINARY_ALPHABET, repeat=length):
        yield "".join(bits)


def brute_force(string_set: StringSet, *, prune: bool = True) -> Result:
    """
    Find the optimal center of ``string_set``.

    Args:
        string_set: Input set with ``string_length >= 1`` (not mutated)
        prune: Use the bounded scoring and the zero-score stop

    Returns:
        Result: Numerically smallest center of minimal radius
    """
    strings = string_set.data
    best_center = None
    best_score = string_set.string_length + 1
    evaluated = 0

    for candidate in iter_candidates(string_set.string_length):
        evaluated += 1
        if prune:
            score = bounded_radius(candidate, strings, best_score)
        else:
            score = radius(candidate, strings)

        if score < best_score:
            best_center, best_score = candidate, score
            if prune and best_score == 0:
                break

    logger.debug(
        "[BRUTE_FORCE] center=%s score=%d evaluated=%d",
        best_center,
        best_score,
        evaluated,
    )
    return Result(best_center, best_score)
