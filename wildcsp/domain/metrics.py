"""
Domain: Metrics for wildcard closest string evaluation

Distance between a binary candidate and strings over {0, 1, *}. A wildcard
matches either binary value, so it never counts as a mismatch. The objective
minimised by every solver is the radius: the largest per-string mismatch
count over the set.
"""

from typing import Iterable, List, Sequence

from .string_set import WILDCARD


def mismatches(candidate: str, string: str) -> int:
    """
    Count positions where ``string`` has a concrete character differing from
    ``candidate``.

    Args:
        candidate: Binary candidate string
        string: String over {0, 1, *}

    Returns:
        int: Number of mismatching positions

    Raises:
        ValueError: If strings have different lengths
    """
    if len(candidate) != len(string):
        raise ValueError("Strings must have the same length")

    return sum(c != s and s != WILDCARD for c, s in zip(candidate, string))


def distances_to_all(candidate: str, strings: Iterable[str]) -> List[int]:
    """Return the mismatch count of ``candidate`` against each string."""
    return [mismatches(candidate, s) for s in strings]


def radius(candidate: str, strings: Iterable[str]) -> int:
    """
    Calculate the worst-case mismatch count of a candidate over a set.

    Args:
        candidate: Binary candidate string
        strings: Strings over {0, 1, *} (a StringSet works as well)

    Returns:
        int: Maximum mismatch count, 0 for an empty set
    """
    return max(distances_to_all(candidate, strings), default=0)


def bounded_radius(candidate: str, strings: Sequence[str], bound: int) -> int:
    """
    Calculate the radius, giving up once it reaches ``bound``.

    The returned value is exact when it is lower than ``bound``; otherwise it
    is some value ``>= bound``.
    """
    worst = 0
    for s in strings:
        distance = mismatches(candidate, s)
        if distance > worst:
            worst = distance
            if worst >= bound:
                break
    return worst
