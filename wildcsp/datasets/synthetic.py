"""
Random string-set generation.

Strings are drawn position by position: a wildcard with probability
``wildcard_rate``, otherwise ``0`` or ``1`` with equal probability. With no
rate given, the three symbols are equally likely.

Example:
    ```python
    string_set, params = generate_string_set_from_params(n=8, m=5, seed=42)
    print(params["seed"], params["wildcards"])
    ```
"""

import logging
import random
import time
from typing import Any, Dict, Optional, Tuple

from wildcsp.domain.string_set import WILDCARD, StringSet

logger = logging.getLogger(__name__)

UNIFORM_WILDCARD_RATE = 1 / 3


def generate_strings(
    n: int, m: int, wildcard_rate: float, rng: random.Random
) -> list[str]:
    """Draw ``m`` strings of length ``n`` from ``rng``."""
    strings = []
    for _ in range(m):
        chars = [
            WILDCARD if rng.random() < wildcard_rate else rng.choice("01")
            for _ in range(n)
        ]
        strings.append("".join(chars))
    return strings


def generate_string_set(
    n: int,
    m: int,
    wildcard_rate: Optional[float] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> StringSet:
    """
    Generate a random string set.

    Args:
        n: String length (positive)
        m: Number of strings (non-negative)
        wildcard_rate: Probability of ``*`` per position, in [0, 1]
        seed: Seed for a private random generator
        rng: Generator to draw from (takes precedence over ``seed``)

    Returns:
        StringSet: Set satisfying the length and alphabet invariants

    Raises:
        ValueError: On a non-positive length, negative count or a rate
            outside [0, 1]
    """
    if n < 1:
        raise ValueError(f"String length must be positive, got {n}")
    if m < 0:
        raise ValueError(f"Number of strings must be non-negative, got {m}")
    if wildcard_rate is None:
        wildcard_rate = UNIFORM_WILDCARD_RATE
    if not 0.0 <= wildcard_rate <= 1.0:
        raise ValueError(f"Wildcard rate must be in [0, 1], got {wildcard_rate}")

    if rng is None:
        rng = random.Random(seed)

    return StringSet(n, generate_strings(n, m, wildcard_rate, rng))


def generate_string_set_from_params(
    n: int,
    m: int,
    wildcard_rate: Optional[float] = None,
    seed: Optional[int] = None,
) -> Tuple[StringSet, Dict[str, Any]]:
    """
    Generate a set and report the parameters actually used.

    A seed is derived from the clock when none is given, so any generated set
    can be reproduced from the returned parameters.

    Returns:
        Tuple[StringSet, Dict[str, Any]]: The set and ``n``, ``m``,
        ``wildcard_rate``, ``seed`` and ``wildcards`` (count drawn)
    """
    if seed is None:
        seed = int(time.time() * 1000000) % (2**32)
        logger.info("Seed generated automatically: %s", seed)

    effective_rate = UNIFORM_WILDCARD_RATE if wildcard_rate is None else wildcard_rate
    logger.debug(
        "Generating string set with n=%s, m=%s, wildcard_rate=%.3f, seed=%s",
        n,
        m,
        effective_rate,
        seed,
    )
    string_set = generate_string_set(n, m, effective_rate, seed)

    params = {
        "n": n,
        "m": m,
        "wildcard_rate": effective_rate,
        "seed": seed,
        "wildcards": string_set.get_statistics()["wildcards"],
    }
    logger.info("Generator parameters: %s", params)
    return string_set, params
