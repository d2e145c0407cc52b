"""
Exhaustive search package.

Exposes the BruteForceAlg class for automatic registration.
"""

from .algorithm import BruteForceAlg
from .implementation import brute_force, iter_candidates

__all__ = ["BruteForceAlg", "brute_force", "iter_candidates"]
