"""
Incremental majority heuristic package.

Exposes the HeuristicAlg class for automatic registration.
"""

from .algorithm import HeuristicAlg
from .implementation import heuristic, heuristic_interactive

__all__ = ["HeuristicAlg", "heuristic", "heuristic_interactive"]
