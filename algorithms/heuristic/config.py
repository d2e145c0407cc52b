"""
Default configurations for the heuristic algorithm.

CONFIGURATION HIERARCHY:
- This file defines ALGORITHM DEFAULT CONFIG (lowest priority)
- Can be overridden by:
  * config/settings.yaml (``algorithms.Heuristic`` section)
  * keyword parameters passed to HeuristicAlg

Attributes:
    HEURISTIC_DEFAULTS (dict): Default heuristic parameters.
"""

HEURISTIC_DEFAULTS = {
    "undecided_fill": "0",  # value for positions that are '*' in every string
}
