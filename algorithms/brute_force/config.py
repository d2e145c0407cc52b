"""
Default configurations for the brute-force algorithm.

CONFIGURATION HIERARCHY:
- This file defines ALGORITHM DEFAULT CONFIG (lowest priority)
- Can be overridden by:
  * config/settings.yaml (``algorithms.BruteForce`` section)
  * keyword parameters passed to BruteForceAlg

Attributes:
    BRUTE_FORCE_DEFAULTS (dict): Default brute-force parameters.
"""

BRUTE_FORCE_DEFAULTS = {
    "max_length": 24,  # refuse longer strings, the search is O(2^n)
    "prune": True,  # bounded scoring and stop on a zero-score center
}
