"""
Registered wrapper of the exhaustive search.

Brute force scores all 2^n binary candidates and is optimal by construction;
it exists to validate the heuristic on short strings. ``max_length`` guards
against runs that would never finish.

Classes:
    BruteForceAlg: Brute-force algorithm implementation.
"""

import time

from wildcsp.domain.algorithms import AlgorithmResult, CSPAlgorithm, register_algorithm
from wildcsp.domain.errors import AlgorithmParameterError

from .config import BRUTE_FORCE_DEFAULTS
from .implementation import brute_force


@register_algorithm
class BruteForceAlg(CSPAlgorithm):
    """
    Exhaustive search over every binary string of the target length.

    Args:
        string_set: Input string set
        monitor: Optional AlgorithmMonitor for progress reporting
        **params: ``max_length`` and ``prune``

    Methods:
        run(): Execute the algorithm and return AlgorithmResult.
    """

    name = "BruteForce"
    default_params: dict = BRUTE_FORCE_DEFAULTS
    is_exact = True

    def run(self) -> AlgorithmResult:
        """
        Execute the exhaustive search.

        Returns:
            AlgorithmResult: Center string, radius, parameters and metadata
        """
        start_time = time.time()

        try:
            n = self.string_set.string_length
            max_length = self.params.get("max_length")
            if max_length is not None and n > max_length:
                raise AlgorithmParameterError(
                    f"String length {n} exceeds brute-force limit {max_length}"
                )

            self._report_progress(
                0.0, f"Starting BruteForce algorithm (2^{n} candidates)"
            )
            result = brute_force(self.string_set, prune=self.params.get("prune", True))
            self._report_progress(1.0, "BruteForce algorithm finished")

            return self._build_success(result, start_time, search_space=2**n)

        except Exception as e:
            return self._build_failure(e, start_time)
