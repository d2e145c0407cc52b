"""
Registered wrapper of the incremental majority heuristic.

The heuristic folds the input strings in one at a time and decides each
position of the center by a running majority vote over concrete characters,
revising a position when its majority flips. It runs in O(n*m) amortized time
and gives no optimality guarantee; BruteForce is the reference it is checked
against.

Classes:
    HeuristicAlg: Heuristic algorithm implementation.
"""

import time

from wildcsp.domain.algorithms import AlgorithmResult, CSPAlgorithm, register_algorithm
from wildcsp.domain.errors import AlgorithmParameterError

from .config import HEURISTIC_DEFAULTS
from .implementation import heuristic, heuristic_interactive


@register_algorithm
class HeuristicAlg(CSPAlgorithm):
    """
    Incremental majority heuristic for the wildcard closest string problem.

    Args:
        string_set: Input string set
        monitor: Optional AlgorithmMonitor for progress reporting
        **params: Algorithm-specific parameters. ``observer`` (a
            HeuristicObserver) turns on the step-by-step trace.

    Methods:
        run(): Execute the algorithm and return AlgorithmResult.
    """

    name = "Heuristic"
    default_params: dict = HEURISTIC_DEFAULTS

    def run(self) -> AlgorithmResult:
        """
        Execute the heuristic.

        Returns:
            AlgorithmResult: Center string, radius, parameters and metadata
        """
        start_time = time.time()

        try:
            self._report_progress(0.0, "Starting Heuristic algorithm")

            undecided_fill = self.params.get("undecided_fill", "0")
            if undecided_fill not in ("0", "1"):
                raise AlgorithmParameterError(
                    f"undecided_fill must be '0' or '1', got {undecided_fill!r}"
                )

            observer = self.params.get("observer")
            if observer is not None:
                result = heuristic_interactive(
                    self.string_set, observer, undecided_fill=undecided_fill
                )
            else:
                result = heuristic(self.string_set, undecided_fill=undecided_fill)

            self._report_progress(1.0, "Heuristic algorithm finished")
            return self._build_success(
                result, start_time, interactive=observer is not None
            )

        except Exception as e:
            return self._build_failure(e, start_time)
