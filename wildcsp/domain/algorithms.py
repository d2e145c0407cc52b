"""
Domain: WildCSP Algorithms

Abstract algorithm interface, result type and the global algorithm registry.
Concrete solvers live in the top-level ``algorithms`` package and register
themselves on import.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypedDict

from .errors import AlgorithmNotFoundError
from .monitoring import AlgorithmMonitor, NoOpMonitor
from .result import Result
from .string_set import StringSet


# =============================================================================
# ALGORITHM RESULT TYPES
# =============================================================================
class AlgorithmResult(TypedDict):
    """
    Complete algorithm result type.

    This represents the full structured result returned by registered
    algorithms.
    """

    success: bool  # Whether the algorithm completed successfully
    center_string: str  # The center string solution
    max_distance: int  # Radius of the center over the input set
    parameters: Dict[str, Any]  # Algorithm parameters used
    error: str | None  # Error message if any
    metadata: Dict[str, Any]  # Detailed execution metadata


def to_result(algorithm_result: AlgorithmResult) -> Result:
    """
    Convert a successful structured result into a :class:`Result`.

    Raises:
        ValueError: If the run did not succeed
    """
    if not algorithm_result["success"]:
        raise ValueError(algorithm_result["error"] or "Algorithm run failed")
    return Result(algorithm_result["center_string"], algorithm_result["max_distance"])


# =============================================================================
# ALGORITHM REGISTRY
# =============================================================================

global_registry: dict[str, type] = {}


def register_algorithm(cls: type) -> type:
    """
    Decorator to register an algorithm class in the global registry.

    Args:
        cls: Algorithm class to be registered

    Returns:
        type: The class itself, allowing use as decorator
    """
    algorithm_name = getattr(cls, "name", cls.__name__)
    global_registry[algorithm_name] = cls
    return cls


def get_algorithm(name: str) -> type:
    """
    Look up a registered algorithm class by name.

    Raises:
        AlgorithmNotFoundError: If no algorithm is registered under ``name``
    """
    try:
        return global_registry[name]
    except KeyError:
        available = ", ".join(sorted(global_registry)) or "none"
        raise AlgorithmNotFoundError(
            f"Algorithm '{name}' not found (available: {available})"
        ) from None


# =============================================================================
# ALGORITHM INTERFACES
# =============================================================================


class CSPAlgorithm(ABC):
    """Abstract base interface for all WildCSP algorithms."""

    # Required class attributes
    name: str
    default_params: dict = {}
    is_exact: bool = False

    def __init__(
        self,
        string_set: StringSet,
        monitor: Optional[AlgorithmMonitor] = None,
        **params,
    ):
        """
        Initialize algorithm with the input set and dependencies.

        Args:
            string_set: Validated input set (never mutated)
            monitor: AlgorithmMonitor for progress/warnings (NoOpMonitor if omitted)
            **params: Algorithm-specific parameters
        """
        self.string_set = string_set
        self.params = {**self.default_params, **params}
        self._monitor = monitor if monitor is not None else NoOpMonitor()

    def _report_progress(self, progress: float, message: str, /, **data: Any) -> None:
        self._monitor.on_progress(progress, message, **data)

    def _report_warning(self, message: str, /, **data: Any) -> None:
        self._monitor.on_warning(message, **data)

    def _base_metadata(self, execution_time: float) -> Dict[str, Any]:
        return {
            "algorithm_name": self.name,
            "execution_time": execution_time,
            "num_strings": self.string_set.num_strings,
            "string_length": self.string_set.string_length,
            "is_exact": self.is_exact,
        }

    def _build_success(
        self, result: Result, start_time: float, **extra: Any
    ) -> AlgorithmResult:
        metadata = self._base_metadata(time.time() - start_time)
        metadata.update(extra)
        return AlgorithmResult(
            success=True,
            center_string=result.center,
            max_distance=result.score,
            parameters=self.get_actual_params(),
            error=None,
            metadata=metadata,
        )

    def _build_failure(self, exc: Exception, start_time: float) -> AlgorithmResult:
        error_message = f"Error executing {self.name} algorithm: {exc}"
        self._report_warning(error_message)
        metadata = self._base_metadata(time.time() - start_time)
        metadata["error_type"] = type(exc).__name__
        return AlgorithmResult(
            success=False,
            center_string="",  # Empty string on error
            max_distance=-1,  # Invalid distance to indicate error
            parameters=self.get_actual_params(),
            error=error_message,
            metadata=metadata,
        )

    @abstractmethod
    def run(self) -> AlgorithmResult:
        """
        Execute algorithm and return structured result.

        Returns:
            AlgorithmResult: Dictionary containing:
                - center_string: The center string solution
                - max_distance: Radius of the center over the set
                - parameters: Algorithm parameters used
                - metadata: Detailed execution metadata
        """

    def get_actual_params(self) -> dict[str, Any]:
        """Return actual parameters used (merged defaults and received)."""
        return {k: v for k, v in self.params.items() if not callable(v)}
