"""
WildCSP Domain

Core entities of the wildcard closest string problem: the string set, the
quality metric, solver results and the algorithm framework.
"""

from .algorithms import (
    AlgorithmResult,
    CSPAlgorithm,
    get_algorithm,
    global_registry,
    register_algorithm,
    to_result,
)
from .errors import (
    AlgorithmError,
    AlgorithmNotFoundError,
    AlgorithmParameterError,
    ApplicationError,
    ConfigurationError,
    DatasetError,
    DatasetValidationError,
    DomainError,
    WildCSPError,
)
from .metrics import (
    bounded_radius,
    distances_to_all,
    mismatches,
    radius,
)
from .monitoring import AlgorithmMonitor, HeuristicObserver, LoggingMonitor, NoOpMonitor
from .result import Result
from .string_set import ALPHABET, WILDCARD, StringSet

__all__ = [
    # Algorithms
    "AlgorithmResult",
    "CSPAlgorithm",
    "get_algorithm",
    "global_registry",
    "register_algorithm",
    "to_result",
    # Entities
    "ALPHABET",
    "WILDCARD",
    "StringSet",
    "Result",
    # Metrics
    "mismatches",
    "distances_to_all",
    "radius",
    "bounded_radius",
    # Monitoring
    "AlgorithmMonitor",
    "HeuristicObserver",
    "LoggingMonitor",
    "NoOpMonitor",
    # Errors
    "WildCSPError",
    "DomainError",
    "ApplicationError",
    "DatasetError",
    "DatasetValidationError",
    "AlgorithmError",
    "AlgorithmNotFoundError",
    "AlgorithmParameterError",
    "ConfigurationError",
]
