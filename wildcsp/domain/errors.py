"""
WildCSP Domain Exceptions

Defines custom exceptions for domain and application errors.
"""


class WildCSPError(Exception):
    """Base exception for all WildCSP exceptions."""

    pass


class DomainError(WildCSPError):
    """Base exception for domain errors."""

    pass


class ApplicationError(WildCSPError):
    """Base exception for application errors."""

    pass


# Dataset Exceptions
class DatasetError(DomainError):
    """Error related to string sets."""

    pass


class DatasetValidationError(DatasetError):
    """String set violates the fixed-length or alphabet invariant."""

    pass


# Algorithm Exceptions
class AlgorithmError(DomainError):
    """Error related to algorithms."""

    pass


class AlgorithmNotFoundError(AlgorithmError):
    """Algorithm not found."""

    pass


class AlgorithmParameterError(AlgorithmError):
    """Error in algorithm parameters."""

    pass


# Configuration Exceptions
class ConfigurationError(ApplicationError):
    """Configuration error."""

    pass
