"""
WildCSP Infrastructure

Technical services used by the entry points.
"""

from .logging_config import LoggerConfig, get_logger, setup_basic_logging

__all__ = ["LoggerConfig", "get_logger", "setup_basic_logging"]
