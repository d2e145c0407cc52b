"""
Logging Configuration for WildCSP

Centralized logging setup. Configuration is environment-variable driven so
the same code serves the CLI, the timing harness and the tests.

Environment Variables:
    LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    LOG_DIRECTORY: Directory for log files
    LOG_BASE_NAME: Base filename for log files
    LOG_MAX_BYTES: Maximum file size before rotation
    LOG_BACKUP_COUNT: Number of backup files to keep
    LOG_TO_STDOUT: Whether to log to console instead of file

Example:
    Basic setup using environment variables::

        from wildcsp.infrastructure.logging_config import LoggerConfig

        LoggerConfig.initialize()
        logger = LoggerConfig.get_logger(__name__)
        logger.info("Application started")
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_basic_logging(
    level: Optional[str] = None,
    log_dir: Optional[str] = None,
    base_name: Optional[str] = None,
    max_bytes: Optional[int] = None,
    backup_count: Optional[int] = None,
    log_file_path: Optional[str] = None,
    log_to_stdout: Optional[bool] = None,
) -> None:
    """Configure the root logger using environment variables as defaults.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR) - defaults to LOG_LEVEL env var
        log_dir: Directory for log files - defaults to LOG_DIRECTORY env var
        base_name: Base name for log files - defaults to LOG_BASE_NAME env var
        max_bytes: Maximum file size before rotation - defaults to LOG_MAX_BYTES env var
        backup_count: Number of backups to maintain - defaults to LOG_BACKUP_COUNT env var
        log_file_path: Full file path (overrides log_dir + base_name combination)
        log_to_stdout: Log to stderr instead of file - defaults to LOG_TO_STDOUT env var

    Note:
        Replaces every handler of the root logger.
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    log_dir = log_dir or os.getenv("LOG_DIRECTORY", "outputs/logs")
    base_name = base_name or os.getenv("LOG_BASE_NAME", "wildcsp")
    max_bytes = max_bytes or int(os.getenv("LOG_MAX_BYTES", "10485760"))  # 10MB
    backup_count = backup_count or int(os.getenv("LOG_BACKUP_COUNT", "5"))
    if log_to_stdout is None:
        env_flag = os.getenv("LOG_TO_STDOUT", "false").lower()
        log_to_stdout = env_flag in {"1", "true", "yes", "on"}

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if log_to_stdout:
        # stderr keeps solver reports on stdout clean
        handler: logging.Handler = logging.StreamHandler()
    else:
        if log_file_path:
            log_file = Path(log_file_path)
            log_file.parent.mkdir(parents=True, exist_ok=True)
        else:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            log_file = log_path / f"{base_name}.log"
        handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
        existing.close()

    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the root configuration."""
    return logging.getLogger(name)


class LoggerConfig:
    """Idempotent logging initialisation shared by all entry points.

    Attributes:
        _initialized: Whether logging has been set up
        _log_level: Current logging level
    """

    _initialized = False
    _log_level = None

    @classmethod
    def initialize(cls, level: Optional[str] = None, **kwargs) -> None:
        """Set up logging once; later calls are no-ops.

        Args:
            level: Logging level to use (defaults to LOG_LEVEL env var)
            **kwargs: Additional arguments passed to setup_basic_logging()
        """
        if not cls._initialized:
            level = level or os.getenv("LOG_LEVEL", "INFO")
            setup_basic_logging(level=level, **kwargs)
            cls._log_level = level
            cls._initialized = True

    @classmethod
    def get_level(cls) -> str:
        """Return the current logging level (e.g. 'INFO', 'DEBUG')."""
        return cls._log_level or os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def set_level(cls, level: str) -> None:
        """Change the logging level at runtime."""
        cls._log_level = level
        logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def reset(cls) -> None:
        """Forget the previous initialisation (used by tests)."""
        cls._initialized = False
        cls._log_level = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Initialise on first use and return the named logger."""
        if not cls.is_initialized():
            cls.initialize()
        return get_logger(name)
