"""Tests for the logging setup."""

import logging
import logging.handlers

import pytest

from wildcsp.infrastructure.logging_config import LoggerConfig, setup_basic_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    LoggerConfig.reset()
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    LoggerConfig.reset()


def test_file_logging(tmp_path):
    setup_basic_logging(level="DEBUG", log_dir=str(tmp_path), log_to_stdout=False)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, logging.handlers.RotatingFileHandler)

    logging.getLogger("wildcsp.test").info("hello")
    handler.flush()
    assert "hello" in (tmp_path / "wildcsp.log").read_text(encoding="utf-8")


def test_explicit_log_file(tmp_path):
    target = tmp_path / "sub" / "run.log"
    setup_basic_logging(log_file_path=str(target), log_to_stdout=False)
    assert target.parent.is_dir()


def test_console_logging_from_env(monkeypatch):
    monkeypatch.setenv("LOG_TO_STDOUT", "true")
    setup_basic_logging(level="WARNING")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert type(root.handlers[0]) is logging.StreamHandler


def test_handlers_replaced(tmp_path):
    setup_basic_logging(log_to_stdout=True)
    setup_basic_logging(log_to_stdout=True)
    assert len(logging.getLogger().handlers) == 1


def test_logger_config_idempotent():
    LoggerConfig.initialize(level="ERROR", log_to_stdout=True)
    LoggerConfig.initialize(level="DEBUG", log_to_stdout=True)
    assert LoggerConfig.is_initialized()
    assert LoggerConfig.get_level() == "ERROR"
    assert logging.getLogger().level == logging.ERROR


def test_logger_config_set_level():
    LoggerConfig.initialize(level="INFO", log_to_stdout=True)
    LoggerConfig.set_level("DEBUG")
    assert LoggerConfig.get_level() == "DEBUG"
    assert logging.getLogger().level == logging.DEBUG


def test_get_logger_initializes():
    logger = LoggerConfig.get_logger("wildcsp.sample")
    assert LoggerConfig.is_initialized()
    assert logger.name == "wildcsp.sample"
