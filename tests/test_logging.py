"""Tests for logging configuration."""

import logging
from pathlib import Path

from clockface.logging.config import configure_logging, get_logger


def test_configure_logging_defaults() -> None:
    """Test logging configuration with defaults."""
    configure_logging()
    logger = logging.getLogger("clockface")
    assert logger.level == logging.INFO
    assert len(logger.handlers) > 0
    assert logger.propagate is False


def test_configure_logging_debug_level() -> None:
    """Test logging configuration with DEBUG level."""
    configure_logging(log_level="DEBUG")
    logger = logging.getLogger("clockface")
    assert logger.level == logging.DEBUG


def test_configure_logging_replaces_handlers() -> None:
    """Calling twice does not stack handlers."""
    configure_logging()
    configure_logging()
    logger = logging.getLogger("clockface")
    assert len(logger.handlers) == 1


def test_configure_logging_with_file(tmp_path: Path) -> None:
    """Test logging configuration with file output."""
    log_file = tmp_path / "logs" / "test.log"
    configure_logging(log_level="INFO", log_file=log_file)

    logger = logging.getLogger("clockface")
    logger.info("Test message")

    assert log_file.exists()
    assert "Test message" in log_file.read_text()


def test_configure_logging_no_console(tmp_path: Path) -> None:
    """Test logging configuration without console output."""
    log_file = tmp_path / "test.log"
    configure_logging(log_level="INFO", log_file=log_file, enable_console=False)

    logger = logging.getLogger("clockface")
    handler_types = [type(h).__name__ for h in logger.handlers]
    assert "FileHandler" in handler_types
    assert "StreamHandler" not in handler_types


def test_get_logger() -> None:
    """Test get_logger function."""
    logger = get_logger("test_module")
    assert logger.name == "clockface.test_module"
    assert isinstance(logger, logging.Logger)


def test_get_logger_module_name() -> None:
    """Module names inside the package are not prefixed twice."""
    logger = get_logger("clockface.clock.renderer")
    assert logger.name == "clockface.clock.renderer"


def test_logging_format(tmp_path: Path) -> None:
    """Test that log messages have correct format."""
    log_file = tmp_path / "test.log"
    configure_logging(log_level="INFO", log_file=log_file, enable_console=False)

    logger = get_logger("test")
    logger.info("Test message")

    content = log_file.read_text()
    assert "clockface.test" in content
    assert "INFO" in content
    assert "Test message" in content
    assert "|" in content
