"""Unit tests for plotpy.utils.logging_config module."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from plotpy.utils import logging_config
from plotpy.utils.logging_config import (
    DEFAULT_FORMAT,
    LoggerAdapter,
    _create_console_handler,
    _create_file_handler,
    get_logger,
    set_log_level,
    setup_logger,
)


@pytest.fixture
def clean_loggers() -> Iterator[None]:
    """Remove loggers created by a test from the module cache."""
    before = set(logging_config._loggers)
    yield
    for name in set(logging_config._loggers) - before:
        logger = logging_config._loggers.pop(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


class TestCreateHandlers:
    """Tests for the handler factory functions."""

    def test_create_console_handler_with_info_level_creates_handler(self) -> None:
        """Test creating console handler with INFO level."""
        # Arrange
        formatter = logging.Formatter(DEFAULT_FORMAT)

        # Act
        handler = _create_console_handler(logging.INFO, formatter)

        # Assert
        assert isinstance(handler, logging.StreamHandler)
        assert handler.level == logging.INFO
        assert handler.formatter == formatter

    def test_create_file_handler_creates_log_directory(self, tmp_path: Path) -> None:
        """Test the rotating file handler and its directory."""
        # Arrange
        log_dir = tmp_path / "logs"
        formatter = logging.Formatter(DEFAULT_FORMAT)

        # Act
        handler = _create_file_handler(
            "plotpy.log", str(log_dir), logging.DEBUG, formatter, "a", 1024, 2
        )

        # Assert
        try:
            assert log_dir.is_dir()
            assert handler.level == logging.DEBUG
            assert handler.maxBytes == 1024
            assert handler.backupCount == 2
        finally:
            handler.close()


@pytest.mark.usefixtures("clean_loggers")
class TestSetupLogger:
    """Tests for setup_logger and get_logger functions."""

    def test_setup_logger_sets_level_and_console_handler(self) -> None:
        """Test level parsing and the console handler."""
        # Act
        logger = setup_logger("plotpy.tests.level", level="debug")

        # Assert
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_logger_with_unknown_level_defaults_to_info(self) -> None:
        """Test an unknown level falls back to INFO."""
        # Act
        logger = setup_logger("plotpy.tests.unknown", level="chatty")

        # Assert
        assert logger.level == logging.INFO

    def test_setup_logger_returns_cached_logger(self) -> None:
        """Test a second call returns the same logger without new handlers."""
        # Act
        first = setup_logger("plotpy.tests.cached")
        second = setup_logger("plotpy.tests.cached", level="ERROR")

        # Assert
        assert first is second
        assert len(second.handlers) == 1

    def test_setup_logger_with_log_file_adds_file_handler(self, tmp_path: Path) -> None:
        """Test the optional rotating file handler."""
        # Act
        logger = setup_logger(
            "plotpy.tests.file", log_file="test.log", log_dir=str(tmp_path), console=False
        )
        logger.info("hello")

        # Assert
        assert len(logger.handlers) == 1
        assert "hello" in (tmp_path / "test.log").read_text(encoding="utf-8")

    def test_get_logger_creates_logger_once(self) -> None:
        """Test get_logger reuses the cache."""
        # Act & Assert
        assert get_logger("plotpy.tests.get") is get_logger("plotpy.tests.get")

    def test_set_log_level_updates_loggers_and_handlers(self) -> None:
        """Test levels of cached loggers change together."""
        # Arrange
        logger = setup_logger("plotpy.tests.set_level", level="INFO")

        # Act
        set_log_level("WARNING")

        # Assert
        assert logger.level == logging.WARNING
        assert all(handler.level == logging.WARNING for handler in logger.handlers)
        set_log_level("INFO")


class TestLoggerAdapter:
    """Tests for LoggerAdapter class."""

    def test_process_prefixes_context(self) -> None:
        """Test extra context is added to the message."""
        # Arrange
        adapter = LoggerAdapter(logging.getLogger("plotpy.tests.adapter"), {"figure": "a.svg"})

        # Act
        message, kwargs = adapter.process("Saved", {})

        # Assert
        assert message == "[figure=a.svg] Saved"
        assert kwargs == {}

    def test_process_without_context_returns_message(self) -> None:
        """Test an empty context leaves the message as is."""
        # Arrange
        adapter = LoggerAdapter(logging.getLogger("plotpy.tests.adapter"), {})

        # Act & Assert
        assert adapter.process("Saved", {}) == ("Saved", {})
