"""Unit tests for logging utilities."""

import logging

import colorlog
import pytest

from youtube_transcript.utils.logging import (
    CONFIGURED_LOGGERS,
    DEFAULT_DATE_FORMAT,
    get_logger,
    set_log_format,
    set_log_level,
    setup_logger
)


@pytest.mark.unit
class TestLogging:
    """Test colorlog-backed loggers."""

    def test_setup_logger(self):
        logger = setup_logger("test_setup", "DEBUG")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, colorlog.ColoredFormatter)
        assert logger.propagate is False

    def test_invalid_level_falls_back_to_info(self):
        logger = setup_logger("test_invalid", "LOUD")

        assert logger.level == logging.INFO

    def test_get_logger_is_cached(self):
        first = get_logger("test_cached")

        assert get_logger("test_cached") is first
        assert CONFIGURED_LOGGERS["test_cached"] is first

    def test_get_logger_uses_env_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")

        assert get_logger("test_env_level").level == logging.WARNING

    def test_set_log_level(self):
        logger = setup_logger("test_set_level", "INFO")

        set_log_level("ERROR")

        assert logger.level == logging.ERROR
        assert len(logger.handlers) == 1
        set_log_level("INFO")

    def test_set_log_format_keeps_levels(self):
        # Arrange
        logger = setup_logger("test_set_format", "WARNING")

        # Act
        set_log_format("%(message)s", "%H:%M")
        try:
            formatter = logger.handlers[0].formatter

            # Assert
            assert logger.level == logging.WARNING
            assert formatter._fmt == "%(log_color)s%(message)s"
            assert formatter.datefmt == "%H:%M"
        finally:
            set_log_format()

        assert logger.handlers[0].formatter.datefmt == DEFAULT_DATE_FORMAT
