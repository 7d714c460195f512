import logging
import os
import colorlog
from typing import Dict, Optional

# Define log levels
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

DEFAULT_LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Formats applied to every logger configured from now on
LOG_FORMAT_SETTINGS = {
    "format": DEFAULT_LOG_FORMAT,
    "date_format": DEFAULT_DATE_FORMAT,
}

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}

# Keep track of configured loggers
CONFIGURED_LOGGERS: Dict[str, logging.Logger] = {}


def setup_logger(name: str, log_level: str = "INFO") -> logging.Logger:
    """
    Set up a logger with colorful console output on stderr.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    log_level = log_level.upper()

    logger = logging.getLogger(name)
    level = LOG_LEVELS.get(log_level, logging.INFO)
    logger.setLevel(level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(colorlog.ColoredFormatter(
        f"%(log_color)s{LOG_FORMAT_SETTINGS['format']}",
        datefmt=LOG_FORMAT_SETTINGS["date_format"],
        log_colors=LOG_COLORS
    ))
    logger.addHandler(console_handler)
    logger.propagate = False

    if log_level not in LOG_LEVELS:
        logger.warning(f"Invalid log level: {log_level}. Using INFO instead.")

    CONFIGURED_LOGGERS[name] = logger
    return logger


def get_log_level() -> str:
    """Get the log level from environment variable or use default."""
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the specified name and log level.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    if log_level is None:
        if name in CONFIGURED_LOGGERS:
            return CONFIGURED_LOGGERS[name]
        log_level = get_log_level()

    return setup_logger(name, log_level)


def set_log_level(log_level: str) -> None:
    """Apply a new level to every logger configured so far."""
    for name in list(CONFIGURED_LOGGERS):
        setup_logger(name, log_level)


def set_log_format(log_format: Optional[str] = None, date_format: Optional[str] = None) -> None:
    """Change the record and date formats of every logger configured so far."""
    LOG_FORMAT_SETTINGS["format"] = log_format or DEFAULT_LOG_FORMAT
    LOG_FORMAT_SETTINGS["date_format"] = date_format or DEFAULT_DATE_FORMAT
    for name, logger in list(CONFIGURED_LOGGERS.items()):
        setup_logger(name, logging.getLevelName(logger.level))
