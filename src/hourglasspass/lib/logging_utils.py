"""
Logging helpers shared by the codec and the command line.
"""

import logging
import os
from typing import Optional

from hourglasspass import config


def _setup_logging(logger: logging.Logger) -> None:
    """Attach the structured stream handler once per logger."""
    if logger.handlers:
        return

    handler = logging.StreamHandler()

    level_name = os.getenv(config.LOG_LEVEL_ENV, config.DEFAULT_LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the package namespace."""
    if not name:
        return logging.getLogger(config.LOGGER_NAME)
    return logging.getLogger(f"{config.LOGGER_NAME}.{name}")


def log(logger: logging.Logger, level: str, message: str, **kwargs) -> None:
    """Structured logging with optional context."""
    # Only the package logger owns a handler; children propagate to it.
    _setup_logging(get_logger())
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)


def set_level(level: str) -> None:
    """Override the package log level (used by the CLI --debug flag)."""
    logger = get_logger()
    _setup_logging(logger)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
