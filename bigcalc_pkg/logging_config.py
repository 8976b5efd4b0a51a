"""Structured logging configuration for bigcalc.

Records may carry a ``context`` mapping through ``extra``; the formatter
appends it as sorted ``key=value`` pairs so fold traces stay greppable:

    logger.debug("fold *", extra={"context": {"left_limbs": 2, "right_limbs": 1}})
"""

import logging
import sys
from datetime import datetime
from typing import Optional, Union

ROOT_LOGGER = "bigcalc"


class StructuredFormatter(logging.Formatter):
    """One line per record: timestamp, level, logger, message, then context."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat(
            timespec="milliseconds"
        )
        message = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{key}={context[key]}" for key in sorted(context))
            message = f"{message} | {pairs}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def resolve_level(level: Union[str, int]) -> int:
    """Turn a level name ("debug", "INFO") or number into a logging level.

    Raises:
        ValueError: For an unknown level name
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: Union[str, int] = "WARNING",
    log_file: Optional[str] = None,
    console_level: Union[str, int, None] = None,
) -> logging.Logger:
    """Set up structured logging for the application.

    Args:
        level: Level for the bigcalc logger and the file handler
        log_file: Optional file path that also receives the records
        console_level: Threshold for the stderr handler (defaults to level)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(resolve_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = StructuredFormatter()
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    if console_level is not None:
        console_handler.setLevel(resolve_level(console_level))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for one module, nested under the bigcalc namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
