"""Logging setup for the mirror service."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOGGER_NAME = "mirror"


def setup_logging(
    log_file: Optional[str] = None,
    log_level: str = "DEBUG",
    backup_count: int = 7,
) -> logging.Logger:
    """Set up logging with a console handler and an optional daily file handler.

    Args:
        log_file: Path to log file, or None for console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        backup_count: Number of daily log files to keep

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        # Ensure log directory exists
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Roll over once a day, like a dated log per day
        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_file,
            when="midnight",
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the configured mirror logger."""
    return logging.getLogger(LOGGER_NAME)
