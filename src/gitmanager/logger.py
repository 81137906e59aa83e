"""Centralized logging configuration for git-manager."""

import logging
import sys
from typing import Optional

LOGGER_NAME = "gitmanager"


class BranchFormatter(logging.Formatter):
    """Custom formatter that adds a branch emoji to every log line."""

    def format(self, record: logging.LogRecord) -> str:
        formatted_message = super().format(record)
        return f"🌿 {formatted_message}"


def setup_logging(level: int = logging.INFO) -> None:
    """Set up console logging for the gitmanager logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(BranchFormatter(fmt="%(message)s", datefmt=None))

    logger.addHandler(console_handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the gitmanager namespace."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


logger = get_logger()
