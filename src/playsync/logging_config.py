"""Logging configuration for the application."""

import logging
import sys
from typing import Optional

# Create logger
logger: logging.Logger = logging.getLogger("playsync")
logger.setLevel(logging.INFO)

# Create console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.INFO)

# Create formatter
formatter = logging.Formatter(
    "%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)

console_handler.setFormatter(formatter)
logger.addHandler(console_handler)

# Prevent propagation to root logger
logger.propagate = False


def enable_debug() -> None:
    """Enable debug logging.

    Sets both the logger and console handler to DEBUG level.
    """
    logger.setLevel(logging.DEBUG)
    console_handler.setLevel(logging.DEBUG)


def disable_debug() -> None:
    """Disable debug logging.

    Sets both the logger and console handler back to INFO level.
    """
    logger.setLevel(logging.INFO)
    console_handler.setLevel(logging.INFO)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Module names such as ``playsync.sync`` or ``src.playsync.sync`` are
    mapped onto children of the package logger.

    Args:
        name: Name of the logger. If None, returns the package logger.

    Returns:
        A Logger instance configured with the application's settings.
    """
    if not name:
        return logger
    parts = name.split(".")
    if "playsync" in parts:
        parts = parts[parts.index("playsync") + 1:]
        if not parts:
            return logger
    return logging.getLogger("playsync." + ".".join(parts))
