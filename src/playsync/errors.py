"""Error types and error handling utilities."""

from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)


def log_error(error: Exception, context: Optional[str] = None) -> None:
    """Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error("%s: %s", context, str(error))
    else:
        logger.error(str(error))


class PlaysyncError(Exception):
    """Base class for all playsync errors."""

    pass


class ConfigError(PlaysyncError):
    """Error raised when the configuration is missing or invalid."""

    pass


class AuthError(ConfigError):
    """Error raised when YouTube credentials cannot be obtained."""

    pass


class YouTubeError(PlaysyncError):
    """Base class for YouTube API errors."""

    pass


class PlaylistNotFoundError(YouTubeError):
    """Error raised when a playlist is not found."""

    pass
