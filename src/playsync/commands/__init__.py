"""Command module initialization."""

from .base import PlaysyncCommand
from .config import ConfigCommand  # noqa: F401
from .sync import SyncCommand  # noqa: F401

__all__ = ["PlaysyncCommand", "ConfigCommand", "SyncCommand"]
