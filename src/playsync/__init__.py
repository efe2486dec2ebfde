"""Sync YouTube playlists from other playlists."""

__version__ = "0.1.0"

from .core import YouTubeBase, connect
from .errors import AuthError, ConfigError, PlaylistNotFoundError, PlaysyncError, YouTubeError
from .logging_config import get_logger
from .models import AddResult, Playlist, SyncReport, Video
from .playlists import PlaylistConfig
from .sync import find_missing_videos, sync_playlist

# Get logger for this module
logger = get_logger(__name__)
