"""Persistent playlist configuration."""

import json
import os
import re
from typing import Callable, List, Optional

from . import config
from .errors import ConfigError
from .logging_config import get_logger
from .models import Playlist

logger = get_logger(__name__)


class PlaylistConfig:
    """Configured playlists and the OAuth client secrets path."""

    def __init__(
        self,
        playlists: Optional[List[Playlist]] = None,
        oauth2_json: Optional[str] = None,
    ) -> None:
        """Initialize configuration.

        Args:
            playlists: Configured playlists
            oauth2_json: Path to the OAuth client secrets JSON file
        """
        self.playlists: List[Playlist] = list(playlists or [])
        self.oauth2_json = oauth2_json

    @classmethod
    def read(cls, path: Optional[str] = None) -> "PlaylistConfig":
        """Read configuration from file.

        A missing file yields an empty configuration.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        path = path or config.CONFIG_FILE
        if not os.path.exists(path):
            logger.debug("No configuration at %s, using defaults", path)
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls(
                playlists=[Playlist.from_dict(p) for p in data.get("playlists", [])],
                oauth2_json=data.get("oauth2_json"),
            )
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            raise ConfigError(f"Failed to read configuration {path}: {str(e)}") from e

    def write(self, path: Optional[str] = None) -> None:
        """Write configuration to file.

        Raises:
            ConfigError: If the file cannot be written
        """
        path = path or config.CONFIG_FILE
        data = {}
        if self.oauth2_json:
            data["oauth2_json"] = self.oauth2_json
        data["playlists"] = [p.to_dict() for p in self.playlists]

        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise ConfigError(f"Failed to write configuration {path}: {str(e)}") from e

    def get_playlist(self, playlist_id: str) -> Optional[Playlist]:
        for playlist in self.playlists:
            if playlist.id == playlist_id:
                return playlist
        return None

    def add_playlist(self, playlist: Playlist) -> "PlaylistConfig":
        """Add a playlist, replacing any existing entry with the same ID."""
        for index, existing in enumerate(self.playlists):
            if existing.id == playlist.id:
                self.playlists[index] = playlist
                return self
        self.playlists.append(playlist)
        return self

    def remove_playlist(self, playlist_id: str) -> bool:
        """Remove a playlist and drop it from other playlists' sources.

        Returns:
            True if the playlist was configured
        """
        remaining = [p for p in self.playlists if p.id != playlist_id]
        removed = len(remaining) != len(self.playlists)
        self.playlists = remaining

        for playlist in self.playlists:
            if playlist.sync_from and playlist_id in playlist.sync_from:
                sources = [s for s in playlist.sync_from if s != playlist_id]
                playlist.sync_from = sources or None

        return removed

    def set_oauth_path(self, oauth2_json: Optional[str]) -> None:
        self.oauth2_json = oauth2_json

    def eligible_sources(self, playlist_id: str) -> List[Playlist]:
        """List playlists that may be used as sync sources for a playlist.

        Excludes the playlist itself and playlists already syncing from it.
        """
        return [
            p
            for p in self.playlists
            if p.id != playlist_id and playlist_id not in p.sources
        ]


def ask_for_sync_items(
    cfg: PlaylistConfig,
    playlist_id: str,
    input_func: Callable[[str], str] = input,
) -> List[str]:
    """Ask the user which configured playlists to sync from.

    Args:
        cfg: Current configuration
        playlist_id: Playlist being configured
        input_func: Prompt function, ``input`` by default

    Returns:
        Selected playlist IDs in configuration order
    """
    candidates = cfg.eligible_sources(playlist_id)
    if not candidates:
        return []

    logger.info("Select playlists to sync from:")
    for number, playlist in enumerate(candidates, start=1):
        logger.info("  %d. %s (%s)", number, playlist.title, playlist.id)

    answer = input_func("Numbers separated by commas or spaces (blank for none): ")

    chosen = set()
    for token in re.split(r"[,\s]+", answer.strip()):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= len(candidates):
            logger.warning("Ignoring invalid selection: %s", token)
            continue
        chosen.add(int(token) - 1)

    return [candidates[index].id for index in sorted(chosen)]
