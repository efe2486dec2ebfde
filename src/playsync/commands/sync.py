"""Sync command for YouTube playlists."""

from typing import List, Optional

from ..core import YouTubeBase
from ..errors import YouTubeError, log_error
from ..logging_config import get_logger
from ..models import Playlist, SyncReport
from ..playlists import PlaylistConfig
from ..sync import sync_playlist
from .base import PlaysyncCommand

# Get logger for this module
logger = get_logger(__name__)


class SyncCommand(PlaysyncCommand):
    """Command for syncing configured playlists from their sources.

    Playlists are processed in configuration order. A playlist that cannot
    be listed is reported and skipped; the remaining playlists still sync
    and the command returns False at the end.
    """

    def __init__(
        self,
        youtube: YouTubeBase,
        cfg: PlaylistConfig,
        playlist_id: Optional[str] = None,
        dry_run: bool = False,
        show_progress: bool = True,
    ) -> None:
        """Initialize command.

        Args:
            youtube: YouTube API wrapper
            cfg: Playlist configuration
            playlist_id: Only sync this playlist when given
            dry_run: Whether to perform a dry run
            show_progress: Whether to show progress bars
        """
        super().__init__(cfg)
        self.youtube = youtube
        self.playlist_id = playlist_id
        self.dry_run = dry_run
        self.show_progress = show_progress
        self.reports: List[SyncReport] = []
        self.failed: List[str] = []

    def validate(self) -> None:
        """Validate command parameters."""
        if not self.youtube:
            raise ValueError("YouTube API client is required")
        super().validate()

    def selected_playlists(self) -> List[Playlist]:
        if self.playlist_id:
            return [p for p in self.cfg.playlists if p.id == self.playlist_id]
        return list(self.cfg.playlists)

    def _run(self) -> bool:
        """Run the sync command.

        Returns:
            bool: True if every playlist synced, False otherwise
        """
        self.reports = []
        self.failed = []

        playlists = self.selected_playlists()
        if not playlists:
            logger.info("No playlists found to sync")
            return True

        for playlist in playlists:
            if not playlist.sources:
                logger.debug("Playlist %s has no sync sources, skipping", playlist.id)
                continue

            try:
                report = sync_playlist(
                    self.youtube,
                    playlist,
                    playlist.sources,
                    dry_run=self.dry_run,
                    show_progress=self.show_progress,
                )
            except YouTubeError as e:
                log_error(e, f"Failed to sync playlist '{playlist.title}'")
                self.failed.append(playlist.id)
                continue

            self.reports.append(report)

        if self.failed:
            logger.error(
                "%d of %d playlists failed to sync: %s",
                len(self.failed),
                len(self.failed) + len(self.reports),
                ", ".join(self.failed),
            )
            return False

        logger.info("Dry run completed" if self.dry_run else "Sync completed")
        return True
