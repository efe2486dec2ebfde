"""Playlist reconciliation."""

from typing import Iterable, List

from tqdm import tqdm

from .core import YouTubeBase
from .logging_config import get_logger
from .models import AddResult, Playlist, SyncReport, Video

logger = get_logger(__name__)


def find_missing_videos(
    youtube: YouTubeBase, playlist: Playlist, source_ids: Iterable[str]
) -> List[Video]:
    """Collect source videos that are not in the destination playlist.

    The destination is listed once, before any source. A video missing from
    the destination is returned once per source playlist containing it.

    Args:
        youtube: YouTube API wrapper
        playlist: Destination playlist
        source_ids: Source playlist IDs, in sync order

    Returns:
        Candidate videos in source order

    Raises:
        YouTubeError: If any playlist cannot be listed
    """
    destination_ids = {video.video_id for video in youtube.get_playlist_videos(playlist.id)}

    candidates = []
    for source_id in source_ids:
        for video in youtube.get_playlist_videos(source_id):
            if video.video_id not in destination_ids:
                candidates.append(video)

    return candidates


def sync_playlist(
    youtube: YouTubeBase,
    playlist: Playlist,
    source_ids: Iterable[str],
    dry_run: bool = False,
    show_progress: bool = True,
) -> SyncReport:
    """Add videos from source playlists that are missing in a playlist.

    Args:
        youtube: YouTube API wrapper
        playlist: Destination playlist
        source_ids: Source playlist IDs, in sync order
        dry_run: Report the videos that would be added without adding them
        show_progress: Show a progress bar while adding videos

    Returns:
        SyncReport with the candidates and the result of each insert

    Raises:
        YouTubeError: If the destination or a source playlist cannot be listed
    """
    logger.info("Syncing playlist: %s", playlist.title)

    candidates = find_missing_videos(youtube, playlist, source_ids)
    report = SyncReport(playlist=playlist, candidates=candidates, dry_run=dry_run)

    logger.info("Found %d videos to sync to '%s'", len(candidates), playlist.title)
    if not candidates:
        return report

    if dry_run:
        logger.info("Would add %d videos:", len(candidates))
        for video in candidates:
            logger.info("  - %s", video.title)
        return report

    for video in tqdm(candidates, desc="Adding videos", unit="video", disable=not show_progress):
        try:
            youtube.add_video_to_playlist(playlist.id, video.video_id)
        except Exception as e:
            report.results.append(AddResult(video=video, success=False, error=str(e)))
            logger.warning("Failed to add '%s': %s", video.title, str(e))
            continue

        report.results.append(AddResult(video=video, success=True))
        logger.info("Added: %s", video.title)

    logger.info(
        "Successfully added %d of %d videos", report.added_count, report.attempted_count
    )
    return report
