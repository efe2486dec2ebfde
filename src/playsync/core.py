"""YouTube API base class."""

from typing import List, Optional

from . import auth
from .config import PAGE_SIZE
from .errors import PlaylistNotFoundError, YouTubeError
from .logging_config import get_logger
from .models import Video


logger = get_logger(__name__)


def connect(client_secrets_file: Optional[str] = None) -> "YouTubeBase":
    """Create an authenticated YouTubeBase.

    Raises:
        AuthError: If authentication fails
    """
    return YouTubeBase(auth.get_youtube_service(client_secrets_file))


class YouTubeBase:
    """Playlist operations on top of a YouTube Data API client."""

    def __init__(self, youtube):
        """Initialize API wrapper.

        Args:
            youtube: YouTube API client from ``googleapiclient.discovery.build``
        """
        self.youtube = youtube

    def get_playlist_title(self, playlist_id: str) -> str:
        """Get the title of a playlist.

        Args:
            playlist_id: ID of playlist to look up

        Returns:
            Playlist title, empty if the playlist has none

        Raises:
            PlaylistNotFoundError: If playlist is not found
            YouTubeError: If API request fails
        """
        try:
            request = self.youtube.playlists().list(
                part="snippet",
                id=playlist_id,
                maxResults=1,
            )
            response = request.execute()
        except Exception as e:
            if "playlistNotFound" in str(e):
                raise PlaylistNotFoundError(f"Playlist {playlist_id} not found") from e
            raise YouTubeError(f"Failed to get playlist info: {str(e)}") from e

        items = response.get("items") or []
        if not items:
            raise PlaylistNotFoundError(f"Playlist {playlist_id} not found")

        return items[0].get("snippet", {}).get("title") or ""

    def get_playlist_videos(self, playlist_id: str) -> List[Video]:
        """Get all videos in a playlist, following every result page.

        Args:
            playlist_id: ID of playlist to get videos from

        Returns:
            Videos in playlist order

        Raises:
            PlaylistNotFoundError: If playlist is not found
            YouTubeError: If any page request fails
        """
        videos = []
        page_token = None

        while True:
            try:
                request = self.youtube.playlistItems().list(
                    part="snippet,contentDetails",
                    playlistId=playlist_id,
                    maxResults=PAGE_SIZE,
                    pageToken=page_token,
                )
                response = request.execute()
            except Exception as e:
                if "playlistNotFound" in str(e):
                    raise PlaylistNotFoundError(f"Playlist {playlist_id} not found") from e
                raise YouTubeError(f"Failed to get playlist videos: {str(e)}") from e

            for item in response.get("items", []):
                video_id = item.get("contentDetails", {}).get("videoId")
                if not video_id:
                    logger.debug("Skipping playlist item %s without a video", item.get("id"))
                    continue
                videos.append(Video(video_id=video_id, title=item.get("snippet", {}).get("title") or ""))

            page_token = response.get("nextPageToken")
            if not page_token:
                break

        logger.debug("Fetched %d videos from playlist %s", len(videos), playlist_id)
        return videos

    def add_video_to_playlist(self, playlist_id: str, video_id: str) -> None:
        """Add a single video to a playlist.

        Args:
            playlist_id: ID of playlist to add to
            video_id: ID of video to add

        Raises:
            YouTubeError: If the insert request fails
        """
        try:
            request = self.youtube.playlistItems().insert(
                part="snippet",
                body={
                    "snippet": {
                        "playlistId": playlist_id,
                        "resourceId": {"kind": "youtube#video", "videoId": video_id},
                    }
                },
            )
            request.execute()
        except Exception as e:
            raise YouTubeError(f"Failed to add video {video_id}: {str(e)}") from e
