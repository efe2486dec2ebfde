"""Common test fixtures and utilities."""

import os
from typing import Dict, Generator, List
from unittest.mock import MagicMock

import pytest

from src.playsync import config
from src.playsync.core import YouTubeBase
from src.playsync.errors import YouTubeError
from src.playsync.models import Video


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch) -> Generator[str, None, None]:
    """Point every configuration path at a temporary directory.

    Yields:
        Path of the temporary configuration file
    """
    config_file = os.path.join(str(tmp_path), "playsync.json")
    monkeypatch.setattr(config, "CONFIG_DIR", str(tmp_path))
    monkeypatch.setattr(config, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config, "TOKEN_FILE", os.path.join(str(tmp_path), "token.pickle"))
    monkeypatch.setattr(config, "CLIENT_SECRETS_FILE", None)
    yield config_file


@pytest.fixture
def youtube_client() -> MagicMock:
    """Create a mock YouTube API client.

    Returns:
        MagicMock: Mock YouTube API client with common methods configured
    """
    mock = MagicMock()

    mock.playlistItems.return_value.list.return_value.execute.return_value = {
        "items": [
            {
                "id": "item1",
                "snippet": {"title": "Video 1"},
                "contentDetails": {"videoId": "vid1"},
            },
            {
                "id": "item2",
                "snippet": {"title": "Video 2"},
                "contentDetails": {"videoId": "vid2"},
            },
        ]
    }

    mock.playlistItems.return_value.insert.return_value.execute.return_value = {}

    mock.playlists.return_value.list.return_value.execute.return_value = {
        "items": [
            {
                "id": "playlist1",
                "snippet": {"title": "Playlist 1", "description": "Description 1"},
            }
        ]
    }

    return mock


class FakeYouTube(YouTubeBase):
    """In-memory stand-in for the YouTube API wrapper.

    Playlists are plain lists of videos. Inserts append to the playlist
    unless the video ID is listed in ``failing``.
    """

    def __init__(self, playlists: Dict[str, List[Video]], failing=()):
        super().__init__(youtube=None)
        self.playlists = {pid: list(videos) for pid, videos in playlists.items()}
        self.failing = set(failing)
        self.listed: List[str] = []
        self.inserted: List[tuple] = []

    def get_playlist_title(self, playlist_id: str) -> str:
        return f"Playlist {playlist_id}"

    def get_playlist_videos(self, playlist_id: str) -> List[Video]:
        self.listed.append(playlist_id)
        if playlist_id not in self.playlists:
            raise YouTubeError(f"Failed to get playlist videos: {playlist_id}")
        return list(self.playlists[playlist_id])

    def add_video_to_playlist(self, playlist_id: str, video_id: str) -> None:
        self.inserted.append((playlist_id, video_id))
        if video_id in self.failing:
            raise YouTubeError(f"Failed to add video {video_id}: forbidden")
        self.playlists[playlist_id].append(Video(video_id, f"Video {video_id}"))


def videos(*video_ids: str) -> List[Video]:
    """Build videos titled after their IDs."""
    return [Video(video_id=vid, title=f"Video {vid}") for vid in video_ids]


@pytest.fixture
def make_youtube():
    """Factory fixture for FakeYouTube instances."""
    return FakeYouTube


@pytest.fixture
def make_videos():
    """Factory fixture for lists of videos."""
    return videos
