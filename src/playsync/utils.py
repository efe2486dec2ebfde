"""Utility functions for YouTube playlist operations."""

import re


def parse_playlist_url(playlist_str: str) -> str:
    """Extract playlist ID from a YouTube playlist URL or return the raw ID.

    Args:
        playlist_str: A YouTube playlist URL or ID

    Returns:
        The playlist ID

    Raises:
        ValueError if the input is not a valid playlist URL or ID
    """
    url_match = re.search(r"[?&]list=([^&#]+)", playlist_str)
    if url_match:
        return url_match.group(1)

    if re.match(r"^[A-Za-z0-9_-]+$", playlist_str):
        return playlist_str

    raise ValueError(
        f"Invalid playlist format: {playlist_str}. Must be a YouTube playlist URL or ID"
    )
