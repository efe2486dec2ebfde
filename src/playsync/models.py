"""Data models for playlists, videos and sync results."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import ConfigError


@dataclass
class Video:
    """A video as listed in a playlist."""

    video_id: str
    title: str


@dataclass
class Playlist:
    """A configured playlist and the playlists it syncs from."""

    id: str
    title: str
    sync_from: Optional[List[str]] = None

    @property
    def sources(self) -> List[str]:
        return list(self.sync_from or [])

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "title": self.title}
        if self.sync_from:
            data["sync_from"] = list(self.sync_from)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Playlist":
        sync_from = data.get("sync_from")
        if sync_from is not None and (
            not isinstance(sync_from, list)
            or not all(isinstance(source, str) for source in sync_from)
        ):
            raise ConfigError(
                f"sync_from of playlist {data['id']} must be a list of playlist IDs"
            )
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            sync_from=list(sync_from) if sync_from else None,
        )


@dataclass
class AddResult:
    """Outcome of adding one video to a playlist."""

    video: Video
    success: bool
    error: Optional[str] = None


@dataclass
class SyncReport:
    """Summary of one reconciliation run for a destination playlist."""

    playlist: Playlist
    candidates: List[Video] = field(default_factory=list)
    dry_run: bool = False
    results: List[AddResult] = field(default_factory=list)

    @property
    def added(self) -> List[Video]:
        return [r.video for r in self.results if r.success]

    @property
    def failures(self) -> List[AddResult]:
        return [r for r in self.results if not r.success]

    @property
    def added_count(self) -> int:
        return len(self.added)

    @property
    def attempted_count(self) -> int:
        return len(self.results)
