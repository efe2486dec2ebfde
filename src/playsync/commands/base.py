"""Base command class for playsync operations."""

from ..errors import PlaysyncError
from ..playlists import PlaylistConfig


class PlaysyncCommand:
    """Base class for playsync commands."""

    def __init__(self, cfg: PlaylistConfig):
        """Initialize command.

        Args:
            cfg: Playlist configuration, read once per invocation
        """
        self.cfg = cfg
        self._validated = False

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If parameters are invalid
        """
        if self.cfg is None:
            raise ValueError("Playlist configuration is required")
        self._validated = True

    def run(self) -> bool:
        """Run the command.

        Returns:
            bool: True if successful, False otherwise

        Raises:
            PlaysyncError: If command fails
        """
        try:
            self.validate()
            return self._run()
        except PlaysyncError:
            raise
        except Exception as e:
            raise PlaysyncError(str(e)) from e

    def _run(self) -> bool:
        """Internal run implementation.

        Returns:
            bool: True if successful, False otherwise
        """
        return False
