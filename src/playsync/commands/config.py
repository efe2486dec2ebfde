"""Config command for managing configured playlists."""

from typing import Callable, Optional

from .. import config
from ..core import YouTubeBase, connect
from ..errors import ConfigError
from ..logging_config import get_logger
from ..models import Playlist
from ..playlists import PlaylistConfig, ask_for_sync_items
from ..utils import parse_playlist_url
from .base import PlaysyncCommand

# Get logger for this module
logger = get_logger(__name__)


class ConfigCommand(PlaysyncCommand):
    """Command for editing and listing the playlist configuration."""

    def __init__(
        self,
        cfg: PlaylistConfig,
        add: Optional[str] = None,
        remove: Optional[str] = None,
        list_playlists: bool = False,
        reset: bool = False,
        oauth2_json: Optional[str] = None,
        assume_yes: bool = False,
        config_path: Optional[str] = None,
        youtube_factory: Callable[[Optional[str]], YouTubeBase] = connect,
        input_func: Callable[[str], str] = input,
    ) -> None:
        """Initialize command.

        Args:
            cfg: Playlist configuration
            add: Playlist ID or URL to add
            remove: Playlist ID to remove
            list_playlists: Whether to list the configuration
            reset: Whether to reset the configuration
            oauth2_json: OAuth client secrets path to store
            assume_yes: Skip the reset confirmation
            config_path: Configuration file, defaults to config.CONFIG_FILE
            youtube_factory: Creates the API wrapper used to look up titles
            input_func: Prompt function for interactive questions
        """
        super().__init__(cfg)
        self.add = add
        self.remove = remove
        self.list_playlists = list_playlists
        self.reset = reset
        self.oauth2_json = oauth2_json
        self.assume_yes = assume_yes
        self.config_path = config_path
        self.youtube_factory = youtube_factory
        self.input_func = input_func

    def validate(self) -> None:
        """Validate command parameters."""
        if not any([self.add, self.remove, self.list_playlists, self.reset, self.oauth2_json]):
            raise ValueError("No configuration action given")
        super().validate()

    def _run(self) -> bool:
        """Run the config command.

        Returns:
            bool: True if successful, False otherwise
        """
        if self.reset:
            return self._reset()

        if self.oauth2_json:
            self.cfg.set_oauth_path(self.oauth2_json)
            self.cfg.write(self.config_path)
            logger.info("OAuth2 JSON path set successfully")

        if self.add:
            self._add()

        if self.remove:
            if self.cfg.remove_playlist(self.remove):
                self.cfg.write(self.config_path)
                logger.info("Playlist removed successfully")
            else:
                logger.warning("Playlist %s is not configured", self.remove)

        if self.list_playlists:
            self._list()

        return True

    def _reset(self) -> bool:
        if not self.assume_yes:
            answer = self.input_func("Are you sure you want to reset the configuration? [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                logger.info("Reset cancelled")
                return True

        self.cfg = PlaylistConfig()
        self.cfg.write(self.config_path)
        logger.info("Configuration reset successfully")
        return True

    def _add(self) -> None:
        client_secrets = self.cfg.oauth2_json or config.CLIENT_SECRETS_FILE
        if not client_secrets:
            raise ConfigError(
                "The path to the OAuth2 JSON file is not set. "
                "Please set it before adding playlists."
            )

        try:
            playlist_id = parse_playlist_url(self.add)
        except ValueError as e:
            raise ConfigError(str(e)) from e

        youtube = self.youtube_factory(client_secrets)
        title = youtube.get_playlist_title(playlist_id)

        sync_from = []
        if self.cfg.playlists:
            sync_from = ask_for_sync_items(self.cfg, playlist_id, self.input_func)

        self.cfg.add_playlist(Playlist(id=playlist_id, title=title, sync_from=sync_from or None))
        self.cfg.write(self.config_path)
        logger.info("Playlist '%s' added successfully", title)

    def _list(self) -> None:
        logger.info("OAuth2 JSON path: %s", self.cfg.oauth2_json or "<not set>")

        if not self.cfg.playlists:
            logger.info("No playlists configured")
            return

        logger.info("Configured playlists:")
        for playlist in self.cfg.playlists:
            logger.info("%s (ID: %s)", playlist.title, playlist.id)
            if not playlist.sources:
                logger.info("    No sync sources")
                continue
            for source_id in playlist.sources:
                source = self.cfg.get_playlist(source_id)
                if source:
                    logger.info("    <- %s (ID: %s)", source.title, source.id)
                else:
                    logger.info("    <- Unknown playlist ID: %s", source_id)
