"""Command-line interface for playlist sync operations."""

import argparse
import sys
from typing import List, Optional

from . import commands, core
from .errors import PlaysyncError
from .logging_config import enable_debug, get_logger
from .playlists import PlaylistConfig


logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="playsync", description="Sync YouTube playlists from other playlists"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", dest="config_path", help="Path to the configuration file")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage playlist configuration")
    config_parser.add_argument(
        "-a", "--add", "--add-playlist", metavar="PLAYLIST_ID", help="Add a playlist (ID or URL)"
    )
    config_parser.add_argument(
        "-r", "--remove", "--remove-playlist", metavar="PLAYLIST_ID", help="Remove a playlist"
    )
    config_parser.add_argument(
        "-l",
        "--list",
        "--list-playlists",
        dest="list_playlists",
        action="store_true",
        help="List all configured playlists",
    )
    config_parser.add_argument(
        "--reset", action="store_true", help="Reset the configuration to default values"
    )
    config_parser.add_argument(
        "-y", "--yes", action="store_true", help="Do not ask for confirmation"
    )
    config_parser.add_argument(
        "-o",
        "--oauth2-json",
        metavar="OAUTH2_JSON_PATH",
        help="Path to the OAuth2 JSON file for YouTube API authentication",
    )

    # Sync command
    sync_parser = subparsers.add_parser("sync", help="Sync playlists based on configuration")
    sync_parser.add_argument(
        "-i",
        "--id",
        dest="playlist_id",
        metavar="PLAYLIST_ID",
        help="Playlist ID to sync (syncs all if not specified)",
    )
    sync_parser.add_argument(
        "-d", "--dry-run", action="store_true", help="Show what would be added without adding"
    )
    sync_parser.add_argument(
        "--no-progress", action="store_true", help="Do not show progress bars"
    )

    return parser


def run_config(args: argparse.Namespace, cfg: PlaylistConfig) -> bool:
    command = commands.ConfigCommand(
        cfg,
        add=args.add,
        remove=args.remove,
        list_playlists=args.list_playlists,
        reset=args.reset,
        oauth2_json=args.oauth2_json,
        assume_yes=args.yes,
        config_path=args.config_path,
    )
    return command.run()


def run_sync(args: argparse.Namespace, cfg: PlaylistConfig) -> bool:
    youtube = core.connect(cfg.oauth2_json)
    command = commands.SyncCommand(
        youtube,
        cfg,
        playlist_id=args.playlist_id,
        dry_run=args.dry_run,
        show_progress=not args.no_progress,
    )
    return command.run()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parser.parse_args(argv if argv else ["--help"])
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    if args.debug:
        enable_debug()

    if args.command == "config":
        handler = run_config
    elif args.command == "sync":
        handler = run_sync
    else:
        parser.print_help()
        return 1

    try:
        cfg = PlaylistConfig.read(args.config_path)
        if not handler(args, cfg):
            logger.error("Command failed to run successfully")
            return 1
        return 0
    except (PlaysyncError, ValueError) as e:
        logger.error("Command failed: %s", str(e))
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
