"""Test cases for CLI functionality."""

import json
from unittest import TestCase, main
from unittest.mock import MagicMock, patch

import pytest
from google.auth.exceptions import RefreshError

from src.playsync import cli, config
from src.playsync.errors import AuthError, YouTubeError
from src.playsync.models import Playlist
from src.playsync.playlists import PlaylistConfig


class TestParser(TestCase):
    """Test cases for argument parsing."""

    def setUp(self):
        self.parser = cli.create_parser()

    def test_sync_defaults(self):
        args = self.parser.parse_args(["sync"])
        self.assertEqual(args.command, "sync")
        self.assertIsNone(args.playlist_id)
        self.assertFalse(args.dry_run)
        self.assertFalse(args.no_progress)

    def test_sync_options(self):
        args = self.parser.parse_args(["--debug", "sync", "-i", "PL1", "-d"])
        self.assertTrue(args.debug)
        self.assertEqual(args.playlist_id, "PL1")
        self.assertTrue(args.dry_run)

    def test_config_options(self):
        args = self.parser.parse_args(
            ["config", "--add-playlist", "PL1", "-r", "PL2", "-l", "-o", "client.json"]
        )
        self.assertEqual(args.add, "PL1")
        self.assertEqual(args.remove, "PL2")
        self.assertTrue(args.list_playlists)
        self.assertEqual(args.oauth2_json, "client.json")
        self.assertFalse(args.reset)


def write_config(path, data):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f)


@pytest.fixture
def mock_logger():
    with patch("src.playsync.cli.logger") as mock:
        yield mock


def test_main_no_args_prints_help(capsys):
    assert cli.main([]) == 0
    assert "usage: playsync" in capsys.readouterr().out


def test_main_invalid_args():
    assert cli.main(["sync", "--bogus"]) == 1


@patch("src.playsync.cli.core.connect")
def test_main_sync(mock_connect, isolated_config):
    """Test syncing through the CLI."""
    write_config(
        isolated_config,
        {
            "oauth2_json": "client.json",
            "playlists": [
                {"id": "A", "title": "Alpha"},
                {"id": "B", "title": "Beta", "sync_from": ["A"]},
            ],
        },
    )
    youtube = MagicMock()
    youtube.get_playlist_videos.return_value = []
    mock_connect.return_value = youtube

    assert cli.main(["sync", "--no-progress"]) == 0

    mock_connect.assert_called_once_with("client.json")
    assert [c.args[0] for c in youtube.get_playlist_videos.call_args_list] == ["B", "A"]


@patch("src.playsync.cli.core.connect")
def test_main_sync_failure_exit_code(mock_connect, isolated_config, mock_logger):
    """Test that a failed playlist gives a non-zero exit code."""
    PlaylistConfig(
        playlists=[Playlist("B", "Beta", sync_from=["A"])], oauth2_json="client.json"
    ).write()

    youtube = MagicMock()
    youtube.get_playlist_videos.side_effect = YouTubeError("Failed to get playlist videos")
    mock_connect.return_value = youtube

    assert cli.main(["sync"]) == 1
    mock_logger.error.assert_called_with("Command failed to run successfully")


def test_main_sync_without_credentials(isolated_config, mock_logger):
    """Test that sync refuses to run without an OAuth2 JSON path."""
    assert cli.main(["sync"]) == 1

    mock_logger.error.assert_called_once()
    assert "OAuth2 JSON file is not set" in mock_logger.error.call_args.args[1]


@patch("src.playsync.cli.core.connect", side_effect=AuthError("Authentication failed: denied"))
def test_main_auth_failure(mock_connect, isolated_config, mock_logger):
    PlaylistConfig(oauth2_json="client.json").write()

    assert cli.main(["sync"]) == 1
    mock_logger.error.assert_called_with("Command failed: %s", "Authentication failed: denied")


@patch("src.playsync.auth.pickle.load")
def test_main_sync_revoked_token(mock_pickle_load, isolated_config, mock_logger, tmp_path):
    """Test that a revoked refresh token is reported instead of crashing."""
    PlaylistConfig(oauth2_json=str(tmp_path / "missing.json")).write()
    with open(config.TOKEN_FILE, "wb") as f:
        f.write(b"")
    expired = MagicMock(valid=False, expired=True, refresh_token="r")
    expired.refresh.side_effect = RefreshError("invalid_grant: Token has been expired or revoked.")
    mock_pickle_load.return_value = expired

    assert cli.main(["sync"]) == 1

    expired.refresh.assert_called_once()
    assert "OAuth2 JSON file not found" in mock_logger.error.call_args.args[1]


def test_main_bad_config_file(isolated_config, mock_logger):
    with open(isolated_config, "w", encoding="utf-8") as f:
        f.write("[")

    assert cli.main(["config", "-l"]) == 1


def test_main_config_set_oauth(isolated_config):
    assert cli.main(["config", "-o", "client.json"]) == 0
    assert PlaylistConfig.read().oauth2_json == "client.json"


def test_main_config_explicit_path(tmp_path):
    path = str(tmp_path / "other.json")

    assert cli.main(["--config", path, "config", "-o", "client.json"]) == 0

    assert PlaylistConfig.read(path).oauth2_json == "client.json"
    assert not PlaylistConfig.read().oauth2_json


def test_main_config_no_action(isolated_config, mock_logger):
    assert cli.main(["config"]) == 1


@patch("src.playsync.cli.enable_debug")
def test_main_debug(mock_enable_debug, isolated_config):
    assert cli.main(["--debug", "config", "-l"]) == 0
    mock_enable_debug.assert_called_once()


if __name__ == "__main__":
    main()
