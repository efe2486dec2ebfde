"""YouTube API authentication handling."""

import os
import pickle
from typing import Optional

from google_auth_oauthlib.flow import InstalledAppFlow
from google.auth.transport.requests import Request
from googleapiclient.discovery import build

from . import config
from .errors import AuthError
from .logging_config import get_logger

logger = get_logger(__name__)


def get_youtube_service(client_secrets_file: Optional[str] = None):
    """Get an authenticated YouTube service object.

    Cached credentials in ``config.TOKEN_FILE`` are reused and refreshed when
    possible; otherwise the installed-app OAuth flow is run in the browser.

    Args:
        client_secrets_file: Path to the OAuth client secrets JSON file.
            Falls back to the GOOGLE_CLIENT_SECRETS_FILE environment variable.

    Raises:
        AuthError: If no credentials can be obtained
    """
    client_secrets_file = client_secrets_file or config.CLIENT_SECRETS_FILE
    if not client_secrets_file:
        raise AuthError(
            "The path to the OAuth2 JSON file is not set. "
            "Run 'playsync config --oauth2-json PATH' first."
        )

    creds = None

    # Load existing credentials if available
    if os.path.exists(config.TOKEN_FILE):
        try:
            with open(config.TOKEN_FILE, "rb") as token:
                creds = pickle.load(token)
        except Exception as e:
            logger.warning("Ignoring unreadable token file %s: %s", config.TOKEN_FILE, str(e))
            creds = None

    # If there are no (valid) credentials available, let the user log in
    if not creds or not creds.valid:
        refreshed = False
        if creds and creds.expired and creds.refresh_token:
            logger.debug("Refreshing expired credentials")
            try:
                creds.refresh(Request())
                refreshed = True
            except Exception as e:
                logger.warning("Failed to refresh credentials, logging in again: %s", str(e))

        if not refreshed:
            if not os.path.exists(client_secrets_file):
                raise AuthError(f"OAuth2 JSON file not found: {client_secrets_file}")
            try:
                flow = InstalledAppFlow.from_client_secrets_file(
                    client_secrets_file, config.YOUTUBE_SCOPES
                )
                creds = flow.run_local_server(port=0)
            except Exception as e:
                raise AuthError(f"Authentication failed: {str(e)}") from e

        # Save the credentials for the next run
        os.makedirs(os.path.dirname(config.TOKEN_FILE), exist_ok=True)
        with open(config.TOKEN_FILE, "wb") as token:
            pickle.dump(creds, token)

    try:
        return build("youtube", "v3", credentials=creds)
    except Exception as e:
        raise AuthError(f"Failed to build YouTube service: {str(e)}") from e
