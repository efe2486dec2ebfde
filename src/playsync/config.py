"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

load_dotenv()

# Directory Settings
CONFIG_DIR = os.getenv("PLAYSYNC_CONFIG_DIR", os.path.join(os.path.expanduser("~"), ".config", "playsync"))
CONFIG_FILE = os.getenv("PLAYSYNC_CONFIG_FILE", os.path.join(CONFIG_DIR, "playsync.json"))
CREDENTIALS_DIR = os.getenv("PLAYSYNC_CREDENTIALS_DIR", CONFIG_DIR)

# YouTube API Settings
YOUTUBE_SCOPES = ["https://www.googleapis.com/auth/youtube"]
CLIENT_SECRETS_FILE = os.getenv("GOOGLE_CLIENT_SECRETS_FILE")
TOKEN_FILE = os.path.join(CREDENTIALS_DIR, "token.pickle")

# Page size for playlistItems().list, the API maximum
PAGE_SIZE = 50
