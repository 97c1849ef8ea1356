"""
Configuration for m3trans.
Contains all constants, settings, and global parameters.
"""

import os

# Project Information
PROJECT_NAME = "m3trans"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Export a music library's playlists as portable M3U files with copied tracks"

# Output layout
OUTPUT_CONFIG = {
    "TRACKS_DIR": "tracks",
    "PLAYLISTS_DIR": "playlists",
    "PLAYLIST_EXTENSION": "m3u8",
    "UNKNOWN_DURATION": -1,
}

# Library document handling
LIBRARY_CONFIG = {
    # Longest prefix first, the first match wins
    "LOCAL_FILE_PREFIXES": ("file://localhost/", "file:///"),
    "IGNORE_FILE_NAME": ".m3ignore",
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.environ.get("M3TRANS_LOG_LEVEL", "INFO").upper(),
    "CONSOLE_LEVEL": "WARNING",
    "FILE_LEVEL": "INFO",
    "FORMAT": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "CONSOLE_FORMAT": "%(levelname)s - %(name)s - %(message)s",
    "DEFAULT_FILE": "./m3trans.log",
}

# Error Messages
ERROR_MESSAGES = {
    "LIBRARY_UNREADABLE": "Could not read library file",
    "LIBRARY_MALFORMED": "Library file is not a valid export",
    "OUTPUT_UNWRITABLE": "Could not create output directory",
}
