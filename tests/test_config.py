"""
Tests for configuration module.
"""

import pytest
from pathlib import Path
import sys

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from m3trans.core.config import (
    PROJECT_NAME,
    PROJECT_VERSION,
    OUTPUT_CONFIG,
    LIBRARY_CONFIG,
    LOGGING_CONFIG,
)


def test_project_info():
    """Test project information constants."""
    assert PROJECT_NAME == "m3trans"
    assert PROJECT_VERSION == "1.0.0"


def test_output_layout():
    """Test output directory names and playlist extension."""
    assert OUTPUT_CONFIG["TRACKS_DIR"] == "tracks"
    assert OUTPUT_CONFIG["PLAYLISTS_DIR"] == "playlists"
    assert OUTPUT_CONFIG["PLAYLIST_EXTENSION"] == "m3u8"


def test_local_prefixes_longest_first():
    """Test that the more specific local prefix is tried first."""
    prefixes = LIBRARY_CONFIG["LOCAL_FILE_PREFIXES"]
    assert prefixes[0] == "file://localhost/"
    assert "file:///" in prefixes


def test_ignore_file_name():
    """Test the default ignore file name."""
    assert LIBRARY_CONFIG["IGNORE_FILE_NAME"] == ".m3ignore"


def test_log_level_environment_override(monkeypatch):
    """Test that M3TRANS_LOG_LEVEL overrides the default level."""
    import importlib
    from m3trans.core import config

    monkeypatch.setenv("M3TRANS_LOG_LEVEL", "debug")
    try:
        importlib.reload(config)
        assert config.LOGGING_CONFIG["LEVEL"] == "DEBUG"
    finally:
        monkeypatch.delenv("M3TRANS_LOG_LEVEL")
        importlib.reload(config)

    assert config.LOGGING_CONFIG["LEVEL"] == "INFO"
