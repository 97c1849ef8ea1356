"""
Pytest configuration and shared fixtures.
"""

import plistlib
import pytest
import sys
import tempfile
import shutil
from pathlib import Path
from typing import Any, Dict, Generator
from urllib.parse import quote

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

MASTER_ID = "00000000000000A1"
ROCK_ID = "00000000000000B2"
FAVORITES_ID = "00000000000000C3"
MUSIC_ID = "00000000000000D4"


def file_location(path: Path) -> str:
    """Location string the way the music application exports it."""
    return "file://localhost" + quote(path.as_posix())


def make_playlist(persistent_id: str, name: str, parent_id: str = None, items=(), **flags) -> Dict[str, Any]:
    """Build a raw playlist record."""
    record = {
        "Playlist Persistent ID": persistent_id,
        "Name": name,
        "Playlist Items": [{"Track ID": item} for item in items],
    }
    if parent_id is not None:
        record["Parent Persistent ID"] = parent_id
    record.update(flags)
    return record


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def source_tracks(temp_dir: Path) -> Dict[int, Path]:
    """Two fake audio files standing in for the library's media folder."""
    source_dir = temp_dir / "Music Library"
    source_dir.mkdir()
    one = source_dir / "Song One.mp3"
    one.write_bytes(b"fake mp3 data")
    two = source_dir / "Song Two.flac"
    two.write_bytes(b"fake flac data")
    return {1: one, 2: two}


@pytest.fixture
def library_data(source_tracks: Dict[int, Path]) -> Dict[str, Any]:
    """
    Raw library document: a master playlist, a "Rock" folder holding the
    "Favorites" playlist, and a special "Music" playlist.
    """
    return {
        "Major Version": 1,
        "Minor Version": 1,
        "Tracks": {
            "1": {
                "Track ID": 1,
                "Name": "Song One",
                "Location": file_location(source_tracks[1]),
                "Total Time": 215000,
            },
            "2": {
                "Track ID": 2,
                "Name": "Song Two",
                "Location": file_location(source_tracks[2]),
                "Total Time": 61500,
            },
        },
        "Playlists": [
            make_playlist(MASTER_ID, "Library", items=[1, 2], Master=True),
            make_playlist(ROCK_ID, "Rock", Folder=True),
            make_playlist(FAVORITES_ID, "Favorites", parent_id=ROCK_ID, items=[1, 2]),
            make_playlist(MUSIC_ID, "Music", items=[1, 2], **{"Distinguished Kind": 4}),
        ],
    }


@pytest.fixture
def library_file(temp_dir: Path, library_data: Dict[str, Any]) -> Path:
    """The sample library written as an XML property list."""
    path = temp_dir / "Library.xml"
    with open(path, "wb") as handle:
        plistlib.dump(library_data, handle)
    return path


@pytest.fixture
def sample_library(library_data):
    """The sample library, normalized."""
    from m3trans.models.library import Library
    from m3trans.models.raw import RawLibrary
    return Library.from_raw(RawLibrary.from_dict(library_data))


@pytest.fixture
def output_dir(temp_dir: Path) -> Path:
    """Output root for exports (not created in advance)."""
    return temp_dir / "export"
