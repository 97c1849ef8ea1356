"""
Raw library records as they appear in the exported property list.
"""

import plistlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union
from xml.parsers.expat import ExpatError

from ..core.config import ERROR_MESSAGES
from ..core.exceptions import LibraryLoadError


def _require(record: Mapping[str, Any], key: str, kind: type, context: str) -> Any:
    if key not in record:
        raise LibraryLoadError(f"{context} is missing required key {key!r}")
    return _check_type(record[key], key, kind, context)


def _optional(record: Mapping[str, Any], key: str, kind: type, context: str, default: Any = None) -> Any:
    if key not in record:
        return default
    return _check_type(record[key], key, kind, context)


def _check_type(value: Any, key: str, kind: type, context: str) -> Any:
    # plistlib parses <true/> as bool, which is also an int
    if kind is int and isinstance(value, bool):
        raise LibraryLoadError(f"{context} field {key!r} must be an integer")
    if not isinstance(value, kind):
        raise LibraryLoadError(f"{context} field {key!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass
class RawTrack:
    """A track entry from the ``Tracks`` dictionary."""
    name: str
    location: str
    duration_ms: Optional[int] = None

    @classmethod
    def from_dict(cls, key: str, record: Mapping[str, Any]) -> "RawTrack":
        context = f"Track {key}"
        return cls(
            name=_optional(record, "Name", str, context, default=""),
            location=_optional(record, "Location", str, context, default=""),
            duration_ms=_optional(record, "Total Time", int, context),
        )


@dataclass
class RawPlaylist:
    """A playlist entry from the ``Playlists`` array."""
    persistent_id: str
    name: str
    parent_id: Optional[str] = None
    items: List[int] = field(default_factory=list)
    is_folder: bool = False
    is_master: bool = False
    distinguished_kind: Optional[int] = None

    @classmethod
    def from_dict(cls, index: int, record: Mapping[str, Any]) -> "RawPlaylist":
        context = f"Playlist #{index}"
        items = []
        for item in _optional(record, "Playlist Items", list, context, default=[]):
            if not isinstance(item, dict):
                raise LibraryLoadError(f"{context} has a malformed playlist item")
            items.append(_require(item, "Track ID", int, f"{context} item"))

        return cls(
            persistent_id=_require(record, "Playlist Persistent ID", str, context),
            name=_require(record, "Name", str, context),
            parent_id=_optional(record, "Parent Persistent ID", str, context),
            items=items,
            is_folder=_optional(record, "Folder", bool, context, default=False),
            is_master=_optional(record, "Master", bool, context, default=False),
            distinguished_kind=_optional(record, "Distinguished Kind", int, context),
        )


@dataclass
class RawLibrary:
    """Flat record set: track table keyed by string id plus the playlist list."""
    tracks: Dict[str, RawTrack] = field(default_factory=dict)
    playlists: List[RawPlaylist] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawLibrary":
        if not isinstance(data, dict):
            raise LibraryLoadError(f"{ERROR_MESSAGES['LIBRARY_MALFORMED']}: top level is not a dictionary")

        tracks = {}
        for key, record in _require(data, "Tracks", dict, "Library").items():
            if not isinstance(record, dict):
                raise LibraryLoadError(f"Track {key} is not a dictionary")
            tracks[str(key)] = RawTrack.from_dict(key, record)

        playlists = []
        for index, record in enumerate(_require(data, "Playlists", list, "Library")):
            if not isinstance(record, dict):
                raise LibraryLoadError(f"Playlist #{index} is not a dictionary")
            playlists.append(RawPlaylist.from_dict(index, record))

        return cls(tracks=tracks, playlists=playlists)


def load_raw_library(path: Union[str, Path]) -> RawLibrary:
    """
    Read an exported library document (XML or binary property list).

    Raises:
        LibraryLoadError: if the file cannot be opened or parsed
    """
    try:
        with open(path, "rb") as handle:
            data = plistlib.load(handle)
    except OSError as e:
        raise LibraryLoadError(f"{ERROR_MESSAGES['LIBRARY_UNREADABLE']} {path}: {e}") from e
    except (plistlib.InvalidFileException, ExpatError, ValueError) as e:
        raise LibraryLoadError(f"{ERROR_MESSAGES['LIBRARY_MALFORMED']} {path}: {e}") from e

    return RawLibrary.from_dict(data)
