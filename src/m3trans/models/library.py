"""
Normalized library model: typed tracks and playlists plus the ordered
parent/child index used to walk the playlist forest.
"""

import re
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple, Union

from ..core.exceptions import InvalidPlaylistId, InvalidTrackId, NonUtf8Path
from ..utils.path_utils import decode_location
from .raw import RawLibrary, RawPlaylist, RawTrack, load_raw_library

_HEX_ID = re.compile(r"[0-9A-Fa-f]+")
_DECIMAL_ID = re.compile(r"[0-9]+")
_MAX_ID = 2 ** 64


def parse_playlist_id(value: str) -> int:
    """Parse a hexadecimal persistent id into an unsigned 64-bit integer."""
    if not _HEX_ID.fullmatch(value):
        raise InvalidPlaylistId(f"Invalid playlist id {value!r}: not a hexadecimal number")
    parsed = int(value, 16)
    if parsed >= _MAX_ID:
        raise InvalidPlaylistId(f"Invalid playlist id {value!r}: exceeds 64 bits")
    return parsed


def parse_track_id(value: str) -> int:
    """Parse a decimal track id into an unsigned 64-bit integer."""
    if not _DECIMAL_ID.fullmatch(value):
        raise InvalidTrackId(f"Invalid track id {value!r}: not a decimal number")
    parsed = int(value)
    if parsed >= _MAX_ID:
        raise InvalidTrackId(f"Invalid track id {value!r}: exceeds 64 bits")
    return parsed


class PlaylistKind(Enum):
    """Classification of a playlist record."""
    MASTER = "Master"
    FOLDER = "Folder"
    GENERIC = "Generic"
    UNKNOWN = "Unknown"

    @classmethod
    def classify(cls, raw: RawPlaylist) -> "PlaylistKind":
        """Master flag wins over folder flag, which wins over a distinguished kind."""
        if raw.is_master:
            return cls.MASTER
        if raw.is_folder:
            return cls.FOLDER
        if raw.distinguished_kind is None:
            return cls.GENERIC
        return cls.UNKNOWN


@dataclass(frozen=True)
class Track:
    """A library track with its decoded location."""
    track_id: int
    name: str
    location: str
    duration_ms: Optional[int] = None

    @property
    def duration_seconds(self) -> Optional[float]:
        if self.duration_ms is None:
            return None
        return self.duration_ms / 1000.0

    @classmethod
    def from_raw(cls, key: str, raw: RawTrack) -> "Track":
        track_id = parse_track_id(key)
        try:
            location = decode_location(raw.location)
        except UnicodeDecodeError as e:
            raise NonUtf8Path(f"Track {track_id} location is not valid UTF-8: {raw.location!r}") from e
        return cls(track_id=track_id, name=raw.name, location=location, duration_ms=raw.duration_ms)


@dataclass(frozen=True)
class Playlist:
    """A playlist, folder, or special system playlist."""
    persistent_id: int
    parent_id: Optional[int]
    name: str
    kind: PlaylistKind
    items: Tuple[int, ...]
    order_key: int
    distinguished_kind: Optional[int] = None

    @property
    def kind_label(self) -> str:
        if self.kind is PlaylistKind.UNKNOWN:
            return f"Unknown({self.distinguished_kind})"
        return self.kind.value

    @classmethod
    def from_raw(cls, raw: RawPlaylist, order_key: int) -> "Playlist":
        kind = PlaylistKind.classify(raw)
        return cls(
            persistent_id=parse_playlist_id(raw.persistent_id),
            parent_id=parse_playlist_id(raw.parent_id) if raw.parent_id is not None else None,
            name=raw.name,
            kind=kind,
            items=tuple(raw.items),
            order_key=order_key,
            distinguished_kind=raw.distinguished_kind if kind is PlaylistKind.UNKNOWN else None,
        )


class Library:
    """
    Owns tracks and playlists by id, plus the parent-sorted playlist index.

    Siblings keep the order in which the exporting application listed them,
    recorded as each playlist's ``order_key``.
    """

    def __init__(self, tracks: Dict[int, Track], playlists: Dict[int, Playlist]):
        self.tracks = tracks
        self.playlists = playlists

        def sort_key(entry: Tuple[Optional[int], int]):
            parent_id, playlist_id = entry
            return (parent_id is not None, parent_id or 0, playlists[playlist_id].order_key)

        self.playlist_index: List[Tuple[Optional[int], int]] = sorted(
            ((p.parent_id, p.persistent_id) for p in playlists.values()),
            key=sort_key,
        )

        self._children: Dict[Optional[int], Tuple[int, ...]] = {}
        grouped = defaultdict(list)
        for parent_id, playlist_id in self.playlist_index:
            grouped[parent_id].append(playlist_id)
        for parent_id, child_ids in grouped.items():
            self._children[parent_id] = tuple(child_ids)

    @classmethod
    def from_raw(cls, raw: RawLibrary) -> "Library":
        """
        Normalize raw records into a Library.

        Raises:
            InvalidPlaylistId: a persistent or parent id is not hexadecimal
            InvalidTrackId: a track key is not decimal
            NonUtf8Path: a track location does not decode to UTF-8
        """
        playlists: Dict[int, Playlist] = {}
        for order_key, raw_playlist in enumerate(raw.playlists):
            playlist = Playlist.from_raw(raw_playlist, order_key)
            playlists[playlist.persistent_id] = playlist

        tracks: Dict[int, Track] = {}
        for key, raw_track in raw.tracks.items():
            track = Track.from_raw(key, raw_track)
            tracks[track.track_id] = track

        return cls(tracks, playlists)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Library":
        """Read and normalize an exported library document."""
        return cls.from_raw(load_raw_library(path))

    @property
    def roots(self) -> Tuple[int, ...]:
        return self.children(None)

    def children(self, parent_id: Optional[int]) -> Tuple[int, ...]:
        """Ordered ids of the playlists whose parent is ``parent_id``."""
        return self._children.get(parent_id, ())

    def unreachable_playlists(self) -> List[int]:
        """
        Ids of playlists that no walk from a root reaches: their parent id
        is missing from the library or their parent chain is a cycle.
        """
        reached: Set[int] = set()
        pending = list(self.roots)
        while pending:
            playlist_id = pending.pop()
            if playlist_id in reached:
                continue
            reached.add(playlist_id)
            pending.extend(self.children(playlist_id))
        return [playlist_id for _, playlist_id in self.playlist_index if playlist_id not in reached]
