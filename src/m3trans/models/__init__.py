"""
Data models for m3trans.
"""

from .raw import RawLibrary, RawPlaylist, RawTrack, load_raw_library
from .library import Library, Playlist, PlaylistKind, Track
from .summary import TranslationSummary

__all__ = [
    'RawLibrary',
    'RawPlaylist',
    'RawTrack',
    'load_raw_library',
    'Library',
    'Playlist',
    'PlaylistKind',
    'Track',
    'TranslationSummary',
]
