"""
Core services for m3trans.
"""

from .traversal import PlaylistNode, walk, visit
from .path_stack import PathStack
from .ignore import IgnoreMatcher
from .track_copier import TrackCopier
from .playlist_writer import PlaylistEntry, PlaylistWriter
from .translator import PlaylistTranslator

__all__ = [
    'PlaylistNode',
    'walk',
    'visit',
    'PathStack',
    'IgnoreMatcher',
    'TrackCopier',
    'PlaylistEntry',
    'PlaylistWriter',
    'PlaylistTranslator',
]
