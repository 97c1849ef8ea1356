"""
Depth-first traversal of the playlist forest.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Set, Tuple

from ..models.library import Library, Playlist


@dataclass(frozen=True)
class PlaylistNode:
    """A playlist reached by a walk, with its depth and name chain from the root."""
    playlist: Playlist
    depth: int
    path: Tuple[str, ...]

    @property
    def playlist_id(self) -> int:
        return self.playlist.persistent_id


def walk(library: Library) -> Iterator[PlaylistNode]:
    """
    Yield every playlist reachable from a forest root, depth first.

    Parents come before their children, siblings keep the library's
    original order. Each call starts a fresh walk.
    """
    seen: Set[int] = set()
    yield from _walk_children(library, None, 0, (), seen)


def _walk_children(
    library: Library,
    parent_id: Optional[int],
    depth: int,
    ancestors: Tuple[str, ...],
    seen: Set[int],
) -> Iterator[PlaylistNode]:
    for child_id in library.children(parent_id):
        if child_id in seen:
            continue
        seen.add(child_id)

        playlist = library.playlists[child_id]
        node = PlaylistNode(playlist, depth, ancestors + (playlist.name,))
        yield node
        yield from _walk_children(library, child_id, depth + 1, node.path, seen)


def visit(library: Library, visitor: Callable[[int, int], None]) -> None:
    """Call ``visitor(playlist_id, depth)`` for each node in walk order."""
    for node in walk(library):
        visitor(node.playlist_id, node.depth)
