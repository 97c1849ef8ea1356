"""
Path reconstruction for a depth-first playlist walk.
"""

from pathlib import Path, PurePosixPath
from typing import List, Optional


class PathStack:
    """
    Rebuilds hierarchical paths from a sequence of (name, depth) visits.

    ``names`` always equals the chain of names from the root to the last
    visited node. ``offset`` holds one ``..`` per pushed level, which is
    the way back from that node's directory level to the output root.
    """

    ASCENT = ".."

    def __init__(self):
        self.names: List[str] = []
        self.offset: List[str] = []
        self.previous_depth: Optional[int] = None

    def update(self, name: str, depth: int) -> None:
        """Move to the node named ``name`` at ``depth``."""
        if self.previous_depth is not None and depth <= self.previous_depth:
            for _ in range(self.previous_depth - depth + 1):
                self.names.pop()
                self.offset.pop()

        self.names.append(name)
        self.offset.append(self.ASCENT)
        self.previous_depth = depth

    def reset(self) -> None:
        self.names.clear()
        self.offset.clear()
        self.previous_depth = None

    @property
    def virtual_path(self) -> str:
        """Slash-joined names, relative to the playlists root."""
        return "/".join(self.names)

    @property
    def relative_root(self) -> PurePosixPath:
        """Relative path from the current node's directory level to the output root."""
        return PurePosixPath(*self.offset)

    def to_path(self, root: Path, suffix: str = "") -> Path:
        """Concrete path of the current node under ``root``."""
        path = root.joinpath(*self.names)
        if suffix:
            path = path.with_name(f"{path.name}.{suffix}")
        return path

    def __len__(self) -> int:
        return len(self.names)
