"""
Extended M3U playlist writer.
"""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Dict, List, Mapping, Tuple

from ..core.config import OUTPUT_CONFIG
from ..models.library import Library, Playlist
from ..utils.file_duration_reader import format_seconds, get_file_duration

logger = logging.getLogger(__name__)


@dataclass
class PlaylistEntry:
    """One ``#EXTINF`` entry: a relative track path with its title and duration."""
    path: str
    title: str
    duration: float

    def render(self) -> str:
        title = " ".join(self.title.splitlines())
        return f"#EXTINF:{format_seconds(self.duration)},{title}\n{self.path}\n"


class PlaylistWriter:
    """Renders library playlists as UTF-8 extended M3U files."""

    HEADER = "#EXTM3U\n"

    def __init__(self, library: Library, remote_paths: Mapping[int, PurePosixPath], output_path: Path):
        self.library = library
        self.remote_paths = remote_paths
        self.output_path = Path(output_path)
        self._durations: Dict[int, float] = {}

    def duration_for(self, track_id: int) -> float:
        """
        Track duration in seconds. Tracks without a recorded duration are
        measured from their copied file, falling back to the unknown marker.
        """
        track = self.library.tracks[track_id]
        if track.duration_ms is not None:
            return track.duration_ms / 1000.0

        if track_id not in self._durations:
            copied = self.output_path.joinpath(*self.remote_paths[track_id].parts)
            measured = get_file_duration(copied)
            self._durations[track_id] = measured if measured is not None else float(OUTPUT_CONFIG["UNKNOWN_DURATION"])
        return self._durations[track_id]

    def entries(self, playlist: Playlist, relative_root: PurePosixPath) -> Tuple[List[PlaylistEntry], int]:
        """
        Build the entries of a playlist in its stored order.

        Tracks that were never copied are left out.

        Returns:
            Tuple of (entries, number_of_omitted_items)
        """
        entries = []
        omitted = 0
        for track_id in playlist.items:
            remote_path = self.remote_paths.get(track_id)
            if remote_path is None or track_id not in self.library.tracks:
                logger.debug(f"Omitting track {track_id} from playlist {playlist.name}: not copied")
                omitted += 1
                continue

            track = self.library.tracks[track_id]
            entries.append(PlaylistEntry(
                path=str(relative_root / remote_path),
                title=track.name,
                duration=self.duration_for(track_id),
            ))
        return entries, omitted

    def write(self, playlist: Playlist, relative_root: PurePosixPath, path: Path) -> Tuple[int, int]:
        """
        Write ``playlist`` to ``path``, replacing any existing file.

        Args:
            playlist: Playlist to render
            relative_root: Relative path from the file's directory level to the output root
            path: Destination file

        Returns:
            Tuple of (entries_written, entries_omitted)
        """
        entries, omitted = self.entries(playlist, relative_root)
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(self.HEADER)
            for entry in entries:
                handle.write(entry.render())
        return len(entries), omitted
