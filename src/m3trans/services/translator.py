"""
Translation pipeline: copies tracks, then mirrors the playlist tree as
folders and M3U files under the output directory.
"""

import logging
from pathlib import Path, PurePosixPath
from typing import Callable, Dict, Mapping, Optional, Set

from ..core.config import ERROR_MESSAGES, OUTPUT_CONFIG
from ..core.exceptions import OutputError
from ..models.library import Library, Playlist, PlaylistKind
from ..models.summary import TranslationSummary
from ..utils.path_utils import sanitize_component
from .ignore import IgnoreMatcher
from .path_stack import PathStack
from .playlist_writer import PlaylistWriter
from .track_copier import TrackCopier
from .traversal import visit

logger = logging.getLogger(__name__)


class PlaylistTranslator:
    """Exports a library into ``tracks/`` and ``playlists/`` under an output root."""

    def __init__(
        self,
        library: Library,
        output_path: Path,
        ignore: Optional[IgnoreMatcher] = None,
        dry_run: bool = False,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ):
        """
        Initialize the translator.

        Args:
            library: Library to export
            output_path: Output root directory
            ignore: Patterns excluding playlists by virtual path
            dry_run: Report actions without touching the filesystem
            progress_callback: Track copy progress, called with (done, total)
        """
        self.library = library
        self.output_path = Path(output_path)
        self.playlists_dir = self.output_path / OUTPUT_CONFIG["PLAYLISTS_DIR"]
        self.ignore = ignore if ignore is not None else IgnoreMatcher()
        self.dry_run = dry_run
        self.summary = TranslationSummary(dry_run=dry_run)
        self.copier = TrackCopier(self.output_path, dry_run=dry_run, progress_callback=progress_callback)

    def run(self) -> TranslationSummary:
        """Copy tracks and emit playlists. Per-item failures are logged and counted."""
        unreachable = self.library.unreachable_playlists()
        for playlist_id in unreachable:
            playlist = self.library.playlists[playlist_id]
            logger.warning(
                f"Playlist {playlist.name} ({playlist_id:016X}) is not reachable from a root "
                f"and will not be exported"
            )
        self.summary.unreachable_playlists = len(unreachable)

        remote_paths = self.copy_tracks()
        self.copy_playlists(remote_paths)
        return self.summary

    def copy_tracks(self) -> Dict[int, PurePosixPath]:
        return self.copier.copy_tracks(self.library, self.summary)

    def copy_playlists(self, remote_paths: Mapping[int, PurePosixPath]) -> None:
        """
        Walk the playlist tree and emit folders and playlist files.

        An ignored node emits nothing, but its children are still visited
        and matched on their own virtual paths.
        """
        if not self.dry_run:
            try:
                self.playlists_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise OutputError(f"{ERROR_MESSAGES['OUTPUT_UNWRITABLE']} {self.playlists_dir}: {e}") from e

        writer = PlaylistWriter(self.library, remote_paths, self.output_path)
        stack = PathStack()
        emitted: Set[Path] = set()

        def on_playlist(playlist_id: int, depth: int) -> None:
            playlist = self.library.playlists[playlist_id]
            stack.update(sanitize_component(playlist.name), depth)

            virtual_path = stack.virtual_path
            if self.ignore.matches(virtual_path):
                logger.info(f"Ignoring playlist {playlist.name} with path {virtual_path!r}.")
                self.summary.playlists_ignored += 1
                return

            if playlist.kind is PlaylistKind.GENERIC:
                path = stack.to_path(self.playlists_dir, OUTPUT_CONFIG["PLAYLIST_EXTENSION"])
                self._check_collision(path, playlist, emitted)
                self._emit_playlist(writer, playlist, stack.relative_root, path)
            elif playlist.kind is PlaylistKind.FOLDER:
                path = stack.to_path(self.playlists_dir)
                self._check_collision(path, playlist, emitted)
                self._emit_folder(playlist, path)
            else:
                logger.debug(f"Skipping {playlist.kind_label} playlist {playlist.name}")

        visit(self.library, on_playlist)

    @staticmethod
    def _check_collision(path: Path, playlist: Playlist, emitted: Set[Path]) -> None:
        if path in emitted:
            logger.warning(f"Playlist {playlist.name} at path {path} collides with a sibling of the same name")
        emitted.add(path)

    def _emit_folder(self, playlist: Playlist, path: Path) -> None:
        if self.dry_run:
            logger.info(f"Generate folder for playlist folder {playlist.name} at path {path}")
            self.summary.folders_created += 1
            return

        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to generate folder for playlist folder {playlist.name} at path {path}: {e}")
            self.summary.playlists_failed += 1
        else:
            self.summary.folders_created += 1

    def _emit_playlist(
        self,
        writer: PlaylistWriter,
        playlist: Playlist,
        relative_root: PurePosixPath,
        path: Path,
    ) -> None:
        if self.dry_run:
            logger.info(f"Generate m3u for playlist {playlist.name} at path {path}")
            self.summary.playlists_written += 1
            return

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            written, omitted = writer.write(playlist, relative_root, path)
        except OSError as e:
            logger.error(f"Failed to generate m3u for playlist {playlist.name} at path {path}: {e}")
            self.summary.playlists_failed += 1
        else:
            logger.debug(f"Wrote {written} entries for playlist {playlist.name} to {path}")
            self.summary.playlists_written += 1
            self.summary.entries_omitted += omitted
