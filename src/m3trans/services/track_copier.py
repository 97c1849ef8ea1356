"""
Copies library tracks into the flat, id-named tracks directory.
"""

import logging
import shutil
from pathlib import Path, PurePosixPath
from typing import Callable, Dict, Optional

from ..core.config import ERROR_MESSAGES, OUTPUT_CONFIG
from ..core.exceptions import OutputError
from ..models.library import Library, Track
from ..models.summary import TranslationSummary
from ..utils.path_utils import local_path_from_location

logger = logging.getLogger(__name__)


class TrackCopier:
    """Copies every locally stored track to ``<output>/tracks/<track_id>.<ext>``."""

    def __init__(
        self,
        output_path: Path,
        dry_run: bool = False,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ):
        """
        Initialize the copier.

        Args:
            output_path: Output root directory
            dry_run: Only report intended copies
            progress_callback: Called with (done, total) after each track
        """
        self.output_path = Path(output_path)
        self.tracks_dir = self.output_path / OUTPUT_CONFIG["TRACKS_DIR"]
        self.dry_run = dry_run
        self.progress_callback = progress_callback

    @staticmethod
    def remote_path_for(track: Track, local_path: Path) -> PurePosixPath:
        """Output-relative path of a track's copy, keeping the source extension."""
        return PurePosixPath(OUTPUT_CONFIG["TRACKS_DIR"], f"{track.track_id}{local_path.suffix}")

    def prepare(self) -> None:
        """Create the tracks directory."""
        if self.dry_run:
            return
        try:
            self.tracks_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"{ERROR_MESSAGES['OUTPUT_UNWRITABLE']} {self.tracks_dir}: {e}") from e

    def copy_tracks(
        self,
        library: Library,
        summary: Optional[TranslationSummary] = None,
    ) -> Dict[int, PurePosixPath]:
        """
        Copy all tracks with a local file location.

        Failures are logged and leave the track out of the returned map;
        the remaining tracks are still copied.

        Returns:
            Mapping of track id to output-relative path for each copied track
        """
        if summary is None:
            summary = TranslationSummary(dry_run=self.dry_run)

        self.prepare()

        remote_paths: Dict[int, PurePosixPath] = {}
        track_ids = sorted(library.tracks)
        total = len(track_ids)

        for done, track_id in enumerate(track_ids, 1):
            track = library.tracks[track_id]
            local_path = local_path_from_location(track.location)

            if local_path is None:
                logger.warning(f"Ignoring path with unknown schema: {track.location}")
                summary.tracks_skipped += 1
            else:
                remote_path = self.remote_path_for(track, local_path)
                full_remote_path = self.output_path.joinpath(*remote_path.parts)

                if self.dry_run:
                    logger.info(f"Copy file at {local_path} to {full_remote_path}")
                    summary.tracks_copied += 1
                else:
                    try:
                        shutil.copy(local_path, full_remote_path)
                    except OSError as e:
                        logger.error(f"Failed to copy file at {local_path} to {full_remote_path}: {e}")
                        summary.tracks_failed += 1
                    else:
                        logger.debug(f"Copied {local_path} to {full_remote_path}")
                        remote_paths[track_id] = remote_path
                        summary.tracks_copied += 1

            if self.progress_callback:
                self.progress_callback(done, total)

        return remote_paths
