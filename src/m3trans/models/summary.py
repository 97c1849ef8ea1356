"""
Run summary model.
"""

from dataclasses import dataclass


@dataclass
class TranslationSummary:
    """Counts collected while translating a library. Dry runs count planned actions."""
    dry_run: bool = False
    tracks_copied: int = 0
    tracks_failed: int = 0
    tracks_skipped: int = 0
    folders_created: int = 0
    playlists_written: int = 0
    playlists_failed: int = 0
    playlists_ignored: int = 0
    entries_omitted: int = 0
    unreachable_playlists: int = 0

    @property
    def failures(self) -> int:
        return self.tracks_failed + self.playlists_failed

    @property
    def succeeded(self) -> bool:
        return self.failures == 0
