"""
Tests for the M3U playlist writer.
"""

import pytest
import sys
from pathlib import Path, PurePosixPath
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from m3trans.models.library import Library, Playlist, PlaylistKind, Track
from m3trans.services.playlist_writer import PlaylistEntry, PlaylistWriter


@pytest.fixture
def library():
    tracks = {
        1: Track(1, "First", "file://localhost/a.mp3", 215000),
        2: Track(2, "Second", "file://localhost/b.mp3", 61500),
        3: Track(3, "Third", "file://localhost/c.mp3", None),
    }
    playlist = Playlist(0x10, None, "Mix", PlaylistKind.GENERIC, (2, 1, 3, 2), 0)
    return Library(tracks, {0x10: playlist})


class TestPlaylistEntry:
    """Tests for PlaylistEntry rendering."""

    def test_render(self):
        """Test the EXTINF line and path."""
        entry = PlaylistEntry(path="../tracks/1.mp3", title="Song", duration=215.0)

        assert entry.render() == "#EXTINF:215,Song\n../tracks/1.mp3\n"

    def test_render_fractional_duration(self):
        """Test that fractional seconds are kept."""
        assert PlaylistEntry("x", "Song", 61.5).render().startswith("#EXTINF:61.5,Song")

    def test_render_multiline_title(self):
        """Test that line breaks in titles cannot break the file format."""
        assert PlaylistEntry("x", "Two\nLines", 1.0).render() == "#EXTINF:1,Two Lines\nx\n"


class TestPlaylistWriter:
    """Tests for PlaylistWriter class."""

    def test_entries_in_playlist_order(self, library, temp_dir):
        """Test that entries follow the stored order, duplicates included."""
        remote = {1: PurePosixPath("tracks/1.mp3"), 2: PurePosixPath("tracks/2.mp3")}
        writer = PlaylistWriter(library, remote, temp_dir)

        entries, omitted = writer.entries(library.playlists[0x10], PurePosixPath(".."))

        assert [e.title for e in entries] == ["Second", "First", "Second"]
        assert entries[0].path == "../tracks/2.mp3"
        assert entries[0].duration == 61.5
        assert omitted == 1

    def test_uncopied_tracks_omitted(self, library, temp_dir):
        """Test that tracks missing from the remote map are left out."""
        writer = PlaylistWriter(library, {1: PurePosixPath("tracks/1.mp3")}, temp_dir)

        entries, omitted = writer.entries(library.playlists[0x10], PurePosixPath(".."))

        assert [e.title for e in entries] == ["First"]
        assert omitted == 3

    @patch('m3trans.services.playlist_writer.get_file_duration')
    def test_missing_duration_read_from_file(self, mock_duration, library, temp_dir):
        """Test that a track without duration is measured from its copy."""
        mock_duration.return_value = 42.25
        writer = PlaylistWriter(library, {3: PurePosixPath("tracks/3.mp3")}, temp_dir)

        entries, _ = writer.entries(library.playlists[0x10], PurePosixPath(".."))

        assert entries[0].duration == 42.25
        mock_duration.assert_called_once_with(temp_dir / "tracks" / "3.mp3")

    @patch('m3trans.services.playlist_writer.get_file_duration')
    def test_unreadable_duration_is_unknown(self, mock_duration, library, temp_dir):
        """Test the unknown duration marker."""
        mock_duration.return_value = None
        writer = PlaylistWriter(library, {3: PurePosixPath("tracks/3.mp3")}, temp_dir)

        entries, _ = writer.entries(library.playlists[0x10], PurePosixPath(".."))

        assert entries[0].duration == -1
        assert entries[0].render().startswith("#EXTINF:-1,Third")

    def test_write(self, library, temp_dir):
        """Test the written file contents."""
        remote = {1: PurePosixPath("tracks/1.mp3"), 2: PurePosixPath("tracks/2.mp3")}
        writer = PlaylistWriter(library, remote, temp_dir)
        path = temp_dir / "Mix.m3u8"

        written, omitted = writer.write(library.playlists[0x10], PurePosixPath(".."), path)

        assert (written, omitted) == (3, 1)
        assert path.read_text(encoding="utf-8") == (
            "#EXTM3U\n"
            "#EXTINF:61.5,Second\n../tracks/2.mp3\n"
            "#EXTINF:215,First\n../tracks/1.mp3\n"
            "#EXTINF:61.5,Second\n../tracks/2.mp3\n"
        )
