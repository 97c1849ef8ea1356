"""
Tests for path utilities.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from m3trans.utils.path_utils import decode_location, local_path_from_location, sanitize_component, strip_local_prefix


class TestDecodeLocation:
    """Tests for decode_location."""

    def test_percent_decoding(self):
        """Test decoding of escaped characters."""
        assert decode_location("file://localhost/My%20Music/Bj%C3%B6rk.mp3") == "file://localhost/My Music/Björk.mp3"

    def test_plain_text_unchanged(self):
        """Test that unescaped text passes through."""
        assert decode_location("file://localhost/a.mp3") == "file://localhost/a.mp3"

    def test_invalid_utf8(self):
        """Test that undecodable bytes raise."""
        with pytest.raises(UnicodeDecodeError):
            decode_location("%C3%28")


class TestLocalPath:
    """Tests for local path extraction."""

    def test_strip_localhost_prefix(self):
        """Test the localhost prefix."""
        assert strip_local_prefix("file://localhost/Users/me/a.mp3") == "Users/me/a.mp3"

    def test_strip_empty_host_prefix(self):
        """Test the empty-host prefix."""
        assert strip_local_prefix("file:///Users/me/a.mp3") == "Users/me/a.mp3"

    def test_unknown_scheme(self):
        """Test that remote locations are not local."""
        assert strip_local_prefix("http://example.com/a.mp3") is None
        assert local_path_from_location("http://example.com/a.mp3") is None

    def test_posix_path(self):
        """Test that a Unix remainder becomes absolute."""
        path = local_path_from_location("file://localhost/Users/me/Music/a b.mp3")

        assert path.as_posix() == "/Users/me/Music/a b.mp3"

    def test_drive_letter_path(self):
        """Test that a Windows remainder keeps its drive."""
        path = local_path_from_location("file://localhost/C:/Music/a.mp3")

        assert path.as_posix() == "C:/Music/a.mp3"

    def test_prefix_only(self):
        """Test that a bare prefix has no path."""
        assert local_path_from_location("file://localhost/") is None

    def test_custom_prefixes(self):
        """Test overriding the recognized prefixes."""
        assert strip_local_prefix("file://nas/share/a.mp3", prefixes=("file://nas/",)) == "share/a.mp3"


class TestSanitizeComponent:
    """Tests for sanitize_component."""

    def test_plain_name(self):
        """Test that ordinary names are untouched."""
        assert sanitize_component("Road Trip: 2019") == "Road Trip: 2019"

    def test_separators_replaced(self):
        """Test that separators cannot add path levels."""
        assert sanitize_component("AC/DC") == "AC_DC"
        assert sanitize_component("a\\b") == "a_b"

    @pytest.mark.parametrize("name,expected", [("", "_"), (".", "_."), ("..", "_..")])
    def test_special_names(self, name, expected):
        """Test names that address directories."""
        assert sanitize_component(name) == expected
