"""
Path Utilities Module
Handles track location decoding and playlist name sanitization.
"""

import re
from pathlib import Path, PurePosixPath
from typing import Optional, Sequence
from urllib.parse import unquote_to_bytes

from ..core.config import LIBRARY_CONFIG

_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:/")


def decode_location(location: str) -> str:
    """
    Percent-decode a track location into text.

    Raises:
        UnicodeDecodeError: if the decoded bytes are not valid UTF-8
    """
    return unquote_to_bytes(location).decode("utf-8")


def strip_local_prefix(location: str, prefixes: Optional[Sequence[str]] = None) -> Optional[str]:
    """
    Remove a recognized local-file prefix from a decoded location.

    Returns:
        The slash-delimited remainder, or None for unrecognized schemes
    """
    for prefix in prefixes or LIBRARY_CONFIG["LOCAL_FILE_PREFIXES"]:
        if location.startswith(prefix):
            return location[len(prefix):]
    return None


def local_path_from_location(location: str, prefixes: Optional[Sequence[str]] = None) -> Optional[Path]:
    """
    Turn a decoded ``file://`` location into a local filesystem path.

    ``file://localhost/C:/Music/a.mp3`` becomes ``C:/Music/a.mp3`` and
    ``file://localhost/Users/me/a.mp3`` becomes ``/Users/me/a.mp3``.

    Args:
        location: Decoded track location
        prefixes: Recognized prefixes (defaults to LIBRARY_CONFIG)

    Returns:
        Path to the audio file, or None if the location is not a local file
    """
    remainder = strip_local_prefix(location, prefixes)
    if not remainder:
        return None

    if _DRIVE_PATTERN.match(remainder):
        return Path(remainder)
    return Path(str(PurePosixPath("/", *remainder.split("/"))))


def sanitize_component(name: str) -> str:
    """
    Make a playlist name usable as a single path component.

    Path separators and NUL are replaced with underscores; names that would
    address the current or parent directory are prefixed with an underscore.
    """
    sanitized = re.sub(r"[/\\\x00]", "_", name)
    if sanitized in ("", ".", ".."):
        sanitized = f"_{sanitized}"
    return sanitized
