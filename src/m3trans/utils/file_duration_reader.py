"""
Utility to read actual audio file durations from copied files.
"""

from pathlib import Path
from typing import Optional
import logging

from mutagen import File as MutagenFile
from mutagen import MutagenError

logger = logging.getLogger(__name__)


def get_file_duration(file_path: Path) -> Optional[float]:
    """
    Get the actual duration of an audio file in seconds.

    Args:
        file_path: Path to the audio file

    Returns:
        Duration in seconds, or None if unable to read
    """
    try:
        audio_file = MutagenFile(str(file_path))
    except (MutagenError, OSError) as e:
        logger.debug(f"Error reading file duration from {file_path}: {e}")
        return None

    if audio_file is None:
        logger.debug(f"Could not load audio file: {file_path}")
        return None

    # Get length from mutagen (in seconds)
    length = getattr(getattr(audio_file, "info", None), "length", None)
    if length and length > 0:
        return float(length)

    logger.debug(f"No duration found in file: {file_path}")
    return None


def format_seconds(seconds: float) -> str:
    """
    Format a duration for an ``#EXTINF`` line.

    Whole values drop the fractional part (``215``), others keep full
    precision (``215.373``).
    """
    if float(seconds).is_integer():
        return str(int(seconds))
    return repr(float(seconds))
