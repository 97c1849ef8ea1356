"""
Utility modules for m3trans.
"""

from .path_utils import decode_location, local_path_from_location, sanitize_component, strip_local_prefix
from .file_duration_reader import get_file_duration, format_seconds

__all__ = [
    'decode_location',
    'local_path_from_location',
    'sanitize_component',
    'strip_local_prefix',
    'get_file_duration',
    'format_seconds',
]
