"""
m3trans - portable playlist exporter.
Copies a music library's tracks and mirrors its playlist folders as M3U files.
"""

__version__ = "1.0.0"
