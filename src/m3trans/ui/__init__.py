"""
User interface components for m3trans.
"""

from .cli import M3transCLI
from .display import DisplayManager

__all__ = [
    'M3transCLI',
    'DisplayManager'
]
