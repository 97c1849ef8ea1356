"""
Custom exceptions for m3trans.
"""


class M3transError(Exception):
    """Base exception for m3trans."""
    pass


class LibraryLoadError(M3transError):
    """Exception raised when the library document cannot be read or is malformed."""
    pass


class LibraryParseError(M3transError):
    """Exception raised when a library record cannot be normalized."""
    pass


class InvalidPlaylistId(LibraryParseError):
    """A playlist persistent id or parent id is not a 64-bit hexadecimal value."""
    pass


class InvalidTrackId(LibraryParseError):
    """A track id is not a 64-bit decimal value."""
    pass


class NonUtf8Path(LibraryParseError):
    """A track location does not decode to UTF-8."""
    pass


class ConfigurationError(M3transError):
    """Exception raised when configuration is invalid."""
    pass


class OutputError(M3transError):
    """Exception raised when the output layout cannot be created."""
    pass
