"""
Configuration validation utilities.
"""

import importlib
import re
from typing import List, Tuple
from .config import (
    OUTPUT_CONFIG,
    LIBRARY_CONFIG,
    LOGGING_CONFIG,
)
from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.

    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "mutagen": "mutagen",
        "rich": "rich",
    }

    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)

    return len(missing) == 0, missing


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )

    # Output layout names must be single path components
    for key in ("TRACKS_DIR", "PLAYLISTS_DIR"):
        value = OUTPUT_CONFIG[key]
        if not value or "/" in value or "\\" in value or value in (".", ".."):
            errors.append(f"{key} must be a single directory name, got {value!r}")

    if OUTPUT_CONFIG["TRACKS_DIR"] == OUTPUT_CONFIG["PLAYLISTS_DIR"]:
        errors.append("TRACKS_DIR and PLAYLISTS_DIR must differ")

    if not re.fullmatch(r"[A-Za-z0-9]+", OUTPUT_CONFIG["PLAYLIST_EXTENSION"]):
        errors.append("PLAYLIST_EXTENSION must be a non-empty alphanumeric extension")

    prefixes = LIBRARY_CONFIG["LOCAL_FILE_PREFIXES"]
    if not prefixes or not all(p.startswith("file://") and p.endswith("/") for p in prefixes):
        errors.append("LOCAL_FILE_PREFIXES must be file:// URL prefixes ending with '/'")

    if not LIBRARY_CONFIG["IGNORE_FILE_NAME"]:
        errors.append("IGNORE_FILE_NAME must not be empty")

    for key in ("LEVEL", "CONSOLE_LEVEL", "FILE_LEVEL"):
        if LOGGING_CONFIG[key] not in VALID_LOG_LEVELS:
            errors.append(f"LOG {key} must be one of: {', '.join(VALID_LOG_LEVELS)}")

    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)
