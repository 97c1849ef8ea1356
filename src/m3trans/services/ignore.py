"""
Glob-based exclusion of playlists by virtual path.
"""

import fnmatch
import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Pattern, Tuple, Union

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _check_brackets(pattern: str) -> None:
    """Reject a character class that is never closed."""
    i = 0
    while i < len(pattern):
        if pattern[i] == "[":
            j = i + 1
            if j < len(pattern) and pattern[j] == "!":
                j += 1
            if j < len(pattern) and pattern[j] == "]":
                j += 1
            end = pattern.find("]", j)
            if end < 0:
                raise ValueError(f"unclosed character class at position {i}")
            i = end
        i += 1


class IgnoreMatcher:
    """
    A list of compiled glob patterns tested against playlist virtual paths.

    Patterns follow ``fnmatch`` rules and are case-sensitive; ``*`` also
    matches ``/``, so ``Rock*`` covers a folder and everything inside it.
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns: List[Tuple[str, Pattern]] = []
        self.discarded: List[str] = []
        for pattern in patterns:
            self.add(pattern)

    def add(self, pattern: str) -> bool:
        """
        Compile and add a pattern.

        Returns:
            False if the pattern was invalid and discarded
        """
        try:
            _check_brackets(pattern)
            compiled = re.compile(fnmatch.translate(pattern))
        except (ValueError, re.error) as e:
            logger.warning(f"Discarding invalid ignore pattern \"{pattern}\": {e}")
            self.discarded.append(pattern)
            return False
        self.patterns.append((pattern, compiled))
        return True

    def matches(self, virtual_path: str) -> bool:
        return any(compiled.match(virtual_path) for _, compiled in self.patterns)

    def match(self, virtual_path: str) -> Optional[str]:
        """Return the first pattern matching ``virtual_path``, if any."""
        for pattern, compiled in self.patterns:
            if compiled.match(virtual_path):
                return pattern
        return None

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "IgnoreMatcher":
        """
        Load newline-delimited patterns. A missing file yields no patterns.

        Raises:
            ConfigurationError: if the file exists but cannot be read
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info(f"No ignore file at {path}, nothing will be ignored")
            return cls()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Could not read ignore file {path}: {e}") from e

        patterns = [line.rstrip("\r") for line in text.split("\n")]
        matcher = cls(line for line in patterns if line.strip())
        logger.info(f"Loaded {len(matcher)} ignore pattern(s) from {path}")
        return matcher

    def __len__(self) -> int:
        return len(self.patterns)
