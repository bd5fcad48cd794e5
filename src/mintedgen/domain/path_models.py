from __future__ import annotations

"""
Source File Path Data Models.

Provides the immutable value objects describing discovered source files:
the decomposed path itself and its pairing with a listing language once
classification has retained it.
"""

import os
from dataclasses import dataclass
from typing import Tuple

# -----------------------------------------------------------------------------
# CONSTANTS
# -----------------------------------------------------------------------------

EXTENSION_SEPARATOR = "."


# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PathInfo:
    """
    Decomposed view of a single file path.

    Attributes:
        full_path: The path exactly as discovered (or made relative).
        file_name: Final segment of the path.
        extension: Substring of the file name from its first '.', kept whole
                   so compound extensions like '.xaml.cs' survive. Empty when
                   the name has no '.'.
    """
    full_path: str
    file_name: str
    extension: str

    SEPARATOR = os.sep

    @classmethod
    def from_path(cls, path: str) -> PathInfo:
        """
        Build a PathInfo from a path string.

        Args:
            path: Path using the platform directory separator.

        Returns:
            PathInfo: The decomposed value.
        """
        file_name = path.split(cls.SEPARATOR)[-1]
        return cls(full_path=path, file_name=file_name, extension=_extract_extension(file_name))

    @property
    def segments(self) -> Tuple[str, ...]:
        """Path segments split on the directory separator."""
        return tuple(self.full_path.split(self.SEPARATOR))

    @property
    def depth(self) -> int:
        """Nesting level of the file: number of segments minus one."""
        return len(self.segments) - 1

    @property
    def directory(self) -> str:
        """Directory part of the path, empty for a bare file name."""
        return self.SEPARATOR.join(self.segments[:-1])

    def with_separator(self, separator: str) -> str:
        """Return the path rewritten with an arbitrary directory separator."""
        return self.full_path.replace(self.SEPARATOR, separator)

    def relative_to(self, start_directory: str) -> PathInfo:
        """
        Re-root the path at the start directory's own name.

        '/src/root/A/x.cs' relative to '/src/root' becomes 'root/A/x.cs', so
        the start directory itself is the root of every relative path.

        Args:
            start_directory: Directory the path was discovered under.

        Returns:
            PathInfo: New value holding the relative path.
        """
        start = start_directory.rstrip(self.SEPARATOR)
        root_name = start.split(self.SEPARATOR)[-1]
        remainder = self.full_path[len(start):]
        return PathInfo.from_path(root_name + remainder)


@dataclass(frozen=True)
class RetainedFile:
    """
    A discovered file that matched the language map.

    Attributes:
        path: The file's decomposed path.
        language: Listing language tag (a pygments lexer name for minted).
    """
    path: PathInfo
    language: str


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _extract_extension(file_name: str) -> str:
    """Split once on the first '.' so additional dots stay in the extension."""
    parts = file_name.split(EXTENSION_SEPARATOR, 1)
    if len(parts) < 2:
        return ""
    return EXTENSION_SEPARATOR + parts[1]
