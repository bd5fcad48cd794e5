from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and directory preparation helpers shared by
the pipeline and the logging subsystem.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/), and drops trailing separators. Reverts to fallback if the
    input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# DIRECTORY PREPARATION
# -----------------------------------------------------------------------------

def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy for a target file if missing.

    Args:
        path: Path to the target file.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
