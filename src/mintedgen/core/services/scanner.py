from __future__ import annotations

"""
File Discovery Service.

Walks a source directory in pre-order (a folder's files before its
subfolders) and returns every file as a PathInfo, pruning ignored
directory names at any depth.
"""

import logging
import os
from typing import Iterable, List

from mintedgen.domain.path_models import PathInfo

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def list_files(root: str, ignored_names: Iterable[str]) -> List[PathInfo]:
    """
    Collect every file below a root directory.

    Files and subdirectories are visited in name order so the result is
    stable across platforms. A missing root is reported and treated as an
    empty directory.

    Args:
        root: Directory to scan.
        ignored_names: Directory names skipped wherever they appear.

    Returns:
        List[PathInfo]: Discovered files in pre-order.
    """
    if not os.path.isdir(root):
        logger.warning(f"Directory not found: {root}")
        return []

    ignored = set(ignored_names)
    files: List[PathInfo] = []

    # os.walk yields top-down, so each folder's files precede its subfolders
    for current, dirs, names in os.walk(root, onerror=_report_walk_error):
        dirs[:] = sorted(d for d in dirs if d not in ignored)
        for name in sorted(names):
            files.append(PathInfo.from_path(os.path.join(current, name)))

    logger.debug(f"Discovered {len(files)} files under {root}")
    return files

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _report_walk_error(error: OSError) -> None:
    """Log unreadable directories; the walk carries on without them."""
    logger.warning(f"Directory not readable: {error.filename} ({error.strerror})")
