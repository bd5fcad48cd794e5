from __future__ import annotations

"""
File Classification Engine.

Matches discovered files against the extension to language mapping and
keeps only those a listing language is known for.
"""

import logging
from typing import Dict, Iterable, Mapping

from mintedgen.domain.constants import DEFAULT_LANGUAGE_MAP
from mintedgen.domain.path_models import PathInfo, RetainedFile

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_language_map() -> Dict[str, str]:
    """
    Get a fresh copy of the default extension to language mapping.

    Returns:
        Dict[str, str]: Extensions (with leading '.') to minted language tags.
    """
    return dict(DEFAULT_LANGUAGE_MAP)

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

def classify(
        files: Iterable[PathInfo],
        language_map: Mapping[str, str],
) -> Dict[str, RetainedFile]:
    """
    Retain the files whose full extension has a language, in input order.

    The result is keyed by the file's path string; the extension must match
    a key exactly, so '.xaml.cs' does not fall back to '.cs'.

    Args:
        files: Discovered files in pre-order.
        language_map: Extension to language tag mapping.

    Returns:
        Dict[str, RetainedFile]: Retained files keyed by full path.
    """
    retained: Dict[str, RetainedFile] = {}
    dropped = 0
    for path in files:
        language = language_map.get(path.extension)
        if language is None:
            dropped += 1
            continue
        retained[path.full_path] = RetainedFile(path=path, language=language)

    logger.debug(f"Classification retained {len(retained)} files, dropped {dropped}.")
    return retained
