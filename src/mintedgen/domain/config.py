from __future__ import annotations

"""
Configuration Domain Management.

Builds the dictionary that drives a generator run and converts its
geometry keys into the layout engine's configuration object.
"""

import logging
import os
from typing import Any, Dict, List

from mintedgen.domain.constants import (
    DEFAULT_DOCUMENT_MODE,
    DEFAULT_FOLDER_LABEL_OFFSET,
    DEFAULT_HORIZONTAL_STEP,
    DEFAULT_IGNORED_NAMES,
    DEFAULT_LANGUAGE_MAP,
    DEFAULT_MAX_COLUMN_HEIGHT,
    DEFAULT_PICTURE_SCALE,
    DEFAULT_TRAILER,
    DEFAULT_VERTICAL_STEP,
    DEFAULT_WRAP_WIDTH,
    HEADERS_BY_MODE,
)
from mintedgen.domain.layout_models import LayoutConfig

logger = logging.getLogger(__name__)

# Keys holding positive geometry values, in picture units
GEOMETRY_FIELDS: List[str] = [
    "horizontal_step",
    "vertical_step",
    "max_column_height",
    "wrap_width",
    "scale",
]


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    base = os.getcwd()
    return {
        # IO Paths
        "input_path": base,
        "output_path": os.path.join(base, "source_code.tex"),

        # Discovery & Classification
        "ignored_names": list(DEFAULT_IGNORED_NAMES),
        "language_map": dict(DEFAULT_LANGUAGE_MAP),

        # Document
        "document_mode": DEFAULT_DOCUMENT_MODE,

        # Tree Geometry
        "horizontal_step": DEFAULT_HORIZONTAL_STEP,
        "vertical_step": DEFAULT_VERTICAL_STEP,
        "max_column_height": DEFAULT_MAX_COLUMN_HEIGHT,
        "wrap_width": DEFAULT_WRAP_WIDTH,
        "scale": DEFAULT_PICTURE_SCALE,
    }


def build_layout_config(cfg: Dict[str, Any]) -> LayoutConfig:
    """
    Extract the tree geometry from a validated configuration.

    Args:
        cfg: Validated configuration dictionary.

    Returns:
        LayoutConfig: Geometry for the layout engine and renderer.
    """
    return LayoutConfig(
        horizontal_step=float(cfg["horizontal_step"]),
        vertical_step=float(cfg["vertical_step"]),
        max_column_height=float(cfg["max_column_height"]),
        wrap_width=float(cfg["wrap_width"]),
        scale=float(cfg["scale"]),
        folder_label_offset=DEFAULT_FOLDER_LABEL_OFFSET,
    )


def get_header_lines(document_mode: str) -> List[str]:
    """Header preset for a document mode; unknown modes fall back to the subfile header."""
    return list(HEADERS_BY_MODE.get(document_mode, HEADERS_BY_MODE[DEFAULT_DOCUMENT_MODE]))


def get_trailer_lines() -> List[str]:
    return list(DEFAULT_TRAILER)
