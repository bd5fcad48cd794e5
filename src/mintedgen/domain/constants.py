from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides the fixed generator settings: directories skipped while scanning,
the extension to minted language mapping, the tree picture geometry and the
LaTeX document header/trailer presets.
"""

from typing import Dict, List

PROGRAM_NAME = "mintedgen"

# -----------------------------------------------------------------------------
# DISCOVERY AND CLASSIFICATION
# -----------------------------------------------------------------------------

DEFAULT_IGNORED_NAMES: List[str] = [
    "bin", "Builds", "obj", "Debug", "x64", ".vs", ".git", "Properties",
]

# Keys include the leading '.'; compound extensions are matched whole.
DEFAULT_LANGUAGE_MAP: Dict[str, str] = {
    ".cs": "cs",
    ".xaml.cs": "cs",
    ".xaml": "xml",
    ".manifest": "xml",
    ".appxmanifest": "xml",
}

# Characters that cannot appear raw in \label, \fileref or \inputminted arguments.
LATEX_UNSAFE_PATH_CHARS = "%#{}\\"

# -----------------------------------------------------------------------------
# TREE PICTURE GEOMETRY
# -----------------------------------------------------------------------------

DEFAULT_HORIZONTAL_STEP = 0.5
DEFAULT_VERTICAL_STEP = 0.5
DEFAULT_MAX_COLUMN_HEIGHT = 30.0
DEFAULT_WRAP_WIDTH = 8.0
DEFAULT_PICTURE_SCALE = 0.85
DEFAULT_FOLDER_LABEL_OFFSET = 0.25

# -----------------------------------------------------------------------------
# DOCUMENT PRESETS
# -----------------------------------------------------------------------------

DOCUMENT_MODES = ("subfile", "standalone")
DEFAULT_DOCUMENT_MODE = "subfile"

SUBFILE_HEADER: List[str] = [
    r"\documentclass[../main.tex]{subfiles}",
    "",
    r"\begin{document}",
    r"\chapter{Source code}",
    r"\label{sourceCode}",
]

STANDALONE_HEADER: List[str] = [
    r"\documentclass{article}",
    "",
    r"\usepackage{tikz}",
    r"\usepackage{minted}",
    r"\usepackage{hyperref}",
    r"\newcommand{\fileref}[1]{\hyperref[#1]{\detokenize{#1}}}",
    r"\begin{document}",
]

DEFAULT_TRAILER: List[str] = [
    r"\end{document}",
]

HEADERS_BY_MODE: Dict[str, List[str]] = {
    "subfile": SUBFILE_HEADER,
    "standalone": STANDALONE_HEADER,
}
