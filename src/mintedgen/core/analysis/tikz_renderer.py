from __future__ import annotations

"""
TikZ Renderer.

Serializes the layout engine's drawing primitives into TikZ directives and
wraps them in the figure/tikzpicture block placed in the generated document.
"""

from typing import Iterable, List

from mintedgen.domain.layout_models import (
    Connector,
    FileLabel,
    FolderLabel,
    Label,
    LayoutConfig,
    LayoutResult,
)

_LATEX_ESCAPES = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_picture(layout: LayoutResult, config: LayoutConfig) -> List[str]:
    """
    Build the complete figure block for a laid-out tree.

    Connectors are emitted before labels so folder labels, drawn with an
    opaque fill, sit on top of the lines they cross.

    Args:
        layout: Result of the tree layout.
        config: Geometry used for the layout (scale and label offset).

    Returns:
        List[str]: LaTeX lines of the figure.
    """
    lines = [
        r"\begin{figure}[ht]",
        rf"\begin{{tikzpicture}}[scale={format_number(config.scale)}]",
    ]
    lines.extend(render_connector(c) for c in layout.connectors)
    lines.extend(render_labels(layout.labels, config))
    lines.extend([r"\end{tikzpicture}", r"\end{figure}"])
    return lines


def render_connector(connector: Connector) -> str:
    """Render a right-angle '|-' path."""
    return (
        rf"\draw ({format_number(connector.x1)}, {format_number(connector.y1)}) "
        rf"|- ({format_number(connector.x2)}, {format_number(connector.y2)});"
    )


def render_labels(labels: Iterable[Label], config: LayoutConfig) -> List[str]:
    out: List[str] = []
    for label in labels:
        if isinstance(label, FolderLabel):
            out.append(render_folder_label(label, config))
        elif isinstance(label, FileLabel):
            out.append(render_file_label(label))
    return out


def render_folder_label(label: FolderLabel, config: LayoutConfig) -> str:
    x = format_number(label.x - config.folder_label_offset)
    return rf"\node[right, fill=white] at ({x}, {format_number(label.y)}) {{{escape_latex(label.text)}}};"


def render_file_label(label: FileLabel) -> str:
    # The \fileref argument doubles as the listing's \label key; keep it raw.
    return rf"\node[right] at ({format_number(label.x)}, {format_number(label.y)}) {{\fileref{{{label.text}}}}};"

# -----------------------------------------------------------------------------
# FORMATTING HELPERS
# -----------------------------------------------------------------------------

def format_number(value: float) -> str:
    """
    Print a coordinate compactly: 0.5, -1, 8.25 (never '-0' or '1.0').

    Args:
        value: Coordinate in picture units.

    Returns:
        str: Shortest faithful decimal form.
    """
    rounded = round(float(value), 6) + 0.0
    text = f"{rounded:.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def escape_latex(text: str) -> str:
    """Escape characters with special meaning in LaTeX text mode."""
    return "".join(_LATEX_ESCAPES.get(ch, ch) for ch in text)
