from __future__ import annotations

"""
Unit tests for the TikZ Renderer.

Verifies coordinate formatting, directive syntax for connectors and labels,
LaTeX escaping and the layout of the complete figure block.
"""

import pytest

from mintedgen.core.analysis.tikz_renderer import (
    escape_latex,
    format_number,
    render_connector,
    render_file_label,
    render_folder_label,
    render_picture,
)
from mintedgen.core.analysis.tree_layout import layout_tree
from mintedgen.domain.layout_models import Connector, FileLabel, FolderLabel, LayoutConfig


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.5, "0.5"),
        (-1.0, "-1"),
        (-0.0, "0"),
        (8.25, "8.25"),
        (30.0, "30"),
        (0.85, "0.85"),
        (-29.5, "-29.5"),
        (0.1 + 0.2, "0.3"),
    ],
)
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_render_connector() -> None:
    assert render_connector(Connector(0, 0, 0.5, -0.5)) == r"\draw (0, 0) |- (0.5, -0.5);"


def test_render_folder_label_is_opaque_and_nudged_left() -> None:
    label = FolderLabel(text="root", x=0.0, y=-0.0, depth=0, node_index=0, wrap_index=0)

    line = render_folder_label(label, LayoutConfig())

    assert line == r"\node[right, fill=white] at (-0.25, 0) {root};"


def test_render_folder_label_escapes_text() -> None:
    label = FolderLabel(text="my_dir", x=1.0, y=-2.0, depth=2, node_index=4, wrap_index=0)

    line = render_folder_label(label, LayoutConfig())

    assert line.endswith(r"{my\_dir};")


def test_render_file_label_references_the_file() -> None:
    label = FileLabel(text="x.cs", x=0.5, y=-1.0, depth=1, node_index=2, wrap_index=0, path="root/x.cs")

    assert render_file_label(label) == r"\node[right] at (0.5, -1) {\fileref{x.cs}};"


def test_escape_latex() -> None:
    assert escape_latex("a_b&c%d$e#f") == r"a\_b\&c\%d\$e\#f"
    assert escape_latex("{x}") == r"\{x\}"
    assert escape_latex("~^") == r"\textasciitilde{}\textasciicircum{}"
    assert escape_latex("plain.cs") == "plain.cs"


def test_render_picture_structure(make_paths) -> None:
    """Connectors are emitted before all nodes so folder fills cover them."""
    config = LayoutConfig()
    layout = layout_tree(make_paths("root/A/x.cs", "root/z.cs"), config)

    lines = render_picture(layout, config)

    assert lines[0] == r"\begin{figure}[ht]"
    assert lines[1] == r"\begin{tikzpicture}[scale=0.85]"
    assert lines[-2:] == [r"\end{tikzpicture}", r"\end{figure}"]

    body = lines[2:-2]
    draws = [i for i, line in enumerate(body) if line.startswith(r"\draw")]
    nodes = [i for i, line in enumerate(body) if line.startswith(r"\node")]
    assert len(draws) == len(layout.connectors)
    assert len(nodes) == len(layout.labels)
    assert max(draws) < min(nodes)


def test_render_picture_for_empty_layout() -> None:
    config = LayoutConfig(scale=1.0)

    lines = render_picture(layout_tree([]), config)

    assert lines == [
        r"\begin{figure}[ht]",
        r"\begin{tikzpicture}[scale=1]",
        r"\end{tikzpicture}",
        r"\end{figure}",
    ]
