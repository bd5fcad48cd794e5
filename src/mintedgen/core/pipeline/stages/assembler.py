from __future__ import annotations

"""
Document Assembler Stage.

Turns the retained file set into the final LaTeX subfile: header lines, a
generated-by comment, the tree picture, then one minted listing per file
and the trailer lines. The output file is opened once and always closed.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from mintedgen.core.analysis.tikz_renderer import escape_latex, render_picture
from mintedgen.core.analysis.tree_layout import layout_tree
from mintedgen.domain.constants import LATEX_UNSAFE_PATH_CHARS, PROGRAM_NAME
from mintedgen.domain.layout_models import LayoutConfig, LayoutResult
from mintedgen.domain.path_models import PathInfo, RetainedFile
from mintedgen.infra.fs import ensure_parent_dir

logger = logging.getLogger(__name__)

RetainedFiles = Union[Mapping[str, RetainedFile], Iterable[RetainedFile]]


# -----------------------------------------------------------------------------
# CORE ASSEMBLY LOGIC
# -----------------------------------------------------------------------------

def render(
        output_path: str,
        start_directory: str,
        filtered_files: RetainedFiles,
        header_lines: Sequence[str],
        trailer_lines: Sequence[str],
        *,
        config: Optional[LayoutConfig] = None,
        program_name: str = PROGRAM_NAME,
) -> LayoutResult:
    """
    Write the complete LaTeX document to disk.

    Args:
        output_path: Target .tex file; overwritten if present.
        start_directory: Directory the retained paths were discovered under.
        filtered_files: Retained files in pre-order (mapping or iterable).
        header_lines: Lines written before the generated content.
        trailer_lines: Lines written after the listings.
        config: Tree picture geometry.
        program_name: Name quoted in the generated-by comment.

    Returns:
        LayoutResult: The tree layout that was serialized.
    """
    lines, layout = build_document_lines(
        start_directory, filtered_files, header_lines, trailer_lines,
        config=config, program_name=program_name,
    )

    ensure_parent_dir(output_path)
    with open(output_path, "w", encoding="utf-8", newline="\n") as stream:
        write_lines(stream, lines)

    logger.info(f"LaTeX document written to: {output_path}")
    return layout


def build_document_lines(
        start_directory: str,
        filtered_files: RetainedFiles,
        header_lines: Sequence[str],
        trailer_lines: Sequence[str],
        *,
        config: Optional[LayoutConfig] = None,
        program_name: str = PROGRAM_NAME,
) -> Tuple[List[str], LayoutResult]:
    """
    Produce the document lines without touching the filesystem.

    Returns:
        Tuple[List[str], LayoutResult]: Document lines and the tree layout.
    """
    cfg = config or LayoutConfig()
    files, relative = _drop_unsafe_paths(_as_list(filtered_files), start_directory)

    layout = layout_tree(relative, cfg)

    lines: List[str] = list(header_lines)
    lines.append(f"% LaTeX automatically generated by {program_name}.")
    lines.append(r"\section{Project code structure}")
    lines.extend(render_picture(layout, cfg))
    lines.extend([r"\clearpage", r"\section{Source code}"])

    for rf, rel in zip(files, relative):
        lines.extend(render_listing(rf.path.file_name, rf.language, rel.with_separator("/")))

    lines.extend(trailer_lines)
    return lines, layout


def render_listing(file_name: str, language: str, relative_path: str) -> List[str]:
    """Subsection heading, cross-reference label and minted inclusion for one file."""
    return [
        rf"\subsection*{{{escape_latex(file_name)}}}",
        rf"\label{{{file_name}}}",
        rf"\inputminted[breaklines]{{{language}}}{{{{{relative_path}}}}}",
    ]


def write_lines(stream, lines: Iterable[str]) -> None:
    for line in lines:
        stream.write(line + "\n")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _as_list(filtered_files: RetainedFiles) -> List[RetainedFile]:
    if isinstance(filtered_files, Mapping):
        return list(filtered_files.values())
    return list(filtered_files)


def _drop_unsafe_paths(
        files: List[RetainedFile],
        start_directory: str,
) -> Tuple[List[RetainedFile], List[PathInfo]]:
    """Pair each file with its relative path, skipping paths LaTeX cannot reference."""
    kept: List[RetainedFile] = []
    relative: List[PathInfo] = []
    for rf in files:
        rel = rf.path.relative_to(start_directory)
        if any(ch in LATEX_UNSAFE_PATH_CHARS for ch in rel.with_separator("/")):
            logger.warning(f"Skipping file with LaTeX-special characters in its path: {rf.path.full_path}")
            continue
        kept.append(rf)
        relative.append(rel)
    return kept, relative
