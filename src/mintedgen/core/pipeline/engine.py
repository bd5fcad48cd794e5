from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates a generator run:
1. Validates configuration and normalizes paths.
2. Scans the source directory (pre-order, ignored names pruned).
3. Classifies the files against the language map.
4. Lays out the tree picture and writes the LaTeX document.
"""

import logging
import os
from collections import Counter
from typing import Any, Dict, Optional

from mintedgen.core.pipeline.components.filters import classify
from mintedgen.core.pipeline.stages.assembler import render
from mintedgen.core.pipeline.stages.validator import validate_config
from mintedgen.core.services.scanner import list_files
from mintedgen.domain.config import build_layout_config, get_header_lines, get_trailer_lines
from mintedgen.domain.constants import PROGRAM_NAME
from mintedgen.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from mintedgen.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        program_name: str = PROGRAM_NAME,
) -> PipelineResult:
    """
    Execute a full scan-classify-render run.

    Args:
        config: The configuration dictionary (raw or partial).
        program_name: Name quoted in the generated-by comment.

    Returns:
        PipelineResult: Object containing status, counts, and summary.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    fallback_base = os.getcwd()
    input_path = normalize_path(cfg["input_path"], fallback_base)
    output_path = normalize_path(cfg["output_path"], os.path.join(fallback_base, "source_code.tex"))
    layout_config = build_layout_config(cfg)

    # -------------------------------------------------------------------------
    # 2) Discovery & Classification
    # -------------------------------------------------------------------------
    discovered = list_files(input_path, cfg["ignored_names"])
    retained = classify(discovered, cfg["language_map"])
    logger.info(f"Retained {len(retained)} of {len(discovered)} files from {input_path}")

    # -------------------------------------------------------------------------
    # 3) Layout & Document Rendering
    # -------------------------------------------------------------------------
    try:
        layout = render(
            output_path,
            input_path,
            retained,
            get_header_lines(cfg["document_mode"]),
            get_trailer_lines(),
            config=layout_config,
            program_name=program_name,
        )
    except OSError as e:
        msg = f"Failed to write LaTeX output '{output_path}': {e}"
        logger.error(msg)
        return create_error_result(msg, input_path, output_path)

    languages = Counter(rf.language for rf in retained.values())
    wrap_columns = layout.cursor.wrap_index + 1 if layout.labels else 0

    summary = {
        "document_mode": cfg["document_mode"],
        "nodes": layout.cursor.node_index,
        "files_in_tree": len(layout.file_labels),
        "skipped_paths": len(retained) - len(layout.file_labels),
        "warnings": list(warnings),
    }

    logger.info("Pipeline completed successfully.")
    return create_success_result(
        input_path=input_path,
        output_path=output_path,
        discovered=len(discovered),
        retained=len(retained),
        folders=len(layout.folder_labels),
        connectors=len(layout.connectors),
        wrap_columns=wrap_columns,
        languages=dict(languages),
        summary=summary,
    )
