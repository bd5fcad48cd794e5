from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object and factory functions used to communicate a
generator run's outcome between the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete generator run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Normalized source directory scanned.
        output_path: Normalized LaTeX file written.
        discovered: Number of files found by the scan.
        retained: Number of files kept by classification.
        folders: Number of folder labels in the tree picture.
        connectors: Number of connector paths in the tree picture.
        wrap_columns: Number of columns the tree picture spans.
        languages: Retained file count per listing language.
        summary: Extra execution metadata.
    """
    ok: bool
    error: str

    input_path: str
    output_path: str

    discovered: int = 0
    retained: int = 0
    folders: int = 0
    connectors: int = 0
    wrap_columns: int = 0

    languages: Dict[str, int] = field(default_factory=dict)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        input_path: str,
        output_path: str = "",
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        input_path: The source directory of the run.
        output_path: The target LaTeX file.

    Returns:
        PipelineResult: Result with ok=False.
    """
    return PipelineResult(
        ok=False,
        error=error,
        input_path=input_path,
        output_path=output_path,
    )


def create_success_result(
        input_path: str,
        output_path: str,
        discovered: int,
        retained: int,
        folders: int,
        connectors: int,
        wrap_columns: int,
        languages: Dict[str, int],
        summary: Dict[str, Any],
) -> PipelineResult:
    """Create a successful pipeline result instance."""
    return PipelineResult(
        ok=True,
        error="",
        input_path=input_path,
        output_path=output_path,
        discovered=discovered,
        retained=retained,
        folders=folders,
        connectors=connectors,
        wrap_columns=wrap_columns,
        languages=dict(languages),
        summary=dict(summary),
    )
