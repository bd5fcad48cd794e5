from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides for the pipeline.
"""

import argparse
from typing import Any, Dict

from mintedgen.domain.constants import PROGRAM_NAME

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the mintedgen CLI.

    Exactly two positionals are accepted; argparse rejects any other count
    with a usage error before anything is written.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=(
            "Scan a source directory and write a LaTeX document containing a "
            "TikZ tree of its files followed by a minted listing of each file."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "output_file",
        help="LaTeX file to write (overwritten if it exists).",
    )
    p.add_argument(
        "source_directory",
        help="Directory containing the source code to document.",
    )

    # --- Document Options ---
    p.add_argument(
        "--standalone",
        action="store_true",
        help="Emit a standalone article preamble instead of a subfile header.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit without writing.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write a rotated diagnostic log to this file.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run summary as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "output_path": args.output_file,
        "input_path": args.source_directory,
    }

    if args.standalone:
        overrides["document_mode"] = "standalone"

    return overrides
