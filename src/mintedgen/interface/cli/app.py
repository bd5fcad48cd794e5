from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration merging and validation, pipeline execution and result
rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from mintedgen.core.pipeline.engine import run_pipeline
from mintedgen.core.pipeline.stages.validator import validate_config
from mintedgen.domain.config import get_default_config
from mintedgen.domain.pipeline_models import PipelineResult
from mintedgen.infra.logging import LoggingConfig, configure_logging, get_logger
from mintedgen.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase (usage errors exit with code 2 here)
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Merge command-line overrides over the defaults
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))

    if args.dump_config:
        clean_conf, warnings = validate_config(raw_conf, strict=False)
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pipeline execution phase
    try:
        result = run_pipeline(raw_conf, program_name=parser.prog)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted by user.", file=sys.stderr)
        return 130

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    """
    Print the execution result to standard output.

    Args:
        result: The pipeline result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(f"LaTeX written to: {result.output_path}")
    print(f"Files discovered: {result.discovered}")
    print(f"Files listed: {result.retained}")
    print(f"Folders in tree: {result.folders}")
    if result.wrap_columns > 1:
        print(f"Tree columns: {result.wrap_columns}")
    for language, count in sorted(result.languages.items()):
        print(f"  - {language}: {count}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
