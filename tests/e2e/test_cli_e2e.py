from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script through a subprocess and validates exit
codes, stream output and the generated LaTeX file.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "mintedgen" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments (excluding the interpreter and script).
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: Result with returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_generates_document(tmp_path: Path, sample_project: Path) -> None:
    output = tmp_path / "appendix.tex"

    result = run_cli([str(output), str(sample_project)])

    assert result.returncode == 0, result.stderr
    assert "Files listed: 5" in result.stdout
    content = output.read_text(encoding="utf-8")
    assert "% LaTeX automatically generated by mintedgen." in content
    assert r"\section{Project code structure}" in content
    assert r"\section{Source code}" in content


def test_cli_help(tmp_path: Path) -> None:
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "usage: mintedgen" in result.stdout


def test_cli_wrong_argument_count_writes_nothing(tmp_path: Path) -> None:
    output = tmp_path / "never.tex"

    result = run_cli([str(output)])

    assert result.returncode == 2
    assert "usage: mintedgen" in result.stderr
    assert not output.exists()


def test_cli_missing_source_directory(tmp_path: Path) -> None:
    output = tmp_path / "empty.tex"

    result = run_cli([str(output), str(tmp_path / "nowhere")])

    assert result.returncode == 0
    assert "Directory not found" in result.stderr
    assert output.exists()


def test_cli_json_output(tmp_path: Path, sample_project: Path) -> None:
    output = tmp_path / "appendix.tex"

    result = run_cli([str(output), str(sample_project), "--json"])

    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["folders"] == 4
    assert payload["output_path"] == str(output)
