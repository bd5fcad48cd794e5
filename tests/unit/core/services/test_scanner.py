from __future__ import annotations

"""
Unit tests for the File Discovery Service.

Verifies pre-order traversal, pruning of ignored directory names at any
depth and the graceful handling of a missing root.
"""

import logging
import os
from pathlib import Path

import pytest

from mintedgen.core.services.scanner import list_files


def _relative(files, root: Path):
    return [os.path.relpath(f.full_path, root).replace(os.sep, "/") for f in files]


@pytest.fixture
def walk_tree(tmp_path: Path) -> Path:
    """
    /proj
      z.cs, a.cs
      /A: b.cs, /B: c.cs, /obj: gen.cs
      /C: d.cs
      /.git: HEAD
    """
    root = tmp_path / "proj"
    (root / "A" / "B").mkdir(parents=True)
    (root / "A" / "obj").mkdir()
    (root / "C").mkdir()
    (root / ".git").mkdir()

    for rel in ["z.cs", "a.cs", "A/b.cs", "A/B/c.cs", "A/obj/gen.cs", "C/d.cs", ".git/HEAD"]:
        (root / rel).write_text("x", encoding="utf-8")
    return root


def test_list_files_is_pre_order(walk_tree: Path) -> None:
    files = list_files(str(walk_tree), ignored_names=["obj", ".git"])

    assert _relative(files, walk_tree) == ["a.cs", "z.cs", "A/b.cs", "A/B/c.cs", "C/d.cs"]


def test_ignored_names_pruned_at_any_depth(walk_tree: Path) -> None:
    files = list_files(str(walk_tree), ignored_names=["B", "C"])

    rel = _relative(files, walk_tree)
    assert "A/B/c.cs" not in rel
    assert "C/d.cs" not in rel
    assert "A/obj/gen.cs" in rel
    assert ".git/HEAD" in rel


def test_list_files_returns_path_info(walk_tree: Path) -> None:
    files = list_files(str(walk_tree), ignored_names=[])

    first = files[0]
    assert first.file_name == "a.cs"
    assert first.extension == ".cs"
    assert first.full_path == os.path.join(str(walk_tree), "a.cs")


def test_missing_directory_yields_empty_list(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    missing = tmp_path / "does_not_exist"

    with caplog.at_level(logging.WARNING, logger="mintedgen.core.services.scanner"):
        files = list_files(str(missing), ignored_names=[])

    assert files == []
    assert f"Directory not found: {missing}" in caplog.text


def test_file_as_root_yields_empty_list(tmp_path: Path) -> None:
    target = tmp_path / "single.cs"
    target.write_text("x", encoding="utf-8")

    assert list_files(str(target), ignored_names=[]) == []
