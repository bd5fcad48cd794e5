from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared helpers to build relative path lists and sample source trees.
3. Teardown of the logging subsystem between tests.
"""

import os
import sys
from pathlib import Path
from typing import Callable, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from mintedgen.domain.path_models import PathInfo  # noqa: E402
from mintedgen.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging_state():
    """Detach any handlers a test installed through configure_logging."""
    yield
    shutdown_logging()


@pytest.fixture
def make_paths() -> Callable[..., List[PathInfo]]:
    """
    Build PathInfo objects from forward-slash paths.

    Returns:
        Callable: make_paths("root/A/x.cs", ...) -> List[PathInfo]
    """
    def _make(*paths: str) -> List[PathInfo]:
        return [PathInfo.from_path(p.replace("/", os.sep)) for p in paths]
    return _make


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small C# project on disk.

    Structure:
    /root
      Program.cs
      notes.txt
      /App
        App.xaml
        App.xaml.cs
        /Views
          Main_View.xaml.cs
      /bin
        Debug.cs
      /Models
        Item.cs
    """
    root = tmp_path / "root"
    (root / "App" / "Views").mkdir(parents=True)
    (root / "bin").mkdir()
    (root / "Models").mkdir()

    (root / "Program.cs").write_text("class Program {}", encoding="utf-8")
    (root / "notes.txt").write_text("not listed", encoding="utf-8")
    (root / "App" / "App.xaml").write_text("<Application/>", encoding="utf-8")
    (root / "App" / "App.xaml.cs").write_text("partial class App {}", encoding="utf-8")
    (root / "App" / "Views" / "Main_View.xaml.cs").write_text("class MainView {}", encoding="utf-8")
    (root / "bin" / "Debug.cs").write_text("// build output", encoding="utf-8")
    (root / "Models" / "Item.cs").write_text("class Item {}", encoding="utf-8")

    return root
