from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.
"""

import pytest

from mintedgen.core.pipeline.stages.validator import validate_config
from mintedgen.domain.config import build_layout_config, get_default_config


def test_defaults_pass_without_warnings() -> None:
    cfg, warnings = validate_config(get_default_config())

    assert warnings == []
    assert cfg["document_mode"] == "subfile"
    assert cfg["language_map"][".xaml.cs"] == "cs"
    assert "obj" in cfg["ignored_names"]


def test_non_dict_falls_back_to_defaults() -> None:
    cfg, warnings = validate_config(["not", "a", "dict"])

    assert cfg == get_default_config()
    assert "Invalid config type" in warnings[0]


def test_non_dict_raises_in_strict_mode() -> None:
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_language_map_keys_get_leading_dot() -> None:
    cfg, warnings = validate_config({"language_map": {"py": "python", ".cs": "cs"}})

    assert cfg["language_map"] == {".py": "python", ".cs": "cs"}
    assert any("corrected to '.py'" in w for w in warnings)


def test_language_map_bad_entries_discarded() -> None:
    cfg, warnings = validate_config({"language_map": {".cs": 3, "": "x", ".go": "go"}})

    assert cfg["language_map"] == {".go": "go"}
    assert len(warnings) == 2


def test_geometry_coercion_and_fallback() -> None:
    cfg, warnings = validate_config({"wrap_width": "12", "vertical_step": -1, "scale": True})

    assert cfg["wrap_width"] == 12.0
    assert cfg["vertical_step"] == get_default_config()["vertical_step"]
    assert cfg["scale"] == get_default_config()["scale"]
    assert len(warnings) == 3


def test_geometry_strict_mode_raises() -> None:
    with pytest.raises(ValueError):
        validate_config({"max_column_height": 0}, strict=True)


def test_ignored_names_from_csv() -> None:
    cfg, warnings = validate_config({"ignored_names": "bin, obj ,node_modules"})

    assert cfg["ignored_names"] == ["bin", "obj", "node_modules"]
    assert warnings


def test_document_mode_normalized() -> None:
    cfg, _ = validate_config({"document_mode": " Standalone "})
    assert cfg["document_mode"] == "standalone"

    cfg, warnings = validate_config({"document_mode": "book"})
    assert cfg["document_mode"] == "subfile"
    assert warnings


def test_build_layout_config_reads_geometry() -> None:
    cfg, _ = validate_config({"wrap_width": 4, "max_column_height": 10})

    layout = build_layout_config(cfg)

    assert layout.wrap_width == 4.0
    assert layout.max_column_height == 10.0
    assert layout.horizontal_step == 0.5
