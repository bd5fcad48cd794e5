from __future__ import annotations

"""
Unit tests for the PathInfo value object.

Covers file name and compound extension extraction, separator rewriting
and re-rooting relative to a start directory.
"""

import os

import pytest

from mintedgen.domain.path_models import PathInfo, RetainedFile


def _p(*segments: str) -> str:
    return os.sep.join(segments)


@pytest.mark.parametrize(
    "name, extension",
    [
        ("Foo.xaml.cs", ".xaml.cs"),
        ("Bar.cs", ".cs"),
        ("Package.appxmanifest", ".appxmanifest"),
        (".gitignore", ".gitignore"),
        ("Makefile", ""),
    ],
)
def test_extension_stops_at_first_dot(name: str, extension: str) -> None:
    info = PathInfo.from_path(_p("root", "src", name))

    assert info.file_name == name
    assert info.extension == extension


def test_decomposition() -> None:
    info = PathInfo.from_path(_p("root", "A", "B", "y.cs"))

    assert info.full_path == _p("root", "A", "B", "y.cs")
    assert info.segments == ("root", "A", "B", "y.cs")
    assert info.depth == 3
    assert info.directory == _p("root", "A", "B")


def test_bare_file_name() -> None:
    info = PathInfo.from_path("main.cs")

    assert info.file_name == "main.cs"
    assert info.directory == ""
    assert info.depth == 0


def test_with_separator() -> None:
    info = PathInfo.from_path(_p("root", "A", "x.cs"))

    assert info.with_separator("/") == "root/A/x.cs"
    assert info.with_separator("|") == "root|A|x.cs"


@pytest.mark.parametrize("start", [_p("", "work", "root"), _p("", "work", "root") + os.sep])
def test_relative_to_keeps_start_directory_name(start: str) -> None:
    info = PathInfo.from_path(_p("", "work", "root", "A", "x.cs"))

    rel = info.relative_to(start)

    assert rel.full_path == _p("root", "A", "x.cs")
    assert rel.file_name == "x.cs"
    assert rel.extension == ".cs"


def test_values_are_immutable_and_comparable() -> None:
    a = PathInfo.from_path(_p("root", "x.cs"))
    b = PathInfo.from_path(_p("root", "x.cs"))

    assert a == b
    with pytest.raises(AttributeError):
        a.file_name = "y.cs"  # type: ignore[misc]

    retained = RetainedFile(path=a, language="cs")
    assert retained.path.file_name == "x.cs"
