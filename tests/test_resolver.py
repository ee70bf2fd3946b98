from __future__ import annotations

from pathlib import Path

import pytest

from includer import InvalidPath, normalize_separators, resolve_include, to_canonical, to_filesystem


def test_both_separators_resolve_to_same_canonical_path() -> None:
    assert resolve_include("Wolf\\단타.xml") == "Wolf/단타.xml"
    assert resolve_include("Wolf/단타.xml") == "Wolf/단타.xml"


def test_resolution_ignores_referrer_directory() -> None:
    assert resolve_include("parts/a.xml", "KFM/deep/1_main.xml") == "parts/a.xml"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("./a/./b.xml", "a/b.xml"),
        ("a/x/../b.xml", "a/b.xml"),
        ("a//b.xml", "a/b.xml"),
        ("  a\\b.xml ", "a/b.xml"),
        ("/a/b.xml", "a/b.xml"),
        ("\\a\\..\\b.xml", "b.xml"),
    ],
)
def test_redundant_segments_are_removed(raw: str, expected: str) -> None:
    assert resolve_include(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "   ", ".", "a/..", "../a.xml", "a/../../b.xml", "..\\x.xml", "C:\\a.xml", "dir/", "a\x00b"],
)
def test_invalid_paths(raw: str) -> None:
    with pytest.raises(InvalidPath):
        resolve_include(raw, "KFM/1_main.xml")


def test_invalid_path_is_value_error_with_reason() -> None:
    with pytest.raises(ValueError) as info:
        resolve_include("../x.xml", "KFM/1.xml")
    assert "escapes the content root" in info.value.reason
    assert info.value.raw == "../x.xml"


def test_normalize_separators() -> None:
    assert normalize_separators(" a\\b/c ") == "a/b/c"


def test_filesystem_mapping_round_trip(tmp_path: Path) -> None:
    path = to_filesystem(tmp_path, "Wolf/단타.xml")
    assert path == tmp_path / "Wolf" / "단타.xml"
    assert to_canonical(tmp_path, path) == "Wolf/단타.xml"
