from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


import pytest

from includer import Expander
from workspace import FileStorage


@pytest.fixture
def content_root(tmp_path: Path):
    """Zwraca funkcję zapisującą fragmenty {ścieżka: tekst} pod tmp_path/content."""
    root = tmp_path / "content"
    root.mkdir()

    def _write(files: dict[str, str]) -> Path:
        for rel, text in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def expander_for():
    def _make(root: Path, **kwargs) -> Expander:
        return Expander(FileStorage(root), **kwargs)

    return _make
