"""workspace/output.py — zapis skompilowanych dokumentów."""

from __future__ import annotations

from pathlib import Path

from includer import to_filesystem

DEFAULT_OUTPUT_DIR = "Compiled"


class OutputWriter:
    """
    Zapisuje dokument pod out_root, zachowując jego ścieżkę względną:

        KFM/1_main.xml  →  <out_root>/KFM/1_main.xml
    """

    def __init__(self, out_root: Path) -> None:
        self.out_root = Path(out_root)

    def target(self, path: str) -> Path:
        return to_filesystem(self.out_root, path)

    def write(self, path: str, text: str) -> Path:
        target = self.target(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        return target
