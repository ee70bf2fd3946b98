"""workspace/storage.py — czytnik dokumentów z systemu plików pod content root."""

from __future__ import annotations

from pathlib import Path

from includer import DocumentNotFound, to_filesystem

# utf-8-sig: BOM z plików zapisanych na Windows nie trafia do środka dokumentu.
ENCODING = "utf-8-sig"


class FileStorage:
    """
    Czyta dokumenty po ścieżce kanonicznej (`/`, względem root).

    Brak pliku albo ścieżka wskazująca katalog → DocumentNotFound.
    Pozostałe błędy I/O i dekodowania są propagowane bez zmian.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def locate(self, path: str) -> Path:
        return to_filesystem(self.root, path)

    def read(self, path: str) -> str:
        file_path = self.locate(path)
        if not file_path.is_file():
            raise DocumentNotFound(path)
        return file_path.read_text(encoding=ENCODING)

    def __repr__(self) -> str:
        return f"FileStorage({str(self.root)!r})"
