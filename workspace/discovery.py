"""
workspace/discovery.py — wybór dokumentów najwyższego poziomu.

Dokument najwyższego poziomu to zwykły plik leżący dokładnie jeden katalog
poniżej content root (np. ./KFM/1_main.xml), którego nazwa pasuje do wzorca.
Pliki bezpośrednio w root i głębiej niż jeden poziom są tylko fragmentami.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from includer import to_canonical

DEFAULT_PATTERN = r"\.xml$"

# Konwencja nazw z pierwotnego narzędzia: cyfra + podkreślnik, np. 1_main.xml
NUMBERED_PATTERN = r"^\d_.*\.xml$"


def compile_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.IGNORECASE)


def discover_documents(
    root: Path,
    pattern: str | re.Pattern[str] = DEFAULT_PATTERN,
    exclude: Iterable[Path] = (),
) -> list[str]:
    """
    Zwraca posortowane ścieżki kanoniczne dokumentów najwyższego poziomu.

    exclude: katalogi pierwszego poziomu do pominięcia (np. katalog wyjściowy).
    """
    regex = compile_pattern(pattern)
    root = Path(root)
    skipped = {Path(p).resolve() for p in exclude}

    found: list[str] = []
    for folder in root.iterdir():
        if not folder.is_dir() or folder.resolve() in skipped:
            continue
        for entry in folder.iterdir():
            if entry.is_file() and regex.search(entry.name):
                found.append(to_canonical(root, entry))

    return sorted(found)
