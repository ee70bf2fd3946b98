"""
includer/resolver.py — normalizacja i rozwiązywanie ścieżek z dyrektyw.

Ścieżki są zawsze liczone względem jednego, stałego katalogu głównego
(content root), niezależnie od tego, jak głęboko leży dokument odwołujący się.
Oba separatory (`/` i `\\`) są akceptowane; wewnętrznie używamy wyłącznie `/`.
"""

from __future__ import annotations

import re
from pathlib import Path

from .types import InvalidPath

SEPARATOR = "/"

# Litera dysku Windows: "C:", "d:\...", poza katalogiem głównym z definicji.
_DRIVE_RE = re.compile(r"^[A-Za-z]:")


def normalize_separators(raw: str) -> str:
    """Zamienia `\\` na `/` i przycina białe znaki wokół ścieżki."""
    return raw.strip().replace("\\", SEPARATOR)


def resolve_include(raw: str, referrer: str | None = None) -> str:
    """
    Zwraca kanoniczną ścieżkę (względem content root, separator `/`).

    `referrer` to ścieżka dokumentu zawierającego dyrektywę. Nie wpływa na
    wynik (rozwiązujemy względem katalogu głównego); służy tylko do opisu
    błędu.

    Rzuca InvalidPath gdy ścieżka:
      - jest pusta albo nie wskazuje żadnego pliku ("", ".", "a/.."),
      - wychodzi ponad katalog główny ("../x.xml"),
      - zawiera literę dysku lub znak NUL.
    """
    path = normalize_separators(raw)
    where = f" (in {referrer})" if referrer else ""

    if not path:
        raise InvalidPath(raw, f"empty include path{where}")
    if "\x00" in path:
        raise InvalidPath(raw, f"NUL character in include path{where}")
    if _DRIVE_RE.match(path):
        raise InvalidPath(raw, f"drive-qualified include path{where}")
    if path.endswith(SEPARATOR):
        raise InvalidPath(raw, f"include path names a directory{where}")

    parts: list[str] = []
    for segment in path.split(SEPARATOR):
        if segment in ("", "."):
            continue
        if segment == "..":
            if not parts:
                raise InvalidPath(raw, f"include path escapes the content root{where}")
            parts.pop()
            continue
        parts.append(segment)

    if not parts:
        raise InvalidPath(raw, f"include path has no target{where}")
    return SEPARATOR.join(parts)


def to_filesystem(root: Path, canonical: str) -> Path:
    """Mapuje ścieżkę kanoniczną na ścieżkę w systemie plików."""
    return root.joinpath(*canonical.split(SEPARATOR))


def to_canonical(root: Path, path: Path) -> str:
    """Odwrotność to_filesystem: ścieżka pliku pod root → ścieżka kanoniczna."""
    return path.relative_to(root).as_posix()
