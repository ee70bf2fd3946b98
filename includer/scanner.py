"""
includer/scanner.py — wyszukiwanie dyrektyw include w tekście dokumentu.

Składnia dyrektywy:

    <!-- #include file="ścieżka/do/pliku.xml" -->

Wszystko, co nie pasuje dokładnie do tego kształtu (brak atrybutu file,
niezamknięty cudzysłów, brak `-->`, ścieżka łamana między liniami, komentarz
bez słowa #include), nie jest dyrektywą i zostaje w tekście bez zmian.
"""

from __future__ import annotations

import re
from typing import Iterator

from .types import Directive

# Cała dyrektywa; grupa "path" to surowa ścieżka (bez cudzysłowów).
# Komentarz może być łamany między liniami, sama ścieżka nie.
DIRECTIVE_RE = re.compile(
    r'<!--\s*#include\s+file\s*=\s*"(?P<path>[^"\r\n]*)"\s*-->'
)

_MARKER = "#include"


def scan_directives(text: str) -> Iterator[Directive]:
    """
    Zwraca leniwy generator dyrektyw w kolejności od lewej do prawej.

    Generator jest jednorazowy: każde skanowanie tworzy nowe obiekty Directive.
    """
    for ordinal, m in enumerate(DIRECTIVE_RE.finditer(text)):
        yield Directive(
            raw_path=m.group("path"),
            start=m.start(),
            end=m.end(),
            ordinal=ordinal,
        )


def has_directives(text: str) -> bool:
    """True gdy tekst zawiera co najmniej jedną poprawną dyrektywę."""
    if _MARKER not in text:
        return False
    return DIRECTIVE_RE.search(text) is not None
