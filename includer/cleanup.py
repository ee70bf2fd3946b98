"""
includer/cleanup.py — wklejanie wyników dyrektyw i tekstowe sprzątanie.

splice()               — podmienia zakresy dyrektyw na rozwinięte fragmenty;
                         linia, na której były wyłącznie pominięte dyrektywy,
                         znika w całości (bez pustych placeholderów).
flatten_placeholders() — spłaszcza syntetyczne elementy <placeholder>…</placeholder>
                         grupujące include'y do jednej sekcji CDATA.

Sprzątanie jest heurystyką tekstową, nie transformacją świadomą schematu XML.
Tekst bez dyrektyw i bez placeholderów przechodzi bez zmian.
"""

from __future__ import annotations

import re
from itertools import groupby
from typing import Sequence

from .types import Directive

PLACEHOLDER_TAG = "placeholder"

# Najgłębszy element placeholder (bez zagnieżdżonego otwarcia w środku).
_PLACEHOLDER_RE = re.compile(
    rf"<{PLACEHOLDER_TAG}\b[^>]*>"
    rf"(?P<inner>(?:(?!<{PLACEHOLDER_TAG}\b).)*?)"
    rf"</{PLACEHOLDER_TAG}\s*>",
    re.IGNORECASE | re.DOTALL,
)

_CDATA_RE = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.DOTALL)

# Wynik dyrektywy: tekst do wklejenia albo None (dyrektywa pominięta).
Piece = tuple[Directive, str | None]


# ---------------------------------------------------------------------------
# Wklejanie
# ---------------------------------------------------------------------------

def _line_bounds(text: str, start: int, end: int) -> tuple[int, int]:
    """Zakres linii zawierającej [start, end), łącznie z kończącym \\n."""
    line_start = text.rfind("\n", 0, start) + 1
    nl = text.find("\n", end)
    line_end = len(text) if nl == -1 else nl + 1
    return line_start, line_end


def _edits_for_line(
    text: str,
    bounds: tuple[int, int],
    pieces: list[Piece],
) -> list[tuple[int, int, str]]:
    line_start, line_end = bounds
    if all(replacement is None for _, replacement in pieces):
        residue = []
        cursor = line_start
        for directive, _ in pieces:
            residue.append(text[cursor:directive.start])
            cursor = directive.end
        residue.append(text[cursor:line_end])
        if not "".join(residue).strip():
            return [(line_start, line_end, "")]
    return [
        (directive.start, directive.end, replacement or "")
        for directive, replacement in pieces
    ]


def splice(text: str, pieces: Sequence[Piece]) -> str:
    """
    Podmienia zakresy dyrektyw w `text` na ich wyniki, od lewej do prawej.

    pieces: pary (dyrektywa, wynik), wklejane w kolejności Directive.ordinal;
            wynik None oznacza dyrektywę pominiętą (brakujący plik, zła ścieżka).
    """
    if not pieces:
        return text

    pieces = sorted(pieces, key=lambda piece: piece[0].ordinal)

    edits: list[tuple[int, int, str]] = []
    keyed = ((_line_bounds(text, d.start, d.end), (d, r)) for d, r in pieces)
    for bounds, group in groupby(keyed, key=lambda item: item[0]):
        edits.extend(_edits_for_line(text, bounds, [p for _, p in group]))

    out: list[str] = []
    cursor = 0
    for start, end, replacement in edits:
        out.append(text[cursor:start])
        out.append(replacement)
        cursor = end
    out.append(text[cursor:])
    return "".join(out)


# ---------------------------------------------------------------------------
# Placeholdery
# ---------------------------------------------------------------------------

def flatten_placeholders(text: str, wrap_cdata: bool = True) -> str:
    """
    Zastępuje elementy <placeholder> ich zawartością.

    Zawartość jest przycinana, zagnieżdżone sekcje CDATA są rozpakowywane, a
    całość (przy wrap_cdata=True) trafia do jednej sekcji:

        <placeholder><![CDATA[a]]>b</placeholder>  →  \\n<![CDATA[\\nab\\n]]>

    Zagnieżdżone placeholdery są spłaszczane od najgłębszego.
    """
    def _flatten(m: re.Match[str]) -> str:
        inner = _CDATA_RE.sub(r"\1", m.group("inner").strip())
        if wrap_cdata:
            return f"\n<![CDATA[\n{inner}\n]]>"
        return inner

    while True:
        flattened = _PLACEHOLDER_RE.sub(_flatten, text)
        if flattened == text:
            return text
        text = flattened
