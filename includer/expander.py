"""
includer/expander.py — rekurencyjne rozwijanie dyrektyw include.

Expander.expand(path, chain=()) -> Expansion(text, events)

Przebieg dla jednego dokumentu:
  1. path już w łańcuchu      → CycleDetected, zwracamy surowy tekst (bez rekurencji)
  2. wczytanie dokumentu      → brak: LoadError (najwyższy poziom)
                                       albo MissingInclude + pusty wynik (zagnieżdżony)
  3. Processed(path)          → tylko dla wywołania najwyższego poziomu
  4. dyrektywy od lewej       → resolve_include, rekurencja, Included(cel)
  5. splice + placeholdery    → includer/cleanup.py

Zdarzenia są emitowane w głąb, od lewej do prawej. Included jest emitowane
po zdarzeniach z poddrzewa danego fragmentu.
"""

from __future__ import annotations

from .cleanup import Piece, flatten_placeholders, splice
from .report import ReportCollector
from .resolver import normalize_separators, resolve_include
from .scanner import has_directives, scan_directives
from .types import (
    Chain,
    DocumentNotFound,
    Expansion,
    InvalidPath,
    LoadError,
    StorageReader,
)


def _describe(exc: BaseException) -> str:
    if isinstance(exc, DocumentNotFound):
        return "not found"
    return f"{type(exc).__name__}: {exc}"


class Expander:
    """
    Rozwija dyrektywy include w dokumentach czytanych przez `reader`.

    Instancja nie trzyma stanu między wywołaniami expand(); każde wywołanie
    ma własny łańcuch i własny ReportCollector, więc jeden Expander można
    współdzielić między wątkami.

    Użycie:
        expander  = Expander(FileStorage(root))
        expansion = expander.expand("KFM/1_main.xml")
        expansion.text, expansion.events
    """

    def __init__(self, reader: StorageReader, *, wrap_cdata: bool = True) -> None:
        self._reader     = reader
        self._wrap_cdata = wrap_cdata

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def expand(self, path: str, chain: Chain = ()) -> Expansion:
        """
        Rozwija dokument `path` (ścieżka kanoniczna).

        Rzuca LoadError gdy `chain` jest pusty, a dokumentu nie da się wczytać.
        Dla wywołania zagnieżdżonego brak dokumentu daje pusty tekst i
        zdarzenie MissingInclude.
        """
        report = ReportCollector()
        text = self._expand(path, tuple(chain), report)
        return Expansion(text=text or "", events=report.entries)

    # ------------------------------------------------------------------
    # Rekurencja
    # ------------------------------------------------------------------

    def _read(self, path: str, chain: Chain, report: ReportCollector) -> str | None:
        try:
            return self._reader.read(path)
        except (OSError, UnicodeDecodeError) as e:
            if not chain:
                raise LoadError(path, e) from e
            report.missing(path, _describe(e))
            return None

    def _expand(self, path: str, chain: Chain, report: ReportCollector) -> str | None:
        if path in chain:
            report.cycle(path, chain)
            return self._read(path, chain, report)

        text = self._read(path, chain, report)
        if text is None:
            return None

        if not chain:
            report.processed(path)

        if not has_directives(text):
            return flatten_placeholders(text, self._wrap_cdata)

        next_chain = (*chain, path)
        pieces: list[Piece] = []
        for directive in scan_directives(text):
            try:
                target = resolve_include(directive.raw_path, path)
            except InvalidPath as e:
                report.missing(normalize_separators(directive.raw_path), e.reason)
                pieces.append((directive, None))
                continue

            expanded = self._expand(target, next_chain, report)
            if expanded is not None and target not in next_chain:
                report.included(target)
            pieces.append((directive, expanded))

        return flatten_placeholders(splice(text, pieces), self._wrap_cdata)
