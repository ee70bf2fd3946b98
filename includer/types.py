"""
includer/types.py — typy danych silnika include'ów i taksonomia błędów.

Directive    — pojedyncza dyrektywa `<!-- #include file="..." -->` wraz z jej
               zakresem w tekście rodzica.
EventKind    — rodzaj zdarzenia raportu (processed / included / ...).
ReportEntry  — pojedyncze zdarzenie raportu.
Expansion    — wynik rozwinięcia dokumentu: tekst + lista zdarzeń.
StorageReader — protokół czytnika dokumentów (kanoniczna ścieżka → tekst).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

Chain = tuple[str, ...]


# ---------------------------------------------------------------------------
# Błędy
# ---------------------------------------------------------------------------

class IncludeError(Exception):
    """Bazowa klasa błędów silnika include'ów."""


class InvalidPath(IncludeError, ValueError):
    """Ścieżki z dyrektywy nie da się skanonizować w obrębie katalogu głównego."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"{reason}: {raw!r}")
        self.raw    = raw
        self.reason = reason


class DocumentNotFound(IncludeError, FileNotFoundError):
    """Czytnik nie znalazł dokumentu o podanej ścieżce kanonicznej."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Document not found: {path}")
        self.path = path


class LoadError(IncludeError):
    """Dokument najwyższego poziomu nie dał się wczytać."""

    def __init__(self, path: str, cause: BaseException | None = None) -> None:
        msg = f"Cannot load {path}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)
        self.path  = path
        self.cause = cause


# ---------------------------------------------------------------------------
# Dyrektywy
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Directive:
    """
    Dyrektywa include znaleziona w tekście dokumentu.

    - raw_path: ścieżka dokładnie tak, jak została zapisana (dowolny separator)
    - start/end: zakres całego komentarza w tekście rodzica (jak re.Match.span)
    - ordinal:  numer kolejny dyrektywy w dokumencie (od 0); wg niego splice()
                ustala kolejność wklejania
    """

    raw_path: str
    start:    int
    end:      int
    ordinal:  int

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end


# ---------------------------------------------------------------------------
# Raport
# ---------------------------------------------------------------------------

class EventKind(StrEnum):
    """Rodzaje zdarzeń raportu przetwarzania."""

    PROCESSED       = "processed"
    INCLUDED        = "included"
    MISSING_INCLUDE = "missing_include"
    CYCLE_DETECTED  = "cycle_detected"


@dataclass(frozen=True, slots=True)
class ReportEntry:
    """
    Pojedyncze zdarzenie raportu.

    - kind:   rodzaj zdarzenia (EventKind)
    - path:   ścieżka kanoniczna (dla niepoprawnych ścieżek: znormalizowany zapis)
    - chain:  łańcuch rozwijania w chwili wykrycia cyklu (tylko CYCLE_DETECTED)
    - detail: opcjonalny opis przyczyny (np. "not found", komunikat wyjątku)
    """

    kind:   EventKind
    path:   str
    chain:  Chain = ()
    detail: str | None = None

    def render(self) -> str:
        """Zwraca linię logu w formacie narzędzia, np. 'Included: Wolf/a.xml'."""
        if self.kind is EventKind.PROCESSED:
            return f"Processed: {self.path}"
        if self.kind is EventKind.INCLUDED:
            return f"Included: {self.path}"
        if self.kind is EventKind.MISSING_INCLUDE:
            line = f"Missing include: {self.path}"
            if self.detail:
                line += f" ({self.detail})"
            return line
        trail = " -> ".join((*self.chain, self.path))
        return f"Cycle detected: {self.path} ({trail})"

    def __str__(self) -> str:
        return self.render()


@dataclass(slots=True)
class Expansion:
    """Wynik rozwinięcia: pełny tekst i uporządkowana lista zdarzeń."""

    text:   str
    events: list[ReportEntry] = field(default_factory=list)


class StorageReader(Protocol):
    """Czytnik dokumentów: read() zwraca tekst albo rzuca DocumentNotFound."""

    def read(self, path: str) -> str: ...
