"""
includer/report.py — akumulator zdarzeń raportu przetwarzania.

Każde rozwinięcie dokumentu najwyższego poziomu dostaje własny
ReportCollector; wywołujący scala je (ReportCollector.merge) przed
przekazaniem do loggera. Brak globalnego stanu.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator

from .types import Chain, EventKind, ReportEntry


class ReportCollector:
    """Uporządkowana (wg czasu emisji) lista zdarzeń ReportEntry."""

    def __init__(self, entries: Iterable[ReportEntry] = ()) -> None:
        self._entries: list[ReportEntry] = list(entries)

    # ------------------------------------------------------------------
    # Emisja zdarzeń
    # ------------------------------------------------------------------

    def emit(self, entry: ReportEntry) -> ReportEntry:
        self._entries.append(entry)
        return entry

    def processed(self, path: str) -> ReportEntry:
        return self.emit(ReportEntry(EventKind.PROCESSED, path))

    def included(self, path: str) -> ReportEntry:
        return self.emit(ReportEntry(EventKind.INCLUDED, path))

    def missing(self, path: str, detail: str | None = None) -> ReportEntry:
        return self.emit(ReportEntry(EventKind.MISSING_INCLUDE, path, detail=detail))

    def cycle(self, path: str, chain: Chain) -> ReportEntry:
        return self.emit(ReportEntry(EventKind.CYCLE_DETECTED, path, chain=tuple(chain)))

    def extend(self, entries: Iterable[ReportEntry]) -> None:
        self._entries.extend(entries)

    # ------------------------------------------------------------------
    # Odczyt
    # ------------------------------------------------------------------

    @property
    def entries(self) -> list[ReportEntry]:
        """Kopia listy zdarzeń (kolejność emisji)."""
        return list(self._entries)

    def of_kind(self, kind: EventKind) -> list[ReportEntry]:
        return [e for e in self._entries if e.kind is kind]

    def counts(self) -> dict[EventKind, int]:
        """Liczba zdarzeń każdego rodzaju (rodzaje bez zdarzeń → 0)."""
        c = Counter(e.kind for e in self._entries)
        return {kind: c.get(kind, 0) for kind in EventKind}

    def render(self) -> list[str]:
        """Linie logu w kolejności emisji."""
        return [e.render() for e in self._entries]

    @classmethod
    def merge(cls, *collectors: ReportCollector) -> ReportCollector:
        """
        Scala akumulatory w podanej kolejności.

        Kolejność wewnątrz każdego akumulatora (jednego łańcucha) jest
        zachowana; akumulatory są sklejane jeden po drugim.
        """
        merged = cls()
        for collector in collectors:
            merged.extend(collector._entries)
        return merged

    def __iter__(self) -> Iterator[ReportEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ReportCollector({len(self._entries)} entries)"
