"""
workspace/batch.py — kompilacja wszystkich dokumentów najwyższego poziomu.

compile_tree(root, ...)                      -> BatchResult
compile_document(expander, writer, path)     -> DocumentOutcome

Błąd jednego dokumentu (LoadError, błąd zapisu) nie przerywa partii:
dokument jest pomijany i raportowany, pozostałe są kompilowane dalej.
Plik wyjściowy powstaje dopiero po udanym rozwinięciu całego dokumentu.
"""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from includer import EventKind, Expander, LoadError, ReportCollector, ReportEntry

from .discovery import DEFAULT_PATTERN, discover_documents
from .output import DEFAULT_OUTPUT_DIR, OutputWriter
from .storage import FileStorage

log = logging.getLogger("xmlc.batch")

_WARNING_KINDS = {EventKind.MISSING_INCLUDE, EventKind.CYCLE_DETECTED}


# ---------------------------------------------------------------------------
# Wyniki
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class DocumentOutcome:
    """
    Wynik kompilacji jednego dokumentu.

    - path:   ścieżka kanoniczna dokumentu
    - events: zdarzenia raportu z rozwinięcia (puste przy LoadError)
    - output: ścieżka zapisanego pliku (None gdy nie zapisano)
    - error:  opis błędu (None gdy sukces)
    """

    path:   str
    events: list[ReportEntry] = field(default_factory=list)
    output: Path | None = None
    error:  str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def count(self, kind: EventKind) -> int:
        return sum(1 for e in self.events if e.kind is kind)


@dataclass(slots=True)
class BatchResult:
    root:     Path
    out_root: Path
    outcomes: list[DocumentOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    @property
    def failed(self) -> list[DocumentOutcome]:
        return [o for o in self.outcomes if not o.ok]

    def report(self) -> ReportCollector:
        """Scalony raport wszystkich dokumentów (kolejność wykrycia)."""
        return ReportCollector.merge(*(ReportCollector(o.events) for o in self.outcomes))


# ---------------------------------------------------------------------------
# Kompilacja
# ---------------------------------------------------------------------------

def compile_document(expander: Expander, writer: OutputWriter, path: str) -> DocumentOutcome:
    """Rozwija jeden dokument i zapisuje wynik. Nie rzuca wyjątków."""
    try:
        expansion = expander.expand(path)
    except LoadError as e:
        return DocumentOutcome(path, error=f"Error processing {path}: {e.cause or e}")
    except Exception as e:
        return DocumentOutcome(path, error=f"Error processing {path}: {type(e).__name__}: {e}")

    try:
        target = writer.write(path, expansion.text)
    except OSError as e:
        return DocumentOutcome(
            path,
            events=expansion.events,
            error=f"Error writing {writer.target(path)}: {e}",
        )

    return DocumentOutcome(path, events=expansion.events, output=target)


def log_outcome(outcome: DocumentOutcome) -> None:
    """Zapisuje zdarzenia dokumentu do logu w kolejności emisji."""
    for entry in outcome.events:
        level = logging.WARNING if entry.kind in _WARNING_KINDS else logging.INFO
        log.log(level, entry.render())
    if outcome.error:
        log.error(outcome.error)


def compile_tree(
    root: Path,
    out_root: Path | None = None,
    *,
    pattern: str | re.Pattern[str] = DEFAULT_PATTERN,
    jobs: int = 1,
    wrap_cdata: bool = True,
) -> BatchResult:
    """
    Kompiluje wszystkie dokumenty najwyższego poziomu pod `root`.

    Przy jobs > 1 dokumenty są rozwijane równolegle (wątki); wyniki i log
    zachowują kolejność wykrycia dokumentów.

    Rzuca ValueError gdy out_root wskazuje na sam root (zapis nadpisałby
    dokumenty źródłowe).
    """
    root = Path(root)
    out_root = Path(out_root) if out_root is not None else root / DEFAULT_OUTPUT_DIR
    if out_root.resolve() == root.resolve():
        raise ValueError(f"Output directory must differ from the content root: {out_root}")
    out_root.mkdir(parents=True, exist_ok=True)

    documents = discover_documents(root, pattern, exclude=[out_root])
    result = BatchResult(root=root, out_root=out_root)
    if not documents:
        log.info("No XML files found to process.")
        return result

    expander = Expander(FileStorage(root), wrap_cdata=wrap_cdata)
    writer = OutputWriter(out_root)

    def _one(path: str) -> DocumentOutcome:
        return compile_document(expander, writer, path)

    if jobs > 1 and len(documents) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            outcomes = list(pool.map(_one, documents))
    else:
        outcomes = [_one(path) for path in documents]

    for outcome in outcomes:
        log_outcome(outcome)
    result.outcomes = outcomes
    return result
