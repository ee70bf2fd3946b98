"""
includer — silnik rozwijania dyrektyw `<!-- #include file="..." -->`.

Publiczne API:
  Expander(reader, wrap_cdata=True)      klasa rozwijająca dokumenty
  Expander.expand(path, chain=())        → Expansion(text, events)
  scan_directives(text)                  → Iterator[Directive]
  has_directives(text)                   → bool
  resolve_include(raw, referrer=None)    → ścieżka kanoniczna (lub InvalidPath)
  normalize_separators(raw)              → str
  splice(text, pieces)                   → str
  flatten_placeholders(text, wrap_cdata) → str
  ReportCollector                        akumulator zdarzeń
  Directive, ReportEntry, EventKind,
  Expansion, StorageReader               typy danych
  IncludeError, InvalidPath,
  DocumentNotFound, LoadError            błędy
"""

from .types import (
    Chain,
    Directive,
    DocumentNotFound,
    EventKind,
    Expansion,
    IncludeError,
    InvalidPath,
    LoadError,
    ReportEntry,
    StorageReader,
)
from .scanner  import DIRECTIVE_RE, has_directives, scan_directives
from .resolver import normalize_separators, resolve_include, to_canonical, to_filesystem
from .report   import ReportCollector
from .cleanup  import flatten_placeholders, splice
from .expander import Expander

__all__ = [
    # types
    "Chain",
    "Directive",
    "DocumentNotFound",
    "EventKind",
    "Expansion",
    "IncludeError",
    "InvalidPath",
    "LoadError",
    "ReportEntry",
    "StorageReader",
    # scanner
    "DIRECTIVE_RE",
    "has_directives",
    "scan_directives",
    # resolver
    "normalize_separators",
    "resolve_include",
    "to_canonical",
    "to_filesystem",
    # report / cleanup / expander
    "ReportCollector",
    "flatten_placeholders",
    "splice",
    "Expander",
]
