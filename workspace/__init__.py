"""
workspace — współpracownicy I/O kompilatora: katalog roboczy, pliki, partia.

Publiczne API:
  discover_documents(root, pattern, exclude)  → list[str]
  FileStorage(root).read(path)                → str
  OutputWriter(out_root).write(path, text)    → Path
  compile_tree(root, out_root, ...)           → BatchResult
  compile_document(expander, writer, path)    → DocumentOutcome
"""

from .discovery import DEFAULT_PATTERN, NUMBERED_PATTERN, compile_pattern, discover_documents
from .storage   import FileStorage
from .output    import DEFAULT_OUTPUT_DIR, OutputWriter
from .batch     import BatchResult, DocumentOutcome, compile_document, compile_tree, log_outcome

__all__ = [
    "DEFAULT_PATTERN",
    "NUMBERED_PATTERN",
    "compile_pattern",
    "discover_documents",
    "FileStorage",
    "DEFAULT_OUTPUT_DIR",
    "OutputWriter",
    "BatchResult",
    "DocumentOutcome",
    "compile_document",
    "compile_tree",
    "log_outcome",
]
