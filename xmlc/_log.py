"""
xmlc/_log.py — log przetwarzania.

Dwa odbiorniki na loggerze "xmlc":
  - plik (domyślnie processing.log, nadpisywany przy każdym uruchomieniu):
        [2024-05-01 12:00:00]  Included: KFM/parts/a.xml
  - konsola (rich): tylko ostrzeżenia i błędy, żeby nie zagłuszać tabeli wyników.

log_section() wpisuje do pliku baner bez znacznika czasu.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "xmlc"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_RULE = "─" * 44

log = logging.getLogger(LOGGER_NAME)


class _ProcessingLogFormatter(logging.Formatter):
    """`[czas]  wiadomość`; rekordy z atrybutem `section` jako surowy baner."""

    def __init__(self) -> None:
        super().__init__("[%(asctime)s]  %(message)s", datefmt=TIMESTAMP_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "section", False):
            return f"\n{_RULE}\n{record.getMessage()}\n{_RULE}"
        return super().format(record)


def configure_logging(
    log_file: str | Path | None,
    console: Console | None = None,
    console_level: int = logging.WARNING,
) -> logging.Logger:
    """
    Konfiguruje logger "xmlc" (idempotentnie, stare handlery są zamykane).

    log_file=None wyłącza log plikowy.
    """
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    log.setLevel(logging.INFO)
    log.propagate = False

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(_ProcessingLogFormatter())
        file_handler.setLevel(logging.INFO)
        log.addHandler(file_handler)

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        log_time_format=f"[{TIMESTAMP_FORMAT}]",
    )
    rich_handler.setLevel(console_level)
    log.addHandler(rich_handler)
    return log


def log_section(title: str) -> None:
    """Baner sekcji (start / koniec przetwarzania), tylko w pliku logu."""
    log.info(title, extra={"section": True})
