"""
Ustawienia kompilatora — konfiguracja przez zmienne środowiskowe.

Zmienne XMLC_* mogą też pochodzić z pliku .env w katalogu głównym treści;
wartości już ustawione w środowisku mają pierwszeństwo przed plikiem.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

from workspace import DEFAULT_OUTPUT_DIR, DEFAULT_PATTERN

_FALSE = {"0", "false", "no", "off", ""}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSE


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return max(1, int(raw))
    except ValueError:
        raise ValueError(f"{name} musi być liczbą całkowitą, otrzymano: {raw!r}") from None


@dataclass(frozen=True, slots=True)
class Settings:
    output_dir: str
    log_file:   str
    jobs:       int
    match:      str
    cdata:      bool

    def override(self, **changes) -> Settings:
        """Kopia z nadpisanymi polami; wartości None są ignorowane."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings(env_file: Path | None = None) -> Settings:
    if env_file is not None:
        load_dotenv(env_file, override=False)
    return Settings(
        output_dir = os.getenv("XMLC_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        log_file   = os.getenv("XMLC_LOG_FILE",   "processing.log"),
        jobs       = _env_int("XMLC_JOBS",        os.cpu_count() or 1),
        match      = os.getenv("XMLC_MATCH",      DEFAULT_PATTERN),
        cdata      = _env_bool("XMLC_CDATA",      True),
    )
