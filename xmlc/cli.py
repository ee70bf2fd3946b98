"""
xmlc — kompilator dokumentów XML składanych z fragmentów.

Użycie:
  xmlc [ROOT] [opcje]

Dla każdego pliku *.xml leżącego dokładnie jeden katalog poniżej ROOT
(np. ROOT/KFM/1_main.xml) rozwija rekurencyjnie dyrektywy

  <!-- #include file="Wolf\\fragment.xml" -->

(ścieżki względem ROOT, separator / lub \\) i zapisuje wynik do
ROOT/Compiled/ z zachowaniem ścieżki względnej. Przebieg trafia do
processing.log.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, więc wymuszamy UTF-8, żeby nazwy plików
# spoza ASCII były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from xmlc import __version__
from xmlc.commands import compile as cmd_compile


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xmlc",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"xmlc {__version__}"
    )
    cmd_compile.add_arguments(parser)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
