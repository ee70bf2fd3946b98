"""Komenda: xmlc [ROOT] — kompilacja dokumentów XML z rozwinięciem include'ów."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from includer import EventKind
from workspace import BatchResult, compile_tree
from xmlc._log import configure_logging, log_section
from xmlc._settings import Settings, load_settings

console = Console()


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(result: BatchResult) -> None:
    if not result.outcomes:
        console.print("[yellow]Brak dokumentów.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("DOKUMENT", no_wrap=True, style="bold cyan")
    table.add_column("INCLUDE", justify="right", no_wrap=True)
    table.add_column("BRAKI",   justify="right", no_wrap=True)
    table.add_column("CYKLE",   justify="right", no_wrap=True)
    table.add_column("STATUS",  no_wrap=False, max_width=60)

    for outcome in result.outcomes:
        missing = outcome.count(EventKind.MISSING_INCLUDE)
        cycles  = outcome.count(EventKind.CYCLE_DETECTED)
        status  = "[green]OK[/green]" if outcome.ok else f"[red]{escape(outcome.error)}[/red]"
        table.add_row(
            escape(outcome.path),
            str(outcome.count(EventKind.INCLUDED)),
            f"[yellow]{missing}[/yellow]" if missing else "0",
            f"[yellow]{cycles}[/yellow]" if cycles else "0",
            status,
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(result.outcomes)} dokumentów[/dim]\n")


def _print_summary(result: BatchResult) -> None:
    counts = result.report().counts()
    done   = len(result.outcomes) - len(result.failed)
    console.print(
        f"Skompilowano [bold]{done}[/bold]/{len(result.outcomes)} dokumentów "
        f"([cyan]{counts[EventKind.INCLUDED]}[/cyan] include'ów, "
        f"[yellow]{counts[EventKind.MISSING_INCLUDE]}[/yellow] braków, "
        f"[yellow]{counts[EventKind.CYCLE_DETECTED]}[/yellow] cykli) "
        f"→ [bold]{result.out_root}[/bold]"
    )
    for outcome in result.failed:
        console.print(f"  [red]Błąd:[/red] {escape(outcome.error)}")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def _settings_from_args(args: argparse.Namespace, root: Path) -> Settings:
    return load_settings(root / ".env").override(
        output_dir = args.out,
        log_file   = args.log_file,
        jobs       = args.jobs,
        match      = args.match,
        cdata      = False if args.no_cdata else None,
    )


def run(args: argparse.Namespace) -> None:
    if args.root is None:
        root = Path.cwd()
    else:
        root = Path(args.root)
        if not root.is_dir():
            console.print(f"[red]Katalog nie istnieje:[/red] {root}")
            raise SystemExit(1)

    try:
        settings = _settings_from_args(args, root)
    except ValueError as e:
        console.print(f"[red]Niepoprawna konfiguracja:[/red] {e}")
        raise SystemExit(1)

    try:
        pattern = re.compile(settings.match, re.IGNORECASE)
    except re.error as e:
        console.print(f"[red]Niepoprawny wzorzec --match:[/red] {e}")
        raise SystemExit(1)

    out_root = Path(settings.output_dir)
    if not out_root.is_absolute():
        out_root = root / out_root
    if out_root.resolve() == root.resolve():
        console.print(f"[red]Katalog wyjściowy nie może być katalogiem głównym:[/red] {out_root}")
        raise SystemExit(1)

    try:
        configure_logging(settings.log_file)
    except OSError as e:
        console.print(f"[red]Nie można otworzyć pliku logu:[/red] {e}")
        raise SystemExit(1)

    log_section(f"Starting processing in {root}")
    try:
        result = compile_tree(
            root,
            out_root,
            pattern=pattern,
            jobs=settings.jobs,
            wrap_cdata=settings.cdata,
        )
    except (OSError, ValueError) as e:
        console.print(f"[red]Błąd przetwarzania:[/red] {e}")
        raise SystemExit(1)
    log_section(f"Processing complete. Compiled XMLs saved in {result.out_root}")

    _print_summary(result)
    if args.show:
        _show_table(result)

    if not result.ok:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Rejestracja argumentów
# ---------------------------------------------------------------------------

def add_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "root",
        metavar="ROOT",
        nargs="?",
        default=None,
        help="Katalog główny treści (domyślnie: bieżący katalog).",
    )
    p.add_argument(
        "--out",
        metavar="KATALOG",
        default=None,
        help="Katalog wyjściowy, względny wobec ROOT (domyślnie: Compiled; env XMLC_OUTPUT_DIR).",
    )
    p.add_argument(
        "--jobs", "-j",
        metavar="N",
        type=int,
        default=None,
        help="Liczba dokumentów kompilowanych równolegle (domyślnie: liczba CPU; env XMLC_JOBS).",
    )
    p.add_argument(
        "--match",
        metavar="REGEX",
        default=None,
        help=r"Wzorzec nazw dokumentów najwyższego poziomu (domyślnie: \.xml$; env XMLC_MATCH).",
    )
    p.add_argument(
        "--log-file",
        metavar="PLIK",
        default=None,
        help="Plik logu przetwarzania (domyślnie: processing.log; env XMLC_LOG_FILE).",
    )
    p.add_argument(
        "--no-cdata",
        action="store_true",
        help="Usuwaj znaczniki <placeholder> bez opakowywania treści w CDATA.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę wyników dla każdego dokumentu.",
    )
    p.set_defaults(func=run)
