"""Komenda: vpr validate — sprawdza pliki reguł (frontmatter, prefiks, przykłady)."""

from __future__ import annotations

import argparse
import dataclasses
import json
import pathlib
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from validator import DirectoryReport, RuleValidator, validate_directory
from vpr._config import load_settings

console = Console()


# ---------------------------------------------------------------------------
# Wyświetlanie raportu
# ---------------------------------------------------------------------------

def _show_report(result: DirectoryReport) -> None:
    invalid = result.invalid

    if not invalid:
        console.print(
            f"[green]OK[/green]  Wszystkie pliki reguł ({result.valid_count}) są poprawne.\n"
        )
    else:
        console.print(f"[red]BŁĄD[/red]  Problemy w {len(invalid)} plik(ach):\n")

        for report in invalid:
            console.print(f"[bold]{report.filename}[/bold]")
            table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
            table.add_column("Kod",      style="yellow", no_wrap=True)
            table.add_column("Ścieżka", style="cyan",   no_wrap=True)
            table.add_column("Komunikat")
            table.add_column("Poprawka", style="dim")

            for e in report.errors:
                table.add_row(e.code, e.path, e.message, e.expected_fix)

            console.print(table)

        console.print(f"  [green]{result.valid_count}[/green] plik(ów) poprawnych")
        console.print(f"  [red]{len(invalid)}[/red] plik(ów) do poprawienia\n")

    warned = [r for r in result.reports if r.warnings]
    if warned:
        console.print("[yellow]Ostrzeżenia:[/yellow]")
        for report in warned:
            for w in report.warnings:
                console.print(f"  [yellow]·[/yellow] {report.filename}: {w}")


def _report_json(result: DirectoryReport) -> dict:
    return {
        "is_valid": result.is_valid,
        "valid_count": result.valid_count,
        "files": [
            {
                "file": r.filename,
                "is_valid": r.is_valid,
                "errors": [dataclasses.asdict(e) for e in r.errors],
                "warnings": r.warnings,
            }
            for r in result.reports
        ],
    }


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def validate_rules(rules_dir: pathlib.Path, quiet: bool = False) -> DirectoryReport:
    """Waliduje katalog reguł i (o ile nie quiet) wypisuje raport."""
    if not quiet:
        console.print(f"Walidacja reguł w [bold]{rules_dir}[/bold] …\n")
    result = validate_directory(rules_dir, RuleValidator())
    if not quiet:
        _show_report(result)
    return result


def run(args: argparse.Namespace) -> None:
    settings  = load_settings()
    rules_dir = pathlib.Path(args.rules_dir) if args.rules_dir else settings.rules_dir

    if not rules_dir.is_dir():
        console.print(f"[red]Brak katalogu reguł:[/red] {rules_dir}")
        raise SystemExit(1)

    result = validate_rules(rules_dir, quiet=args.json_output)

    if args.json_output:
        print(json.dumps(_report_json(result), ensure_ascii=False, indent=2))

    if not result.is_valid:
        sys.exit(1)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "validate",
        help="Waliduje pliki reguł (frontmatter, prefiks, przykłady, bloki kodu).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Waliduje pliki reguł w katalogu (pliki zaczynające się od '_' są pomijane):

  A  Frontmatter     (otwierające i zamykające '---')
  B  Pola            (title, impact ∈ CRITICAL … LOW)
  C  Nazwa pliku     (prefiks = znana kategoria)
  D  Treść           (przykład błędny i poprawny, parzysta liczba ```)

Kod wyjścia 1, jeśli którykolwiek plik ma błędy.

Przykłady:
  vpr validate
  vpr validate --rules-dir inne/reguly
  vpr validate --json-output
        """,
    )
    p.add_argument(
        "--rules-dir", "-r",
        default=None,
        metavar="KATALOG",
        help="Katalog z regułami (domyślnie: ./rules lub VPR_RULES_DIR).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport walidacji jako JSON na stdout.",
    )
    p.set_defaults(func=run)
