"""Komenda: vpr all — validate → build → extract-tests (stop przy pierwszym błędzie)."""

from __future__ import annotations

import argparse
import pathlib

from rich.console import Console

from vpr._config import load_settings
from vpr.commands.build import build_agents
from vpr.commands.extract_tests import extract_to_file
from vpr.commands.validate import validate_rules

console = Console()


def run(args: argparse.Namespace) -> None:
    settings  = load_settings()
    rules_dir = pathlib.Path(args.rules_dir) if args.rules_dir else settings.rules_dir
    metadata  = pathlib.Path(args.metadata) if args.metadata else settings.metadata

    if not rules_dir.is_dir():
        console.print(f"[red]Brak katalogu reguł:[/red] {rules_dir}")
        raise SystemExit(1)

    console.rule("[bold]1/3 validate")
    result = validate_rules(rules_dir)
    if not result.is_valid:
        console.print("[red]Walidacja nie przeszła — przerywam.[/red]")
        raise SystemExit(1)

    console.rule("[bold]2/3 build")
    build_agents(rules_dir, metadata, settings.agents_out)

    console.rule("[bold]3/3 extract-tests")
    extract_to_file(rules_dir, settings.tests_out)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "all",
        help="Uruchamia validate, build i extract-tests po kolei.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pełny przebieg: walidacja reguł, budowanie AGENTS.md, ekstrakcja
test-cases.json. Błąd walidacji przerywa dalsze kroki (kod wyjścia 1).

Przykłady:
  vpr all
  vpr all --rules-dir rules --metadata metadata.json
        """,
    )
    p.add_argument(
        "--rules-dir", "-r",
        default=None,
        metavar="KATALOG",
        help="Katalog z regułami (domyślnie: ./rules lub VPR_RULES_DIR).",
    )
    p.add_argument(
        "--metadata", "-m",
        default=None,
        metavar="PLIK",
        help="Plik metadanych projektu (domyślnie: ./metadata.json lub VPR_METADATA).",
    )
    p.set_defaults(func=run)
