"""Komenda: vpr build — składa AGENTS.md z plików reguł."""

from __future__ import annotations

import argparse
import pathlib

from rich.console import Console

from builder import RuleLoadError, SkipReason, load_rules, render_agents
from validator import MetadataError, MetadataIndex
from vpr._config import load_settings

console = Console()


def write_output(output: pathlib.Path, text: str) -> None:
    """Zapisuje plik wynikowy, tworząc brakujące katalogi nadrzędne."""
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
    except OSError as exc:
        console.print(f"[red]Nie można zapisać pliku[/red] {output}: {exc}")
        raise SystemExit(1)


def build_agents(
    rules_dir: pathlib.Path,
    metadata_path: pathlib.Path,
    output: pathlib.Path,
) -> int:
    """
    Buduje AGENTS.md i zwraca liczbę wyrenderowanych reguł.

    Przerywa (SystemExit 1) przy błędnym metadata.json albo pierwszym
    pliku reguły bez poprawnego frontmattera.
    """
    console.print(f"Budowanie [bold]{output.name}[/bold] …")

    try:
        index = MetadataIndex.from_file(metadata_path)
    except MetadataError as exc:
        console.print(f"[red]Błąd metadanych:[/red] {exc}")
        raise SystemExit(1)

    for key in index.missing_categories():
        console.print(f"[yellow]Brak kategorii '{key}' w metadata.json[/yellow]")
    for key in index.unknown_categories():
        console.print(
            f"[yellow]Nieznana kategoria w metadata.json[/yellow] '{key}' (nie będzie renderowana)"
        )

    try:
        rules_by_category = load_rules(rules_dir)
    except RuleLoadError as exc:
        console.print(f"[red]Błąd w pliku reguły[/red] [bold]{exc.filename}[/bold]: {exc.reason}")
        raise SystemExit(1)

    result = render_agents(rules_by_category, index.metadata)

    for group in result.skipped:
        files = ", ".join(group.filenames)
        if group.reason is SkipReason.UNKNOWN_CATEGORY:
            console.print(
                f"[yellow]Pominięto nieznaną kategorię[/yellow] '{group.category}': {files}"
            )
        else:
            console.print(
                f"[yellow]Brak kategorii '{group.category}' w metadata.json[/yellow] — "
                f"pominięto: {files}"
            )

    write_output(output, result.text)

    console.print("[green]Budowanie zakończone.[/green]")
    console.print(f"  - wygenerowano reguł: [bold]{result.rule_count}[/bold]")
    console.print(f"  - plik wyjściowy: {output}")
    return result.rule_count


def run(args: argparse.Namespace) -> None:
    settings = load_settings()
    rules_dir = pathlib.Path(args.rules_dir) if args.rules_dir else settings.rules_dir
    metadata  = pathlib.Path(args.metadata) if args.metadata else settings.metadata
    output    = pathlib.Path(args.output) if args.output else settings.agents_out

    if not rules_dir.is_dir():
        console.print(f"[red]Brak katalogu reguł:[/red] {rules_dir}")
        raise SystemExit(1)

    build_agents(rules_dir, metadata, output)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "build",
        help="Składa AGENTS.md z plików reguł w kolejności kategorii.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Składa jeden dokument AGENTS.md: nagłówek z metadata.json, potem sekcje
kategorii (async, bundle, server, client, reactivity, rendering, vue2,
vue3, js, advanced) z regułami posortowanymi po tytule.

Przykłady:
  vpr build
  vpr build --output dist/AGENTS.md
  vpr build --rules-dir rules --metadata metadata.json
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
    p.add_argument(
        "--output", "-o",
        default=None,
        metavar="PLIK",
        help="Plik wyjściowy (domyślnie: ./AGENTS.md lub VPR_AGENTS_OUT).",
    )
    p.set_defaults(func=run)
