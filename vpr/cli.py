"""
vpr — narzędzie CLI bazy reguł wydajności Vue/Nuxt.

Użycie:
  vpr <komenda> [opcje]

Komendy:
  build          Składa AGENTS.md z plików reguł w kolejności kategorii.
  validate       Waliduje pliki reguł (frontmatter, prefiks, przykłady, bloki kodu).
  extract-tests  Wyciąga pary przykładów (błędny/poprawny) do test-cases.json.
  all            Uruchamia validate, build i extract-tests po kolei.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby chińskie
# i polskie znaki były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from vpr.commands import build as cmd_build
from vpr.commands import validate as cmd_validate
from vpr.commands import extract_tests as cmd_extract_tests
from vpr.commands import pipeline as cmd_pipeline

VERSION = "1.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vpr",
        description="Vue/Nuxt performance rules — narzędzie CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"vpr {VERSION}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_build.add_parser(subparsers)
    cmd_validate.add_parser(subparsers)
    cmd_extract_tests.add_parser(subparsers)
    cmd_pipeline.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
