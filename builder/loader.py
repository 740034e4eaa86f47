"""
builder/loader.py — ładowanie plików reguł z katalogu i grupowanie po kategorii.

Publiczne API:
  list_rule_files(rules_dir)       -> list[Path]
  derive_category_key(filename)    -> str
  load_rule(path)                  -> RuleDocument
  load_rules(rules_dir)            -> RulesByCategory
"""

from __future__ import annotations

import pathlib
import unicodedata

from data_model import RuleDocument, RulesByCategory
from md_parser import FrontmatterError, normalize_text, parse_frontmatter

RULE_SUFFIX     = ".md"
RESERVED_PREFIX = "_"     # _template.md, _sections.md itp.


class RuleLoadError(Exception):
    """Nie udało się wczytać lub sparsować pliku reguły."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"{filename}: {reason}")
        self.filename = filename
        self.reason   = reason


# ---------------------------------------------------------------------------
# Listowanie plików
# ---------------------------------------------------------------------------

def is_rule_filename(name: str) -> bool:
    return name.endswith(RULE_SUFFIX) and not name.startswith(RESERVED_PREFIX)


def list_rule_files(rules_dir: pathlib.Path) -> list[pathlib.Path]:
    """Pliki reguł w katalogu, posortowane po nazwie (kolejność deterministyczna)."""
    return sorted(
        (p for p in rules_dir.iterdir() if p.is_file() and is_rule_filename(p.name)),
        key=lambda p: p.name,
    )


def derive_category_key(filename: str) -> str:
    """
    Klucz kategorii z nazwy pliku.

    Przykłady::

        "bundle-lazy-routes.md" → "bundle"
        "vue3-shallow-ref.md"   → "vue3"
        "async.md"              → "async"
    """
    return filename.split("-", 1)[0].removesuffix(RULE_SUFFIX)


# ---------------------------------------------------------------------------
# Wczytywanie
# ---------------------------------------------------------------------------

def load_rule(path: pathlib.Path) -> RuleDocument:
    """
    Wczytuje i parsuje pojedynczy plik reguły.

    Raises:
        RuleLoadError przy błędzie odczytu lub braku ograniczników frontmattera.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RuleLoadError(path.name, f"błąd odczytu: {exc}") from exc

    try:
        meta, body = parse_frontmatter(normalize_text(text))
    except FrontmatterError as exc:
        raise RuleLoadError(path.name, str(exc)) from exc

    return RuleDocument(
        filename=path.name,
        category=derive_category_key(path.name),
        meta=meta,
        body=body,
    )


def title_sort_key(rule: RuleDocument) -> tuple[str, str, str]:
    """
    Klucz sortowania: tytuł porównywany bez względu na wielkość liter
    i znaki diakrytyczne, potem surowy tytuł, potem nazwa pliku.
    """
    title = rule.title
    folded = unicodedata.normalize("NFKD", title).casefold()
    return folded, title, rule.filename


def load_rules(rules_dir: pathlib.Path) -> RulesByCategory:
    """
    Wczytuje wszystkie reguły z katalogu i grupuje je po kategorii.

    Pierwszy błąd strukturalny przerywa ładowanie (RuleLoadError) —
    agregat nie jest budowany z niepełnego zbioru.

    Returns:
        Słownik kategoria → lista RuleDocument posortowana po tytule.
    """
    rules_by_category: RulesByCategory = {}

    for path in list_rule_files(rules_dir):
        rule = load_rule(path)
        rules_by_category.setdefault(rule.category, []).append(rule)

    for rules in rules_by_category.values():
        rules.sort(key=title_sort_key)

    return rules_by_category
