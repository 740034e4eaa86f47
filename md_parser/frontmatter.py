"""
md_parser/frontmatter.py — parsowanie bloku metadanych `--- ... ---`.

Format pliku reguły::

    ---
    title: Lazy-load route components
    impact: HIGH
    impactDescription: initial bundle -40%
    tags: bundle, router
    ---

    ## treść w Markdown …

Reguły parsowania:
  - tekst musi zaczynać się od linii `---`
  - blok kończy pierwsza linia składająca się dokładnie z `---`
  - każda niepusta linia to `klucz: wartość`; dzielimy po PIERWSZYM ':'
    (wartości typu URL mogą zawierać kolejne dwukropki)
  - powtórzony klucz nadpisuje wcześniejszy (zapamiętujemy to w duplicate_keys)
"""

from __future__ import annotations

import re
from enum import StrEnum

from data_model.documents import Frontmatter

DELIMITER = "---"

# Blok metadanych jest niepusty; zamykający `---` kończy się \n albo końcem tekstu.
_FRONTMATTER_RE = re.compile(r"\A---\n(.+?)\n---(?:\n(.*))?\Z", re.DOTALL)


class FrontmatterErrorKind(StrEnum):
    MISSING_OPENING = "missing_opening"
    MISSING_CLOSING = "missing_closing"


class FrontmatterError(ValueError):
    """Brak otwierającego lub zamykającego `---` — dokument strukturalnie błędny."""

    def __init__(self, kind: FrontmatterErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def normalize_text(text: str) -> str:
    """Usuwa BOM i zamienia końce linii CRLF / CR na LF."""
    text = text.removeprefix("\ufeff")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def has_opening_delimiter(text: str) -> bool:
    return text.startswith(DELIMITER + "\n")


def split_frontmatter(text: str) -> tuple[str, str]:
    """
    Dzieli tekst na (surowy blok metadanych, treść).

    Raises:
        FrontmatterError jeśli brakuje któregoś z ograniczników.
    """
    if not has_opening_delimiter(text):
        raise FrontmatterError(
            FrontmatterErrorKind.MISSING_OPENING,
            "Tekst nie zaczyna się od linii '---'.",
        )

    m = _FRONTMATTER_RE.match(text)
    if not m:
        raise FrontmatterError(
            FrontmatterErrorKind.MISSING_CLOSING,
            "Brak zamykającej linii '---' frontmattera.",
        )

    return m.group(1), m.group(2) or ""


def parse_fields(block: str) -> Frontmatter:
    """Parsuje linie `klucz: wartość` w Frontmatter."""
    fields: dict[str, str] = {}
    duplicates: list[str] = []
    malformed: list[str] = []

    for line in block.split("\n"):
        if not line.strip():
            continue

        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            malformed.append(line)
            continue

        if key in fields and key not in duplicates:
            duplicates.append(key)
        fields[key] = value.strip()

    return Frontmatter(
        fields=fields,
        duplicate_keys=tuple(duplicates),
        malformed_lines=tuple(malformed),
    )


def parse_frontmatter(text: str) -> tuple[Frontmatter, str]:
    """
    Parsuje dokument na (Frontmatter, treść).

    Raises:
        FrontmatterError — dokument nie może być renderowany ani
        ekstrahowany; walidator raportuje go jako błąd strukturalny.
    """
    block, body = split_frontmatter(text)
    return parse_fields(block), body


def dump_frontmatter(fields: dict[str, str]) -> str:
    """Serializuje mapę klucz → wartość z powrotem do bloku `--- ... ---`."""
    lines = [DELIMITER]
    lines.extend(f"{key}: {value}" for key, value in fields.items())
    lines.append(DELIMITER)
    return "\n".join(lines) + "\n"
