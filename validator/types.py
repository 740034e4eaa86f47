"""
validator/types.py — kody błędów i struktury raportu walidacji.

ValidationError — pojedynczy błąd z kodem, ścieżką (plik lub pole
    frontmattera), komunikatem i mechaniczną instrukcją naprawy.
ValidationReport — wynik walidacji jednego pliku: is_valid, errors, warnings.
DirectoryReport  — wyniki dla wszystkich plików katalogu reguł.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Stałe kody błędów walidatora."""

    # Struktura — przerywają dalsze sprawdzanie pliku
    FRONTMATTER_MISSING        = "E_FRONTMATTER_MISSING"
    FRONTMATTER_MALFORMED      = "E_FRONTMATTER_MALFORMED"
    FILE_UNREADABLE            = "E_FILE_UNREADABLE"

    # Pola frontmattera
    TITLE_MISSING              = "E_TITLE_MISSING"
    IMPACT_MISSING             = "E_IMPACT_MISSING"
    IMPACT_INVALID             = "E_IMPACT_INVALID"

    # Nazwa pliku
    CATEGORY_UNKNOWN           = "E_CATEGORY_UNKNOWN"

    # Treść
    INCORRECT_EXAMPLE_MISSING  = "E_INCORRECT_EXAMPLE_MISSING"
    CORRECT_EXAMPLE_MISSING    = "E_CORRECT_EXAMPLE_MISSING"
    CODE_BLOCKS_MISSING        = "E_CODE_BLOCKS_MISSING"
    CODE_BLOCKS_UNCLOSED       = "E_CODE_BLOCKS_UNCLOSED"


@dataclass(slots=True)
class ValidationError:
    """
    Pojedynczy błąd walidacji.

    - code:         stały identyfikator klasy błędu (ErrorCode)
    - path:         miejsce błędu, np. "/frontmatter/impact", "/body", "/filename"
    - message:      czytelny opis błędu
    - expected_fix: krótka instrukcja naprawy
    - details:      opcjonalny słownik z dodatkowymi danymi
    """

    code: ErrorCode
    path: str
    message: str
    expected_fix: str
    details: dict[str, Any] | None = None


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik walidacji jednego pliku reguły.

    - filename: nazwa pliku
    - errors:   lista błędów (ValidationError)
    - warnings: komunikaty ostrzegawcze (nie wpływają na is_valid)
    """

    filename: str
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def codes(self) -> list[ErrorCode]:
        return [e.code for e in self.errors]


@dataclass(slots=True)
class DirectoryReport:
    """Raporty dla wszystkich plików reguł w katalogu."""

    reports: list[ValidationReport] = field(default_factory=list)

    @property
    def invalid(self) -> list[ValidationReport]:
        return [r for r in self.reports if not r.is_valid]

    @property
    def valid_count(self) -> int:
        return sum(1 for r in self.reports if r.is_valid)

    @property
    def is_valid(self) -> bool:
        return not self.invalid
