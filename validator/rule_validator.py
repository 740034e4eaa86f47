"""
validator/rule_validator.py — walidator plików reguł.

RuleValidator.validate(filename, text) -> ValidationReport

Etapy:
  A — struktura        (otwierające i zamykające `---`; fail-fast)
  B — pola             (title, impact ∈ ImpactLevel)
  C — nazwa pliku      (prefiks ∈ znane kategorie)
  D — treść            (znaczniki przykładów, liczba ogrodzeń ```)

Etapy B–D są niezależne — każdy błąd jest raportowany osobno.

validate_directory(rules_dir, validator) -> DirectoryReport
"""

from __future__ import annotations

import pathlib
from collections.abc import Iterable

from builder.loader import derive_category_key, list_rule_files
from data_model import CATEGORY_ORDER, Frontmatter, ImpactLevel
from md_parser import (
    CORRECT,
    INCORRECT,
    FrontmatterError,
    FrontmatterErrorKind,
    SectionMarker,
    count_fences,
    normalize_text,
    parse_frontmatter,
)

from .types import DirectoryReport, ErrorCode, ValidationError, ValidationReport

# Minimum: jeden blok z błędnym i jeden z poprawnym przykładem.
MIN_FENCES = 2

# Od najpoważniejszego do najłagodniejszego.
_VALID_IMPACTS = ", ".join(
    level.value for level in sorted(ImpactLevel, key=lambda level: level.rank)
)


class RuleValidator:
    """
    Walidator pojedynczego pliku reguły.

    Użycie:
        validator = RuleValidator()
        report    = validator.validate("bundle-lazy-routes.md", text)
        if not report.is_valid:
            for e in report.errors:
                print(e.code, e.path, e.message)
    """

    def __init__(self, known_categories: Iterable[str] = CATEGORY_ORDER) -> None:
        self._known_categories = tuple(known_categories)

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def validate(self, filename: str, text: str) -> ValidationReport:
        report = ValidationReport(filename=filename)

        # A — struktura (bez poprawnego frontmattera brak sensu iść dalej)
        try:
            meta, body = parse_frontmatter(normalize_text(text))
        except FrontmatterError as exc:
            report.errors.append(self._structural_error(exc))
            return report

        self._stage_fields(meta, report)
        self._stage_filename(filename, report)
        self._stage_body(body, report)

        return report

    # ------------------------------------------------------------------
    # Stage A — struktura
    # ------------------------------------------------------------------

    def _structural_error(self, exc: FrontmatterError) -> ValidationError:
        if exc.kind is FrontmatterErrorKind.MISSING_OPENING:
            return ValidationError(
                code=ErrorCode.FRONTMATTER_MISSING,
                path="/frontmatter",
                message="Brak frontmattera.",
                expected_fix="Rozpocznij plik linią '---' i blokiem metadanych.",
            )
        return ValidationError(
            code=ErrorCode.FRONTMATTER_MALFORMED,
            path="/frontmatter",
            message="Niepoprawny format frontmattera (brak zamykającej linii '---').",
            expected_fix="Zamknij blok metadanych linią '---'.",
        )

    # ------------------------------------------------------------------
    # Stage B — pola frontmattera
    # ------------------------------------------------------------------

    def _stage_fields(self, meta: Frontmatter, report: ValidationReport) -> None:
        if not meta.get("title"):
            report.errors.append(ValidationError(
                code=ErrorCode.TITLE_MISSING,
                path="/frontmatter/title",
                message="Brak pola title.",
                expected_fix="Dodaj linię 'title: …' do frontmattera.",
            ))

        impact = meta.get("impact")
        if not impact:
            report.errors.append(ValidationError(
                code=ErrorCode.IMPACT_MISSING,
                path="/frontmatter/impact",
                message="Brak pola impact.",
                expected_fix=f"Dodaj linię 'impact: …' z jedną z wartości: {_VALID_IMPACTS}.",
            ))
        elif ImpactLevel.parse(impact) is None:
            report.errors.append(ValidationError(
                code=ErrorCode.IMPACT_INVALID,
                path="/frontmatter/impact",
                message=f"Nieprawidłowa wartość impact: {impact}",
                expected_fix=f"Użyj jednej z wartości: {_VALID_IMPACTS}.",
                details={"impact": impact},
            ))

        for key in meta.duplicate_keys:
            report.warnings.append(
                f"Powtórzony klucz '{key}' we frontmatterze — użyto ostatniej wartości."
            )
        for line in meta.malformed_lines:
            report.warnings.append(f"Pominięto linię frontmattera bez ':': {line!r}")

    # ------------------------------------------------------------------
    # Stage C — prefiks nazwy pliku
    # ------------------------------------------------------------------

    def _stage_filename(self, filename: str, report: ValidationReport) -> None:
        prefix = derive_category_key(filename)
        if prefix not in self._known_categories:
            report.errors.append(ValidationError(
                code=ErrorCode.CATEGORY_UNKNOWN,
                path="/filename",
                message=f"Nieprawidłowy prefiks nazwy pliku: {prefix}",
                expected_fix=(
                    "Nazwij plik '{kategoria}-{opis}.md', gdzie kategoria to jedno z: "
                    + ", ".join(self._known_categories) + "."
                ),
                details={"prefix": prefix},
            ))

    # ------------------------------------------------------------------
    # Stage D — treść
    # ------------------------------------------------------------------

    def _stage_body(self, body: str, report: ValidationReport) -> None:
        self._check_marker(
            body, INCORRECT, ErrorCode.INCORRECT_EXAMPLE_MISSING,
            "Brak błędnego przykładu.", report,
        )
        self._check_marker(
            body, CORRECT, ErrorCode.CORRECT_EXAMPLE_MISSING,
            "Brak poprawnego przykładu.", report,
        )

        fences = count_fences(body)
        if fences < MIN_FENCES:
            report.errors.append(ValidationError(
                code=ErrorCode.CODE_BLOCKS_MISSING,
                path="/body",
                message="Wymagane co najmniej 2 bloki kodu (przykład błędny i poprawny).",
                expected_fix="Dodaj bloki ``` z kodem obu przykładów.",
                details={"fences": fences},
            ))
        elif fences % 2 != 0:
            report.errors.append(ValidationError(
                code=ErrorCode.CODE_BLOCKS_UNCLOSED,
                path="/body",
                message="Bloki kodu nie są poprawnie zamknięte.",
                expected_fix="Zamknij każdy blok kodu linią ```.",
                details={"fences": fences},
            ))

    def _check_marker(
        self,
        body: str,
        marker: SectionMarker,
        code: ErrorCode,
        message: str,
        report: ValidationReport,
    ) -> None:
        if marker.mentioned_in(body):
            return
        report.errors.append(ValidationError(
            code=code,
            path="/body",
            message=message,
            expected_fix=(
                "Dodaj sekcję oznaczoną jedną z fraz: "
                + " / ".join(marker.phrases) + "."
            ),
        ))


# ---------------------------------------------------------------------------
# Walidacja katalogu
# ---------------------------------------------------------------------------

def validate_directory(
    rules_dir: pathlib.Path,
    validator: RuleValidator | None = None,
) -> DirectoryReport:
    """
    Waliduje wszystkie pliki reguł (bez plików zaczynających się od '_').

    Błąd odczytu pliku jest raportowany jako E_FILE_UNREADABLE —
    walidacja przechodzi do kolejnego pliku.
    """
    validator = validator or RuleValidator()
    result = DirectoryReport()

    for path in list_rule_files(rules_dir):
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            report = ValidationReport(filename=path.name)
            report.errors.append(ValidationError(
                code=ErrorCode.FILE_UNREADABLE,
                path="/",
                message=f"Nie można odczytać pliku: {exc}",
                expected_fix="Sprawdź uprawnienia i kodowanie pliku (UTF-8).",
            ))
            result.reports.append(report)
            continue

        result.reports.append(validator.validate(path.name, text))

    return result
