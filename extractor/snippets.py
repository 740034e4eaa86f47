"""
extractor/snippets.py — wyciąganie par przykładów (błędny / poprawny) z reguł.

Sekcja błędna:   od pierwszego `**错误示例` / `**Incorrect` do pierwszego
                 `**正确示例` / `**Correct` za nim (lub do końca treści).
Sekcja poprawna: od pierwszego `**正确示例` / `**Correct` do końca treści.

Z każdej sekcji zachowujemy tylko PIERWSZY blok kodu — kolejne warianty
(np. wersja Options API obok Composition API) są pomijane.
"""

from __future__ import annotations

import json
import pathlib
from dataclasses import dataclass, field

from builder.loader import RuleLoadError, list_rule_files, load_rule
from data_model import RuleDocument, TestCase
from md_parser import CORRECT, INCORRECT, find_code_blocks


@dataclass(slots=True)
class ExtractionResult:
    test_cases: list[TestCase] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)   # pliki bez pary przykładów
    failed: list[str] = field(default_factory=list)    # pliki nie do sparsowania


# ---------------------------------------------------------------------------
# Sekcje i bloki kodu
# ---------------------------------------------------------------------------

def _incorrect_section(body: str) -> str | None:
    start = INCORRECT.find_heading(body)
    if start is None:
        return None
    end = CORRECT.find_heading(body, start.end())
    return body[start.end():end.start() if end else len(body)]


def _correct_section(body: str) -> str | None:
    start = CORRECT.find_heading(body)
    if start is None:
        return None
    return body[start.end():]


def extract_code_pair(body: str) -> tuple[list[str], list[str]]:
    """Zwraca (bloki błędne, bloki poprawne) z treści reguły."""
    incorrect_section = _incorrect_section(body)
    correct_section   = _correct_section(body)

    incorrect = find_code_blocks(incorrect_section) if incorrect_section else []
    correct   = find_code_blocks(correct_section) if correct_section else []
    return incorrect, correct


def rule_to_test_case(rule: RuleDocument) -> TestCase | None:
    """TestCase dla reguły albo None, jeśli brakuje któregoś przykładu."""
    incorrect, correct = extract_code_pair(rule.body)
    if not incorrect or not correct:
        return None

    return TestCase(
        id=rule.rule_id,
        title=rule.title,
        category=rule.category,
        impact=rule.impact,
        incorrect_code=incorrect[0],
        correct_code=correct[0],
    )


# ---------------------------------------------------------------------------
# Katalog reguł
# ---------------------------------------------------------------------------

def extract_test_cases(rules_dir: pathlib.Path) -> ExtractionResult:
    """
    Przechodzi po wszystkich plikach reguł; pliki bez frontmattera lub
    bez pary przykładów są pomijane bez przerywania ekstrakcji.
    """
    result = ExtractionResult()

    for path in list_rule_files(rules_dir):
        try:
            rule = load_rule(path)
        except RuleLoadError:
            result.failed.append(path.name)
            continue

        case = rule_to_test_case(rule)
        if case is None:
            result.skipped.append(path.name)
            continue
        result.test_cases.append(case)

    return result


def dump_test_cases(test_cases: list[TestCase]) -> str:
    """Serializuje przypadki do JSON (wcięcie 2, bez escapowania znaków spoza ASCII)."""
    return json.dumps([c.to_json() for c in test_cases], ensure_ascii=False, indent=2)
