"""
Struktury danych dla przypadków testowych wyciąganych z reguł (test-cases.json).
"""

from __future__ import annotations

from dataclasses import dataclass

from .common import CategoryKey


@dataclass(frozen=True, slots=True)
class TestCase:
    """
    Para przykładów (błędny / poprawny) z jednej reguły.

    Serializowana z kluczami camelCase — format test-cases.json.
    """
    __test__ = False  # nie jest klasą testową pytest

    id: str
    title: str
    category: CategoryKey
    impact: str
    incorrect_code: str
    correct_code: str

    def to_json(self) -> dict[str, str]:
        return {
            "id":            self.id,
            "title":         self.title,
            "category":      self.category,
            "impact":        self.impact,
            "incorrectCode": self.incorrect_code,
            "correctCode":   self.correct_code,
        }
