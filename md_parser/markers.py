"""
md_parser/markers.py — znaczniki sekcji przykładów w treści reguły.

Reguły są pisane po chińsku lub po angielsku, więc każda rola
(przykład błędny / poprawny) ma zestaw dopuszczalnych fraz:

  INCORRECT — "错误示例" | "Incorrect"
  CORRECT   — "正确示例" | "Correct"

Dwa sposoby dopasowania:
  - mentioned_in(): dowolne wystąpienie frazy (walidator, wielkość liter ma znaczenie)
  - heading_re:     pogrubiony nagłówek `**fraza` bez względu na wielkość liter
                    (ekstraktor wycina od niego sekcję z kodem)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum


class MarkerRole(StrEnum):
    INCORRECT = "incorrect"
    CORRECT   = "correct"


@dataclass(frozen=True, slots=True)
class SectionMarker:
    role: MarkerRole
    phrases: tuple[str, ...]
    heading_re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        alternatives = "|".join(re.escape(p) for p in self.phrases)
        # frozen dataclass — ustawiamy pole pochodne przez object.__setattr__
        object.__setattr__(
            self,
            "heading_re",
            re.compile(rf"\*\*(?:{alternatives})", re.IGNORECASE),
        )

    def mentioned_in(self, text: str) -> bool:
        return any(p in text for p in self.phrases)

    def find_heading(self, text: str, start: int = 0) -> re.Match[str] | None:
        return self.heading_re.search(text, start)


INCORRECT = SectionMarker(MarkerRole.INCORRECT, ("错误示例", "Incorrect"))
CORRECT   = SectionMarker(MarkerRole.CORRECT,   ("正确示例", "Correct"))
