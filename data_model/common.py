"""
Wspólne typy pierwotne używane przez documents, categories i snippets.

  ImpactLevel     — poziom wpływu reguły (CRITICAL … LOW)
  CategoryKey     — prefiks nazwy pliku wyznaczający kategorię
  CATEGORY_ORDER  — stała kolejność kategorii w AGENTS.md
"""

from __future__ import annotations

from enum import StrEnum

# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# Token przed pierwszym '-' w nazwie pliku, np. "bundle" dla bundle-lazy-routes.md
type CategoryKey = str


# ---------------------------------------------------------------------------
# Kolejność kategorii
# ---------------------------------------------------------------------------

# Kolejność wg malejącej wagi — decyzja redakcyjna, nie zależy od liczby reguł.
CATEGORY_ORDER: tuple[CategoryKey, ...] = (
    "async",
    "bundle",
    "server",
    "client",
    "reactivity",
    "rendering",
    "vue2",
    "vue3",
    "js",
    "advanced",
)


# ---------------------------------------------------------------------------
# ImpactLevel
# ---------------------------------------------------------------------------

class ImpactLevel(StrEnum):
    """
    Poziom wpływu reguły na wydajność (od najpoważniejszego).

    Wartość pola `impact` we frontmatterze musi być dokładnie jednym
    z tych tokenów — bez normalizacji wielkości liter.
    """
    CRITICAL    = "CRITICAL"
    HIGH        = "HIGH"
    MEDIUM_HIGH = "MEDIUM-HIGH"
    MEDIUM      = "MEDIUM"
    LOW_MEDIUM  = "LOW-MEDIUM"
    LOW         = "LOW"

    @property
    def rank(self) -> int:
        """0 = najpoważniejszy (CRITICAL), 5 = najlżejszy (LOW)."""
        return list(ImpactLevel).index(self)

    @classmethod
    def parse(cls, value: str | None) -> "ImpactLevel | None":
        """Zwraca ImpactLevel dla dokładnego tokenu albo None."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None
