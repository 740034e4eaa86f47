"""
Struktury danych dla metadanych projektu (metadata.json).

Kategorie nie są zapisane w plikach reguł — wyprowadzamy je z prefiksu
nazwy pliku i łączymy z tabelą `categories` z metadata.json, która dostarcza
nazwę, opis i poziom wpływu kategorii.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import CATEGORY_ORDER, CategoryKey


@dataclass(slots=True)
class Category:
    """
    Kategoria reguł.

    - key:         prefiks plików, np. "async"
    - name:        nazwa wyświetlana w nagłówku sekcji
    - description: opis sekcji
    - impact:      poziom wpływu kategorii (tekst z metadata.json)
    """
    key: CategoryKey
    name: str
    description: str
    impact: str

    @property
    def order(self) -> int | None:
        """1-based pozycja w CATEGORY_ORDER (None dla nieznanego klucza)."""
        if self.key not in CATEGORY_ORDER:
            return None
        return CATEGORY_ORDER.index(self.key) + 1


@dataclass(slots=True)
class ProjectMetadata:
    """Nagłówek AGENTS.md + tabela kategorii."""
    title: str
    abstract: str
    version: str
    last_updated: str
    categories: dict[CategoryKey, Category] = field(default_factory=dict)
