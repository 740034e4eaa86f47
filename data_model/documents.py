"""
data_model/documents.py — model dokumentu reguły (plik Markdown z frontmatterem).

Frontmatter odpowiada blokowi `--- ... ---` na początku pliku; RuleDocument
łączy go z treścią i kategorią wyprowadzoną z nazwy pliku. Obiekty są
tworzone od nowa przy każdym uruchomieniu i nie są później modyfikowane.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import CategoryKey


@dataclass(frozen=True, slots=True)
class Frontmatter:
    """
    Sparsowany blok metadanych.

    - fields:          płaska mapa klucz → wartość (ostatni duplikat wygrywa)
    - duplicate_keys:  klucze nadpisane przez późniejsze wystąpienie
    - malformed_lines: niepuste linie bez ':' (pominięte przy parsowaniu)
    """
    fields: dict[str, str]
    duplicate_keys: tuple[str, ...] = ()
    malformed_lines: tuple[str, ...] = ()

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.fields.get(key, default)


@dataclass(frozen=True, slots=True)
class RuleDocument:
    filename: str             # np. "bundle-lazy-routes.md"
    category: CategoryKey     # prefiks nazwy pliku
    meta: Frontmatter
    body: str = field(repr=False)

    @property
    def rule_id(self) -> str:
        """Nazwa pliku bez rozszerzenia .md."""
        return self.filename.removesuffix(".md")

    @property
    def title(self) -> str:
        return self.meta.get("title") or ""

    @property
    def impact(self) -> str:
        return self.meta.get("impact") or ""

    @property
    def impact_description(self) -> str | None:
        return self.meta.get("impactDescription") or None

    @property
    def tags(self) -> str | None:
        return self.meta.get("tags") or None

    @property
    def tag_list(self) -> list[str]:
        """Tagi rozbite po przecinku, bez pustych elementów."""
        if not self.tags:
            return []
        return [t.strip() for t in self.tags.split(",") if t.strip()]


# Dokumenty pogrupowane po kategorii, posortowane wewnątrz grupy.
type RulesByCategory = dict[CategoryKey, list[RuleDocument]]
