"""
data_model — struktury danych bazy reguł wydajności Vue/Nuxt.

Użycie:
  from data_model import RuleDocument, ImpactLevel, ProjectMetadata, ...

Moduły:
  common     — ImpactLevel, CategoryKey, CATEGORY_ORDER
  documents  — Frontmatter, RuleDocument, RulesByCategory
  categories — Category, ProjectMetadata
  snippets   — TestCase

Mapowanie na pliki:
  rules/*.md        → RuleDocument (frontmatter + treść)
  metadata.json     → ProjectMetadata
  test-cases.json   → list[TestCase]
"""

from .common import (
    CATEGORY_ORDER,
    CategoryKey,
    ImpactLevel,
)
from .documents import (
    Frontmatter,
    RuleDocument,
    RulesByCategory,
)
from .categories import (
    Category,
    ProjectMetadata,
)
from .snippets import TestCase

__all__ = [
    # common
    "CATEGORY_ORDER",
    "CategoryKey",
    "ImpactLevel",
    # documents
    "Frontmatter",
    "RuleDocument",
    "RulesByCategory",
    # categories
    "Category",
    "ProjectMetadata",
    # snippets
    "TestCase",
]
