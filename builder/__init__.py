"""
builder — budowanie AGENTS.md z katalogu reguł.

Publiczne API:
  load_rules(rules_dir)                      → RulesByCategory
  load_rule(path)                            → RuleDocument
  list_rule_files(rules_dir)                 → list[Path]
  derive_category_key(filename)              → str
  render_agents(rules_by_category, metadata) → RenderResult
  RuleLoadError                              błąd wczytania pliku
"""

from .loader import (
    RESERVED_PREFIX,
    RULE_SUFFIX,
    RuleLoadError,
    derive_category_key,
    is_rule_filename,
    list_rule_files,
    load_rule,
    load_rules,
    title_sort_key,
)
from .renderer import (
    LABELS,
    RenderResult,
    SkipReason,
    SkippedGroup,
    render_agents,
)

__all__ = [
    "RESERVED_PREFIX",
    "RULE_SUFFIX",
    "RuleLoadError",
    "derive_category_key",
    "is_rule_filename",
    "list_rule_files",
    "load_rule",
    "load_rules",
    "title_sort_key",
    "LABELS",
    "RenderResult",
    "SkipReason",
    "SkippedGroup",
    "render_agents",
]
