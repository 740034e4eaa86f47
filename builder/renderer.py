"""
builder/renderer.py — składanie AGENTS.md z reguł pogrupowanych po kategorii.

render_agents(rules_by_category, metadata) -> RenderResult

Układ dokumentu::

    # {title}
    {abstract}
    **版本** / **最后更新**
    ---
    ## {N}. {kategoria}           N = pozycja w CATEGORY_ORDER (1-based)
    ### {N}.{M} {tytuł reguły}    M = pozycja w posortowanej grupie
    …
    ---

Funkcja jest czysta: licznik reguł wraca w RenderResult, zapis pliku
należy do wywołującego.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from data_model import (
    CATEGORY_ORDER,
    Category,
    ProjectMetadata,
    RuleDocument,
    RulesByCategory,
)

# Etykiety w języku bazy wiedzy (reguły są pisane po chińsku).
LABELS: dict[str, str] = {
    "version":            "版本",
    "last_updated":       "最后更新",
    "category_impact":    "影响等级",
    "description":        "描述",
    "impact":             "影响",
    "impact_description": "影响说明",
    "tags":               "标签",
}

SEPARATOR = "---"


class SkipReason(StrEnum):
    UNKNOWN_CATEGORY = "unknown_category"   # prefiks spoza CATEGORY_ORDER
    NO_METADATA      = "no_metadata"        # brak wpisu w metadata.json


@dataclass(slots=True)
class SkippedGroup:
    category: str
    reason: SkipReason
    filenames: list[str]


@dataclass(slots=True)
class RenderResult:
    text: str
    rule_count: int
    skipped: list[SkippedGroup] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Fragmenty dokumentu
# ---------------------------------------------------------------------------

def _render_header(metadata: ProjectMetadata) -> str:
    out  = f"# {metadata.title}\n\n"
    out += f"{metadata.abstract}\n\n"
    out += f"**{LABELS['version']}**: {metadata.version}  \n"
    out += f"**{LABELS['last_updated']}**: {metadata.last_updated}\n\n"
    out += f"{SEPARATOR}\n\n"
    return out


def _render_section_header(number: int, category: Category) -> str:
    out  = f"## {number}. {category.name}\n\n"
    out += f"**{LABELS['category_impact']}**: {category.impact}  \n"
    out += f"**{LABELS['description']}**: {category.description}\n\n"
    return out


def _render_rule(section_number: int, index: int, rule: RuleDocument) -> str:
    out  = f"### {section_number}.{index} {rule.title}\n\n"
    out += f"**{LABELS['impact']}**: {rule.impact}  \n"

    if rule.impact_description:
        out += f"**{LABELS['impact_description']}**: {rule.impact_description}  \n"

    if rule.tags:
        out += f"**{LABELS['tags']}**: {rule.tags}\n"

    out += f"\n{rule.body}\n\n"
    out += f"{SEPARATOR}\n\n"
    return out


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def render_agents(
    rules_by_category: RulesByCategory,
    metadata: ProjectMetadata,
) -> RenderResult:
    """
    Składa pełny tekst AGENTS.md.

    Kategorie są emitowane w kolejności CATEGORY_ORDER niezależnie od
    kolejności w słowniku wejściowym. Kategorie bez reguł nie dostają
    nagłówka; grupy pominięte z innych powodów trafiają do `skipped`.
    """
    parts: list[str] = [_render_header(metadata)]
    skipped: list[SkippedGroup] = []
    rule_count = 0

    for section_index, key in enumerate(CATEGORY_ORDER):
        rules = rules_by_category.get(key)
        if not rules:
            continue

        category = metadata.categories.get(key)
        if category is None:
            skipped.append(SkippedGroup(
                category=key,
                reason=SkipReason.NO_METADATA,
                filenames=[r.filename for r in rules],
            ))
            continue

        section_number = section_index + 1
        parts.append(_render_section_header(section_number, category))

        for index, rule in enumerate(rules, start=1):
            parts.append(_render_rule(section_number, index, rule))
            rule_count += 1

    for key in sorted(set(rules_by_category) - set(CATEGORY_ORDER)):
        skipped.append(SkippedGroup(
            category=key,
            reason=SkipReason.UNKNOWN_CATEGORY,
            filenames=[r.filename for r in rules_by_category[key]],
        ))

    return RenderResult(text="".join(parts), rule_count=rule_count, skipped=skipped)
