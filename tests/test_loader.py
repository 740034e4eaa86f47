from pathlib import Path

import pytest

from builder import (
    RuleLoadError,
    derive_category_key,
    list_rule_files,
    load_rule,
    load_rules,
)


def test_derive_category_key() -> None:
    assert derive_category_key("bundle-lazy-routes.md") == "bundle"
    assert derive_category_key("vue3-shallow-ref.md") == "vue3"
    assert derive_category_key("async.md") == "async"


def test_list_rule_files_skips_reserved_and_other_extensions(rules_dir: Path, write_rule) -> None:
    write_rule("bundle-a.md")
    write_rule("_template.md")
    write_rule("_sections.md")
    (rules_dir / "notes.txt").write_text("x", encoding="utf-8")

    assert [p.name for p in list_rule_files(rules_dir)] == ["bundle-a.md"]


def test_load_rule_builds_document(write_rule) -> None:
    path = write_rule(
        "bundle-lazy.md",
        title="Lazy",
        impact="CRITICAL",
        impactDescription="smaller bundle",
        tags="bundle, router",
    )
    rule = load_rule(path)

    assert rule.rule_id == "bundle-lazy"
    assert rule.category == "bundle"
    assert rule.title == "Lazy"
    assert rule.impact == "CRITICAL"
    assert rule.impact_description == "smaller bundle"
    assert rule.tag_list == ["bundle", "router"]
    assert "**Incorrect:**" in rule.body


def test_rules_sorted_by_title_within_category(write_rule, rules_dir: Path) -> None:
    write_rule("vue3-z.md", title="Zebra Rule")
    write_rule("vue3-a.md", title="Alpha Rule")
    write_rule("bundle-x.md", title="Bundle Rule")
    write_rule("js-only.md")

    rules = load_rules(rules_dir)

    assert [r.title for r in rules["vue3"]] == ["Alpha Rule", "Zebra Rule"]
    assert set(rules) == {"vue3", "bundle", "js"}


def test_sort_ignores_case(write_rule, rules_dir: Path) -> None:
    write_rule("js-b.md", title="beta")
    write_rule("js-a.md", title="Alpha")
    write_rule("js-c.md", title="Charlie")

    assert [r.title for r in load_rules(rules_dir)["js"]] == ["Alpha", "beta", "Charlie"]


def test_equal_titles_ordered_by_filename(write_rule, rules_dir: Path) -> None:
    write_rule("async-zh.md", title="Same")
    write_rule("async-en.md", title="Same")

    first = load_rules(rules_dir)["async"]
    second = load_rules(rules_dir)["async"]

    assert [r.filename for r in first] == ["async-en.md", "async-zh.md"]
    assert [r.filename for r in first] == [r.filename for r in second]


def test_missing_title_sorts_first_without_error(write_rule, rules_dir: Path) -> None:
    write_rule("client-a.md", title="Something")
    write_rule("client-b.md", title=None)

    rules = load_rules(rules_dir)["client"]
    assert [r.filename for r in rules] == ["client-b.md", "client-a.md"]
    assert rules[0].title == ""


def test_structural_error_aborts_load(write_rule, rules_dir: Path) -> None:
    write_rule("async-ok.md")
    write_rule("bundle-broken.md", text="no frontmatter here\n")

    with pytest.raises(RuleLoadError) as exc_info:
        load_rules(rules_dir)
    assert exc_info.value.filename == "bundle-broken.md"


def test_unknown_category_is_still_loaded(write_rule, rules_dir: Path) -> None:
    write_rule("misc-thing.md")
    assert "misc" in load_rules(rules_dir)
