import re
from pathlib import Path

from builder import SkipReason, load_rules, render_agents
from data_model import CATEGORY_ORDER
from validator import MetadataIndex


def _render(rules_dir: Path, metadata_dict: dict):
    index = MetadataIndex.from_dict(metadata_dict)
    return render_agents(load_rules(rules_dir), index.metadata)


def test_header_from_metadata(rules_dir: Path, metadata_dict: dict) -> None:
    result = _render(rules_dir, metadata_dict)

    assert result.text.startswith("# Vue Performance\n\nRules for fast Vue apps.\n\n")
    assert "**版本**: 1.2.3  \n" in result.text
    assert "**最后更新**: 2026-01-01\n\n---\n\n" in result.text
    assert result.rule_count == 0


def test_sections_follow_fixed_order(write_rule, rules_dir: Path, metadata_dict: dict) -> None:
    write_rule("advanced-x.md", title="Adv")
    write_rule("js-x.md", title="Js")
    write_rule("async-x.md", title="Async")
    write_rule("vue3-x.md", title="Vue3")

    text = _render(rules_dir, metadata_dict).text

    names = [metadata_dict["categories"][k]["name"] for k in ("async", "vue3", "js", "advanced")]
    positions = [text.index(name) for name in names]
    assert positions == sorted(positions)


def test_section_numbers_are_positions_in_category_order(
    write_rule, rules_dir: Path, metadata_dict: dict,
) -> None:
    write_rule("bundle-b.md", title="Beta")
    write_rule("bundle-a.md", title="Alpha")
    write_rule("vue3-x.md", title="Memo")

    result = _render(rules_dir, metadata_dict)

    bundle_no = CATEGORY_ORDER.index("bundle") + 1
    vue3_no = CATEGORY_ORDER.index("vue3") + 1
    assert f"## {bundle_no}. Bundle Name\n\n**影响等级**: HIGH  \n**描述**: bundle description\n\n" in result.text
    assert f"### {bundle_no}.1 Alpha\n\n" in result.text
    assert f"### {bundle_no}.2 Beta\n\n" in result.text
    assert f"### {vue3_no}.1 Memo\n\n" in result.text
    assert result.rule_count == 3


def test_empty_categories_have_no_header(write_rule, rules_dir: Path, metadata_dict: dict) -> None:
    write_rule("async-x.md")

    text = _render(rules_dir, metadata_dict).text

    assert re.findall(r"^## \d+\. .*$", text, re.MULTILINE) == ["## 1. Async Name"]
    assert "Bundle Name" not in text


def test_rule_block_optional_fields(write_rule, rules_dir: Path, metadata_dict: dict) -> None:
    write_rule("js-a.md", title="With", impact="LOW", impactDescription="tiny win", tags="js, loops")
    write_rule("js-b.md", title="Without", impact="MEDIUM")

    text = _render(rules_dir, metadata_dict).text

    assert "**影响**: LOW  \n**影响说明**: tiny win  \n**标签**: js, loops\n\n\n## Rule" in text
    assert "### 9.2 Without\n\n**影响**: MEDIUM  \n\n\n## Rule" in text
    assert text.endswith("---\n\n")


def test_unknown_category_is_skipped_and_reported(
    write_rule, rules_dir: Path, metadata_dict: dict,
) -> None:
    write_rule("async-ok.md", title="Ok")
    write_rule("misc-thing.md", title="Orphan")

    result = _render(rules_dir, metadata_dict)

    assert "Orphan" not in result.text
    assert result.rule_count == 1
    assert len(result.skipped) == 1
    assert result.skipped[0].reason is SkipReason.UNKNOWN_CATEGORY
    assert result.skipped[0].filenames == ["misc-thing.md"]


def test_category_without_metadata_is_skipped(
    write_rule, rules_dir: Path, metadata_dict: dict,
) -> None:
    del metadata_dict["categories"]["server"]
    write_rule("server-cache.md", title="Cache")

    result = _render(rules_dir, metadata_dict)

    assert "Cache" not in result.text
    assert result.rule_count == 0
    assert result.skipped[0].reason is SkipReason.NO_METADATA


def test_render_is_deterministic(write_rule, rules_dir: Path, metadata_dict: dict) -> None:
    for name in ("vue2-b.md", "vue2-a.md", "client-c.md", "rendering-d.md"):
        write_rule(name, title=name.upper())

    assert _render(rules_dir, metadata_dict).text == _render(rules_dir, metadata_dict).text
