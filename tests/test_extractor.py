import json
from pathlib import Path

from extractor import dump_test_cases, extract_code_pair, extract_test_cases

MULTI_VARIANT_BODY = """
**Incorrect (watch everything):**

```ts
watch(state, cb, { deep: true })
```

```ts
watchEffect(() => cb(state))
```

**Correct (Composition API):**

```ts
watch(() => state.id, cb)
```

**Correct (Options API):**

```js
watch: { 'state.id': 'cb' }
```
"""


def test_extract_code_pair_basic(rule_text) -> None:
    body = rule_text().split("---\n", 2)[2]
    incorrect, correct = extract_code_pair(body)
    assert incorrect == ["const a = await one()\nconst b = await two()"]
    assert correct == ["const [a, b] = await Promise.all([one(), two()])"]


def test_extract_keeps_all_blocks_per_section() -> None:
    incorrect, correct = extract_code_pair(MULTI_VARIANT_BODY)
    assert incorrect == [
        "watch(state, cb, { deep: true })",
        "watchEffect(() => cb(state))",
    ]
    assert correct == [
        "watch(() => state.id, cb)",
        "watch: { 'state.id': 'cb' }",
    ]


def test_chinese_headings() -> None:
    body = "**错误示例：**\n```vue\n<A />\n```\n**正确示例：**\n```vue\n<B />\n```\n"
    assert extract_code_pair(body) == (["<A />"], ["<B />"])


def test_headings_are_case_insensitive() -> None:
    body = "**INCORRECT**\n```\nx\n```\n**correct**\n```\ny\n```\n"
    assert extract_code_pair(body) == (["x"], ["y"])


def test_incorrect_section_runs_to_end_without_correct_heading() -> None:
    body = "**Incorrect:**\n```\nx\n```\ntext\n```\ny\n```\n"
    assert extract_code_pair(body) == (["x", "y"], [])


def test_scenario_single_record(write_rule, rules_dir: Path) -> None:
    write_rule("bundle-test.md", title="Test Rule", impact="HIGH")

    result = extract_test_cases(rules_dir)

    assert len(result.test_cases) == 1
    case = result.test_cases[0]
    assert case.id == "bundle-test"
    assert case.title == "Test Rule"
    assert case.category == "bundle"
    assert case.impact == "HIGH"


def test_first_block_of_each_section_is_kept(write_rule, rules_dir: Path) -> None:
    write_rule("reactivity-watch.md", body=MULTI_VARIANT_BODY)

    (case,) = extract_test_cases(rules_dir).test_cases

    assert case.incorrect_code == "watch(state, cb, { deep: true })"
    assert case.correct_code == "watch(() => state.id, cb)"


def test_rules_without_pair_are_skipped(write_rule, rules_dir: Path) -> None:
    write_rule("js-ok.md")
    write_rule("js-no-correct.md", body="**Incorrect:**\n```\nx\n```\n")
    write_rule("js-no-markers.md", body="```\nx\n```\n```\ny\n```\n")
    write_rule("js-broken.md", text="no frontmatter\n")
    write_rule("_template.md")

    result = extract_test_cases(rules_dir)

    assert [c.id for c in result.test_cases] == ["js-ok"]
    assert result.skipped == ["js-no-correct.md", "js-no-markers.md"]
    assert result.failed == ["js-broken.md"]


def test_dump_uses_camel_case_and_keeps_unicode(write_rule, rules_dir: Path) -> None:
    write_rule("vue3-memo.md", title="用 v-memo", impact="LOW")

    data = dump_test_cases(extract_test_cases(rules_dir).test_cases)

    assert "用 v-memo" in data
    (record,) = json.loads(data)
    assert set(record) == {"id", "title", "category", "impact", "incorrectCode", "correctCode"}
    assert record["category"] == "vue3"


def test_dump_empty_list() -> None:
    assert dump_test_cases([]) == "[]"
