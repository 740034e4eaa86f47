import json
from collections.abc import Callable
from pathlib import Path

import pytest

DEFAULT_BODY = """
## Rule

Some explanation.

**Incorrect:**

```ts
const a = await one()
const b = await two()
```

**Correct:**

```ts
const [a, b] = await Promise.all([one(), two()])
```
"""


def make_rule_text(
    title: str | None = "Test Rule",
    impact: str | None = "HIGH",
    body: str = DEFAULT_BODY,
    **extra: str,
) -> str:
    lines = ["---"]
    if title is not None:
        lines.append(f"title: {title}")
    if impact is not None:
        lines.append(f"impact: {impact}")
    lines.extend(f"{key}: {value}" for key, value in extra.items())
    lines.append("---")
    return "\n".join(lines) + "\n" + body


@pytest.fixture
def rule_text() -> Callable[..., str]:
    return make_rule_text


@pytest.fixture
def rules_dir(tmp_path: Path) -> Path:
    path = tmp_path / "rules"
    path.mkdir()
    return path


@pytest.fixture
def write_rule(rules_dir: Path) -> Callable[..., Path]:
    def _write(filename: str, text: str | None = None, **kwargs: str) -> Path:
        path = rules_dir / filename
        path.write_text(text if text is not None else make_rule_text(**kwargs), encoding="utf-8")
        return path

    return _write


METADATA: dict = {
    "title": "Vue Performance",
    "abstract": "Rules for fast Vue apps.",
    "version": "1.2.3",
    "lastUpdated": "2026-01-01",
    "categories": {
        key: {"name": f"{key.title()} Name", "description": f"{key} description", "impact": "HIGH"}
        for key in (
            "async", "bundle", "server", "client", "reactivity",
            "rendering", "vue2", "vue3", "js", "advanced",
        )
    },
}


@pytest.fixture
def metadata_dict() -> dict:
    return json.loads(json.dumps(METADATA))


@pytest.fixture
def metadata_file(tmp_path: Path, metadata_dict: dict) -> Path:
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps(metadata_dict, ensure_ascii=False), encoding="utf-8")
    return path
