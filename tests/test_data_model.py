from data_model import Frontmatter, ImpactLevel, RuleDocument


def test_impact_rank_orders_by_severity() -> None:
    shuffled = [ImpactLevel.LOW, ImpactLevel.CRITICAL, ImpactLevel.MEDIUM, ImpactLevel.HIGH,
                ImpactLevel.LOW_MEDIUM, ImpactLevel.MEDIUM_HIGH]

    assert sorted(shuffled, key=lambda level: level.rank) == [
        ImpactLevel.CRITICAL,
        ImpactLevel.HIGH,
        ImpactLevel.MEDIUM_HIGH,
        ImpactLevel.MEDIUM,
        ImpactLevel.LOW_MEDIUM,
        ImpactLevel.LOW,
    ]
    assert ImpactLevel.CRITICAL.rank == 0
    assert ImpactLevel.LOW.rank == 5
    assert ImpactLevel.CRITICAL.rank < ImpactLevel.MEDIUM_HIGH.rank < ImpactLevel.LOW.rank


def test_impact_parse_accepts_exact_tokens_only() -> None:
    assert ImpactLevel.parse("MEDIUM-HIGH") is ImpactLevel.MEDIUM_HIGH
    assert ImpactLevel.parse("high") is None
    assert ImpactLevel.parse("") is None
    assert ImpactLevel.parse(None) is None


def test_rule_document_missing_fields_default() -> None:
    doc = RuleDocument(
        filename="bundle-x.md",
        category="bundle",
        meta=Frontmatter({"tags": "a, ,b"}),
        body="",
    )

    assert doc.rule_id == "bundle-x"
    assert doc.title == ""
    assert doc.impact == ""
    assert doc.impact_description is None
    assert doc.tag_list == ["a", "b"]
