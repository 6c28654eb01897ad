from common.catalog_rules.models import Severity
from common.catalog_rules.rules.style_size_range_creation_allowed_values import (
    STYLE_SIZE_RANGE_FOOTWEAR_OR_APPAREL_MEDIUM,
)


def test_creation_with_unallowed_size_range_lists_allowed_set(make_style, make_ctx):
    res = STYLE_SIZE_RANGE_FOOTWEAR_OR_APPAREL_MEDIUM().evaluate(
        make_ctx(make_style(style_code="FW24-ACC-001", size_range="S"))
    )
    assert res.valid is False
    assert res.message == (
        "The 'size_range' value 'S' is not allowed during creation. It must be one of: FTW-W, APP-M."
    )
    assert res.severity == Severity.HARD
    assert res.rule_name == "SizeRangeFootwearOrApparelMediumAllowedValues"
    assert res.old_value is None
    assert res.context["allowed_values"] == ["FTW-W", "APP-M"]


def test_creation_with_allowed_size_range_passes(make_style, make_ctx):
    rule = STYLE_SIZE_RANGE_FOOTWEAR_OR_APPAREL_MEDIUM()
    for value in ("FTW-W", "APP-M"):
        res = rule.evaluate(make_ctx(make_style(size_range=value)))
        assert res.valid is True
        assert res.message is None
        assert res.new_value == value


def test_update_is_skipped(make_style, make_master_style, make_ctx):
    res = STYLE_SIZE_RANGE_FOOTWEAR_OR_APPAREL_MEDIUM().evaluate(
        make_ctx(make_style(size_range="S"), make_master_style(size_range="FTW-M"))
    )
    assert res.valid is True
    assert res.message is None
    assert res.old_value == "FTW-M"
    assert res.new_value == "S"
    assert res.context["reason"] == "Rule applies only to new style creation, skipping for update."
