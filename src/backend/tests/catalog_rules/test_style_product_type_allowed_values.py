import pytest

from common.catalog_rules.rules.style_product_type_allowed_values import (
    STYLE_PRODUCT_TYPE_MUST_BE_TEST_OR_DUMB,
)


def test_product_type_fails_for_unallowed_value(make_style, make_ctx):
    res = STYLE_PRODUCT_TYPE_MUST_BE_TEST_OR_DUMB().evaluate(make_ctx(make_style(product_type="footwear")))
    assert res.valid is False
    assert res.message == "Product type must be one of 'test', 'dumb'. Current value: 'footwear'."
    assert res.field_name == "product_type"
    assert res.new_value == "footwear"
    assert res.context["allowed_values"] == ["test", "dumb"]


@pytest.mark.parametrize("value", ["test", "dumb"])
def test_product_type_passes_for_allowed_values(make_style, make_ctx, value):
    res = STYLE_PRODUCT_TYPE_MUST_BE_TEST_OR_DUMB().evaluate(make_ctx(make_style(product_type=value)))
    assert res.valid is True
    assert res.new_value == value
    assert res.context["reason"] == "product_type is valid."


def test_product_type_uses_one_rule_name_on_every_path(make_style, make_ctx):
    rule = STYLE_PRODUCT_TYPE_MUST_BE_TEST_OR_DUMB()
    names = {
        rule.evaluate(make_ctx(make_style(product_type=value))).rule_name
        for value in ("test", "footwear", None)
    }
    assert names == {"ProductTypeMustBeTestOrDumb"}


def test_product_type_null_is_valid_because_optional(make_style, make_ctx):
    res = STYLE_PRODUCT_TYPE_MUST_BE_TEST_OR_DUMB().evaluate(make_ctx(make_style(product_type=None)))
    assert res.valid is True
    assert res.new_value is None
    assert res.context["reason"] == "product_type is optional and not provided."
    assert "allowed_values" not in res.context


def test_product_type_unset_is_valid_because_optional(make_style, make_ctx):
    res = STYLE_PRODUCT_TYPE_MUST_BE_TEST_OR_DUMB().evaluate(make_ctx(make_style()))
    assert res.valid is True
    assert res.new_value is None


def test_product_type_update_reads_old_value_from_master_extension_data(
    make_style, make_master_style, make_ctx
):
    res = STYLE_PRODUCT_TYPE_MUST_BE_TEST_OR_DUMB().evaluate(
        make_ctx(make_style(product_type="footwear"), make_master_style(data={"product_type": "test"}))
    )
    assert res.valid is False
    assert res.old_value == "test"
    assert res.new_value == "footwear"
