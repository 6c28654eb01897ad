from common.catalog_rules.models import Severity
from common.catalog_rules.rules.product_sales_color_code_allowed_values import (
    PRODUCT_SALES_COLOR_CODE_ALLOWED_VALUES,
)


def test_unallowed_color_fails(make_product, make_ctx):
    res = PRODUCT_SALES_COLOR_CODE_ALLOWED_VALUES().evaluate(
        make_ctx(make_product(sales_color_code="blue"), severity=Severity.SOFT)
    )
    assert res.valid is False
    assert res.message == "Sales color code 'blue' is not allowed. It must be one of: black, red."
    assert res.severity == Severity.SOFT
    assert res.new_value == "blue"
    assert res.context["product_code"] == "FW24-SH-001-BLK"
    assert res.context["style_code"] == "FW24-SH-001"


def test_creation_with_allowed_color_passes(make_product, make_ctx):
    res = PRODUCT_SALES_COLOR_CODE_ALLOWED_VALUES().evaluate(make_ctx(make_product(sales_color_code="red")))
    assert res.valid is True
    assert res.old_value is None
    assert res.new_value == "red"


def test_comparison_ignores_case(make_product, make_ctx):
    res = PRODUCT_SALES_COLOR_CODE_ALLOWED_VALUES().evaluate(make_ctx(make_product(sales_color_code="BLACK")))
    assert res.valid is True
    assert res.new_value == "BLACK"


def test_update_with_unallowed_color_fails(make_product, make_master_product, make_ctx):
    res = PRODUCT_SALES_COLOR_CODE_ALLOWED_VALUES().evaluate(
        make_ctx(make_product(sales_color_code="green"), make_master_product(sales_color_code="red"))
    )
    assert res.valid is False
    assert res.message.startswith("Sales color code 'green' is not allowed.")
    assert res.old_value == "red"
    assert res.new_value == "green"


def test_update_with_allowed_color_passes(make_product, make_master_product, make_ctx):
    res = PRODUCT_SALES_COLOR_CODE_ALLOWED_VALUES().evaluate(
        make_ctx(make_product(sales_color_code="black"), make_master_product(sales_color_code="red"))
    )
    assert res.valid is True
    assert res.old_value == "red"
    assert res.new_value == "black"


def test_missing_color_fails(make_product, make_ctx):
    res = PRODUCT_SALES_COLOR_CODE_ALLOWED_VALUES().evaluate(make_ctx(make_product(sales_color_code=None)))
    assert res.valid is False
    assert "'null'" in res.message
