import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.catalog_rules.context import EvaluationContext, build_context
from common.catalog_rules.models import (
    MasterProduct,
    MasterStyle,
    ProductRequest,
    Severity,
    StyleRequest,
)


STYLE_DEFAULTS = {
    "style_code": "ST001",
    "name": "Summer Dress",
    "category": "Dresses",
    "gender": "W",
    "size_range": "s",
    "vertical": "Fashion",
    "season_code": "SS24",
}

PRODUCT_DEFAULTS = {
    "code": "FW24-SH-001-BLK",
    "style_code": "FW24-SH-001",
    "sales_color_code": "black",
    "sales_color_name": "Black",
    "sales_availability": "available",
    "season_code": "FW24",
}


def _build(model, defaults: dict, overrides: dict, drop: tuple[str, ...]):
    data = {**defaults, **overrides}
    for name in drop:
        data.pop(name, None)
    return model(**data)


@pytest.fixture
def make_style():
    def _make(*, drop: tuple[str, ...] = (), **overrides) -> StyleRequest:
        return _build(StyleRequest, STYLE_DEFAULTS, overrides, drop)

    return _make


@pytest.fixture
def make_master_style():
    def _make(*, drop: tuple[str, ...] = (), **overrides) -> MasterStyle:
        defaults = {**STYLE_DEFAULTS, "status": "active", "data": {}}
        return _build(MasterStyle, defaults, overrides, drop)

    return _make


@pytest.fixture
def make_product():
    def _make(*, drop: tuple[str, ...] = (), **overrides) -> ProductRequest:
        return _build(ProductRequest, PRODUCT_DEFAULTS, overrides, drop)

    return _make


@pytest.fixture
def make_master_product():
    def _make(*, drop: tuple[str, ...] = (), **overrides) -> MasterProduct:
        defaults = {**PRODUCT_DEFAULTS, "status": "Approved", "data": {}}
        return _build(MasterProduct, defaults, overrides, drop)

    return _make


@pytest.fixture
def make_ctx():
    def _make(current, existing=None, severity: Severity = Severity.HARD) -> EvaluationContext:
        return build_context(current, existing, severity)

    return _make
