from .style_gender_allowed_values import STYLE_GENDER_ALLOWED_VALUES
from .style_product_type_allowed_values import STYLE_PRODUCT_TYPE_MUST_BE_TEST_OR_DUMB
from .style_size_range_allowed_values import STYLE_SIZE_RANGE_ALLOWED_VALUES
from .style_size_range_creation_allowed_values import (
    STYLE_SIZE_RANGE_FOOTWEAR_OR_APPAREL_MEDIUM,
)
from .style_size_range_update_allowed_values import STYLE_SIZE_RANGE_S_M_OR_L
from .style_name_immutable_across_seasons import STYLE_NAME_IMMUTABLE_ACROSS_SEASONS
from .style_name_immutable_after_creation import STYLE_NAME_IMMUTABLE_AFTER_CREATION
from .product_season_code_immutable import PRODUCT_SEASON_CODE_IMMUTABLE
from .product_sales_color_code_allowed_values import PRODUCT_SALES_COLOR_CODE_ALLOWED_VALUES

__all__ = [
    "STYLE_GENDER_ALLOWED_VALUES",
    "STYLE_PRODUCT_TYPE_MUST_BE_TEST_OR_DUMB",
    "STYLE_SIZE_RANGE_ALLOWED_VALUES",
    "STYLE_SIZE_RANGE_FOOTWEAR_OR_APPAREL_MEDIUM",
    "STYLE_SIZE_RANGE_S_M_OR_L",
    "STYLE_NAME_IMMUTABLE_ACROSS_SEASONS",
    "STYLE_NAME_IMMUTABLE_AFTER_CREATION",
    "PRODUCT_SEASON_CODE_IMMUTABLE",
    "PRODUCT_SALES_COLOR_CODE_ALLOWED_VALUES",
]
