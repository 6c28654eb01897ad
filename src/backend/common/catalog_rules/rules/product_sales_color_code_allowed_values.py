from __future__ import annotations

from ..kinds import AllowedValuesRule
from ..models import Comparison, EntityType, RulePhase, Severity
from ..registry import register_rule


@register_rule
class PRODUCT_SALES_COLOR_CODE_ALLOWED_VALUES(AllowedValuesRule):
    rule_name = "SalesColorCodeAllowedValues"
    entity = EntityType.PRODUCT
    field_name = "sales_color_code"
    severity = Severity.SOFT
    when = RulePhase.BOTH
    description = "A product's sales_color_code should be 'black' or 'red' (case-insensitive)."
    examples_valid = ("black", "red", "RED")
    examples_invalid = ("blue", "green")

    allowed_values = ("black", "red")
    comparison = Comparison.CASEFOLD
    message_template = "Sales color code '{value}' is not allowed. It must be one of: {allowed_csv}."
