from __future__ import annotations

from ..kinds import AllowedValuesRule
from ..models import EntityType, RulePhase, Severity
from ..registry import register_rule


@register_rule
class STYLE_PRODUCT_TYPE_MUST_BE_TEST_OR_DUMB(AllowedValuesRule):
    rule_name = "ProductTypeMustBeTestOrDumb"
    entity = EntityType.STYLE
    field_name = "product_type"
    severity = Severity.HARD
    when = RulePhase.BOTH
    optional = True
    description = "When provided, a style's product_type must be 'test' or 'dumb'."
    examples_valid = ("test", "dumb", None)
    examples_invalid = ("footwear",)

    allowed_values = ("test", "dumb")
    optional_reason = "product_type is optional and not provided."
    valid_reason = "product_type is valid."
    message_template = "Product type must be one of {allowed_quoted}. Current value: '{value}'."
