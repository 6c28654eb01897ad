from __future__ import annotations

from ..kinds import AllowedValuesRule
from ..models import EntityType, RulePhase, Severity
from ..registry import register_rule


@register_rule
class STYLE_SIZE_RANGE_S_M_OR_L(AllowedValuesRule):
    rule_name = "SizeRangeSMorLAllowedValues"
    entity = EntityType.STYLE
    field_name = "size_range"
    severity = Severity.HARD
    when = RulePhase.UPDATE
    description = "Updated styles must use size_range 'S', 'M' or 'L'."
    examples_valid = ("S", "M", "L")
    examples_invalid = ("XL", "s")

    allowed_values = ("S", "M", "L")
    creation_skip_reason = "Rule applies only to style updates, skipping for new creation."
    message_template = (
        "The 'size_range' value '{value}' is not allowed during update. It must be one of: {allowed_csv}."
    )
