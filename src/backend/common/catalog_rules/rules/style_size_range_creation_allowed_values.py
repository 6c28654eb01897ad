from __future__ import annotations

from ..kinds import AllowedValuesRule
from ..models import EntityType, RulePhase, Severity
from ..registry import register_rule


@register_rule
class STYLE_SIZE_RANGE_FOOTWEAR_OR_APPAREL_MEDIUM(AllowedValuesRule):
    rule_name = "SizeRangeFootwearOrApparelMediumAllowedValues"
    entity = EntityType.STYLE
    field_name = "size_range"
    severity = Severity.HARD
    when = RulePhase.CREATION
    description = (
        "New styles must use size_range 'FTW-W' (Footwear Women's) or 'APP-M' (Apparel Men's)."
    )
    examples_valid = ("FTW-W", "APP-M")
    examples_invalid = ("S", "FTW-M")

    allowed_values = ("FTW-W", "APP-M")
    update_skip_reason = "Rule applies only to new style creation, skipping for update."
    message_template = (
        "The 'size_range' value '{value}' is not allowed during creation. It must be one of: {allowed_csv}."
    )
