from __future__ import annotations

from ..kinds import AllowedValuesRule
from ..models import EntityType, RulePhase, Severity
from ..registry import register_rule


@register_rule
class STYLE_SIZE_RANGE_ALLOWED_VALUES(AllowedValuesRule):
    rule_name = "SizeRangeAllowedValues"
    entity = EntityType.STYLE
    field_name = "size_range"
    severity = Severity.HARD
    when = RulePhase.BOTH
    description = "A style's size_range must be 's' or 'm' on creation and on update."
    examples_valid = ("s", "m")
    examples_invalid = ("l", "xl", "", None)

    allowed_values = ("s", "m")
