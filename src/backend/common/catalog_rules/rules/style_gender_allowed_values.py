from __future__ import annotations

from ..kinds import AllowedValuesRule
from ..models import EntityType, RulePhase, Severity
from ..registry import register_rule


@register_rule
class STYLE_GENDER_ALLOWED_VALUES(AllowedValuesRule):
    rule_name = "GenderAllowedValues"
    entity = EntityType.STYLE
    field_name = "gender"
    severity = Severity.HARD
    when = RulePhase.UPDATE
    description = (
        "Restricts a style's gender to 'M' (Male) or 'W' (Female) whenever an existing style is updated."
    )
    examples_valid = ("M", "W")
    examples_invalid = ("U", "X")

    allowed_values = ("M", "W")
    creation_skip_reason = "New style creation - rule applies only to updates"
    message_template = "The 'gender' field value '{value}' is not allowed. It must be either 'M' or 'W'."
