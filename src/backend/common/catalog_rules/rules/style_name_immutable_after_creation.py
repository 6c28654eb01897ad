from __future__ import annotations

from ..kinds import ImmutableFieldRule
from ..models import Comparison, EntityType, RulePhase, Severity
from ..registry import register_rule


@register_rule
class STYLE_NAME_IMMUTABLE_AFTER_CREATION(ImmutableFieldRule):
    rule_name = "StyleNameImmutableAfterCreation"
    entity = EntityType.STYLE
    field_name = "name"
    severity = Severity.HARD
    when = RulePhase.UPDATE
    description = (
        "A style's name is fixed once the style exists. Surrounding whitespace is ignored."
    )
    examples_valid = ({"previous": "Trail Runner", "current": " Trail Runner "},)
    examples_invalid = ({"previous": "Trail Runner", "current": "Trail Runner 2"},)

    comparison = Comparison.TRIMMED
    creation_skip_reason = "New style creation - name is being set for the first time."
    unchanged_reason = "Style name remains unchanged (or only whitespace adjusted)."
    changed_reason = "Style name changed on an existing style."
    message_template = 'Style name cannot be changed after creation. Previous: "{old}", Current: "{new}".'
