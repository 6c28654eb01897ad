from __future__ import annotations

from ..kinds import ConditionalImmutabilityRule
from ..models import EntityType, RulePhase, Severity
from ..registry import register_rule


@register_rule
class STYLE_NAME_IMMUTABLE_ACROSS_SEASONS(ConditionalImmutabilityRule):
    rule_name = "StyleNameImmutableAcrossSeasons"
    entity = EntityType.STYLE
    field_name = "name"
    severity = Severity.SOFT
    when = RulePhase.UPDATE
    description = (
        "A style carried into a new season keeps the name it had in the previous season. "
        "Renames within the same season are allowed."
    )
    examples_valid = (
        {"previous": ["Summer Dress", "SS24"], "current": ["Summer Dress", "SS25"]},
        {"previous": ["Summer Dress", "SS24"], "current": ["Updated Summer Dress", "SS24"]},
    )
    examples_invalid = (
        {"previous": ["Summer Dress", "SS24"], "current": ["New Summer Dress", "SS25"]},
    )

    trigger_field = "season_code"
    creation_skip_reason = "New style creation - no historical comparison needed"
    neither_changed_reason = "Name and season unchanged"
    trigger_changed_reason = "Name unchanged"
    field_changed_reason = "Same season update - name change allowed"
    both_changed_reason = (
        'Name changed from "{old}" to "{new}" while season changed from {old_trigger} to {new_trigger}'
    )
    message_template = (
        'Style name cannot change between seasons. '
        'Previous: "{old}" ({old_trigger}), Current: "{new}" ({new_trigger})'
    )
