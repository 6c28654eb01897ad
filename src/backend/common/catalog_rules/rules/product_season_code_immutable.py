from __future__ import annotations

from ..kinds import ImmutableFieldRule
from ..models import EntityType, RulePhase, Severity
from ..registry import register_rule


@register_rule
class PRODUCT_SEASON_CODE_IMMUTABLE(ImmutableFieldRule):
    rule_name = "ProductSeasonCodeImmutable"
    entity = EntityType.PRODUCT
    field_name = "season_code"
    severity = Severity.HARD
    when = RulePhase.UPDATE
    description = (
        "A product's season_code cannot change once the product exists; products are planned and "
        "sold against a single season."
    )
    examples_valid = ({"previous": "FW24", "current": "FW24"},)
    examples_invalid = ({"previous": "FW24", "current": "SS25"},)

    creation_skip_reason = "New product creation - season_code is being set for the first time."
    unchanged_reason = "Season code remains unchanged."
    changed_reason = "Season code changed on an existing product."
    message_template = (
        "The 'season_code' for product '{key}' cannot be changed. "
        "It was originally '{old}' and is attempted to be changed to '{new}'."
    )
