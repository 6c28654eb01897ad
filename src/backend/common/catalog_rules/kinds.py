"""Generic rule kinds.

Concrete rules subclass one of these and only declare configuration: the
field they govern, the phase they apply to, allowed values, comparison mode
and message wording. The branch logic lives here once.

Message templates are rendered with ``str.format``. Available placeholders:

- every kind: ``field``, ``key`` (natural key of the current record),
  ``value`` / ``new`` (current value), ``old`` (master value);
- ``AllowedValuesRule``: ``allowed_quoted`` (``'a', 'b'``) and
  ``allowed_csv`` (``a, b``), both in declared order;
- ``ConditionalImmutabilityRule``: ``trigger``, ``old_trigger``,
  ``new_trigger``.

Missing values render as ``null`` (explicitly None) or ``undefined`` (never set).
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Any, Dict, Tuple

from .context import EvaluationContext
from .models import Comparison, RuleOutcome, RulePhase
from .rule import Rule


def _display(value: Any) -> str:
    return "null" if value is None else str(value)


class FieldRule(Rule):
    """Phase guard and optional-field handling shared by every kind."""

    creation_skip_reason: str = "Rule applies only to updates, skipping for creation."
    update_skip_reason: str = "Rule applies only to creation, skipping for update."
    optional_reason: str = ""

    def evaluate(self, ctx: EvaluationContext) -> RuleOutcome:
        if self.when == RulePhase.UPDATE and ctx.is_creation:
            return self.skip(ctx, self.creation_skip_reason)
        if self.when == RulePhase.CREATION and ctx.is_update:
            return self.skip(ctx, self.update_skip_reason)
        if self.optional and ctx.new_value(self.field_name) is None:
            return self.skip(
                ctx, self.optional_reason or f"{self.field_name} is optional and not provided."
            )
        return self.check(ctx)

    @abstractmethod
    def check(self, ctx: EvaluationContext) -> RuleOutcome:  # pragma: no cover
        raise NotImplementedError

    def skip(self, ctx: EvaluationContext, reason: str) -> RuleOutcome:
        return self.outcome(ctx, valid=True, context={"reason": reason, **self.base_context(ctx)})

    def base_context(self, ctx: EvaluationContext) -> Dict[str, Any]:
        return ctx.current_record.key_context()

    def template_values(self, ctx: EvaluationContext) -> Dict[str, Any]:
        current = ctx.current_record.display_value(self.field_name)
        return {
            "field": self.field_name,
            "key": ctx.current_record.key,
            "value": current,
            "new": current,
            "old": _display(ctx.old_value(self.field_name)),
        }


class AllowedValuesRule(FieldRule):
    kind = "allowed_values"

    allowed_values: Tuple[str, ...] = ()
    comparison: Comparison = Comparison.EXACT

    message_template: str = (
        "The '{field}' value '{value}' is not allowed. It must be one of {allowed_quoted}."
    )
    valid_reason: str = "Value is one of the allowed values."
    invalid_reason: str = "Value is not one of the allowed values."

    def check(self, ctx: EvaluationContext) -> RuleOutcome:
        raw = ctx.new_value(self.field_name)
        normalized = self.comparison.normalize(raw)
        allowed = [self.comparison.normalize(v) for v in self.allowed_values]

        context: Dict[str, Any] = {
            **self.base_context(ctx),
            "allowed_values": list(self.allowed_values),
            "provided_value": raw,
        }
        if raw is None or normalized not in allowed:
            context["reason"] = self.invalid_reason
            values = self.template_values(ctx)
            values["allowed_quoted"] = ", ".join(f"'{v}'" for v in self.allowed_values)
            values["allowed_csv"] = ", ".join(self.allowed_values)
            return self.outcome(
                ctx, valid=False, context=context, message=self.message_template.format(**values)
            )

        context["reason"] = self.valid_reason
        return self.outcome(ctx, valid=True, context=context)


class ImmutableFieldRule(FieldRule):
    """Once a master record exists the field must keep its value."""

    kind = "immutable"
    when = RulePhase.UPDATE

    comparison: Comparison = Comparison.EXACT
    creation_skip_reason: str = "New record creation - field is being set for the first time."

    message_template: str = "The '{field}' value cannot be changed. Previous: '{old}', Current: '{new}'."
    unchanged_reason: str = "Value remains unchanged."
    changed_reason: str = "Value changed on an existing record."

    def check(self, ctx: EvaluationContext) -> RuleOutcome:
        old = ctx.old_value(self.field_name)
        new = ctx.new_value(self.field_name)
        context: Dict[str, Any] = {
            **self.base_context(ctx),
            f"previous_{self.field_name}": old,
            f"current_{self.field_name}": new,
            "comparison": self.comparison.value,
        }
        if self.comparison.normalize(old) != self.comparison.normalize(new):
            context["reason"] = self.changed_reason
            return self.outcome(
                ctx,
                valid=False,
                context=context,
                message=self.message_template.format(**self.template_values(ctx)),
            )

        context["reason"] = self.unchanged_reason
        return self.outcome(ctx, valid=True, context=context)


class ConditionalImmutabilityRule(FieldRule):
    """The governed field may not change in the same mutation as ``trigger_field``.

    Decision table over (field changed, trigger changed); only the
    both-changed cell is invalid.
    """

    kind = "conditional_immutable"
    when = RulePhase.UPDATE

    trigger_field: str
    comparison: Comparison = Comparison.EXACT

    message_template: str = (
        "'{field}' cannot change while '{trigger}' changes. "
        "Previous: '{old}' ({old_trigger}), Current: '{new}' ({new_trigger})"
    )
    neither_changed_reason: str = "Neither field changed."
    trigger_changed_reason: str = "Value unchanged."
    field_changed_reason: str = "Trigger unchanged - change allowed."
    both_changed_reason: str = (
        "'{field}' changed from '{old}' to '{new}' while '{trigger}' changed "
        "from '{old_trigger}' to '{new_trigger}'."
    )

    def check(self, ctx: EvaluationContext) -> RuleOutcome:
        norm = self.comparison.normalize
        field_changed = norm(ctx.old_value(self.field_name)) != norm(ctx.new_value(self.field_name))
        trigger_changed = norm(ctx.old_value(self.trigger_field)) != norm(
            ctx.new_value(self.trigger_field)
        )

        context: Dict[str, Any] = {
            **self.base_context(ctx),
            f"previous_{self.trigger_field}": ctx.old_value(self.trigger_field),
            f"current_{self.trigger_field}": ctx.new_value(self.trigger_field),
        }

        if field_changed and trigger_changed:
            values = self.template_values(ctx)
            values["trigger"] = self.trigger_field
            values["old_trigger"] = _display(ctx.old_value(self.trigger_field))
            values["new_trigger"] = ctx.current_record.display_value(self.trigger_field)
            context["quadrant"] = "both_changed"
            context["reason"] = self.both_changed_reason.format(**values)
            return self.outcome(
                ctx, valid=False, context=context, message=self.message_template.format(**values)
            )

        if field_changed:
            context["quadrant"] = "field_changed"
            context["reason"] = self.field_changed_reason
        elif trigger_changed:
            context["quadrant"] = "trigger_changed"
            context["reason"] = self.trigger_changed_reason
        else:
            context["quadrant"] = "neither_changed"
            context["reason"] = self.neither_changed_reason
        return self.outcome(ctx, valid=True, context=context)
