from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence

from .context import EvaluationContext
from .models import (
    EntityType,
    RuleDefinition,
    RuleExamples,
    RuleOutcome,
    RulePhase,
    Severity,
)


class Rule(ABC):
    rule_name: str
    entity: EntityType
    field_name: str
    severity: Severity = Severity.HARD
    when: RulePhase = RulePhase.BOTH
    description: str = ""
    optional: bool = False
    examples_valid: Sequence[Any] = ()
    examples_invalid: Sequence[Any] = ()

    kind: str = ""

    def __init__(self):
        if not getattr(self, "rule_name", None):
            raise ValueError("Rule must define rule_name")
        if not getattr(self, "field_name", None):
            raise ValueError(f"Rule {self.rule_name} must define field_name")

    @abstractmethod
    def evaluate(self, ctx: EvaluationContext) -> RuleOutcome:  # pragma: no cover
        raise NotImplementedError

    def outcome(
        self,
        ctx: EvaluationContext,
        *,
        valid: bool,
        context: Dict[str, Any],
        message: Optional[str] = None,
    ) -> RuleOutcome:
        return RuleOutcome(
            rule_name=self.rule_name,
            field_name=self.field_name,
            valid=valid,
            severity=ctx.severity,
            message=None if valid else message,
            old_value=ctx.old_value(self.field_name),
            new_value=ctx.new_value(self.field_name),
            context=context,
        )

    @classmethod
    def definition(cls) -> RuleDefinition:
        return RuleDefinition(
            rule_name=cls.rule_name,
            entity=cls.entity,
            field=cls.field_name,
            severity=cls.severity,
            when=cls.when,
            description=cls.description,
            optional=cls.optional,
            kind=cls.kind,
            examples=RuleExamples(valid=list(cls.examples_valid), invalid=list(cls.examples_invalid)),
        )
