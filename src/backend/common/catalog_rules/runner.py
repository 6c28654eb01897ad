from __future__ import annotations

import logging
import uuid
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Union

from .config import EngineConfig
from .context import EntityRequest, EvaluationContext, MasterRecord, build_context
from .errors import RuleEvaluationError
from .models import AggregatedVerdict, RuleFault, RuleOutcome
from .registry import registry
from .rule import Rule

logger = logging.getLogger(__name__)

RuleResult = Union[RuleOutcome, RuleFault]


class RulesRunner:
    def __init__(self, rules: Optional[Iterable[Rule]] = None, *, config: Optional[EngineConfig] = None):
        self._config = config or EngineConfig()
        self._rules = list(rules) if rules is not None else registry.create_all()

    @property
    def config(self) -> EngineConfig:
        return self._config

    def applicable_rules(self, ctx: EvaluationContext, rule_names: Optional[set[str]] = None) -> List[Rule]:
        # Phase is not filtered here; every rule reports its own inapplicability.
        selected = []
        for rule in self._rules:
            if rule.entity != ctx.entity_type:
                continue
            if rule_names is not None and rule.rule_name not in rule_names:
                continue
            if not self._config.is_enabled(rule.rule_name):
                continue
            selected.append(rule)
        return selected

    def run(
        self,
        current: EntityRequest,
        existing: Optional[MasterRecord] = None,
        *,
        rule_names: Optional[set[str]] = None,
    ) -> AggregatedVerdict:
        base_ctx = build_context(current, existing)
        rules = self.applicable_rules(base_ctx, rule_names)
        logger.debug(
            "Evaluating %d rule(s) for %s %s (%s)",
            len(rules),
            base_ctx.entity_type.value,
            current.key,
            base_ctx.phase.kind.value,
        )

        results = self._execute(rules, base_ctx)

        outcomes: Dict[str, List[RuleOutcome]] = {}
        faults: List[RuleFault] = []
        for rule, result in zip(rules, results):
            if isinstance(result, RuleFault):
                faults.append(result)
            else:
                outcomes.setdefault(rule.field_name, []).append(result)

        accepted = not any(o.blocking for field_outcomes in outcomes.values() for o in field_outcomes)
        verdict = AggregatedVerdict(
            run_id=str(uuid.uuid4()),
            generated_at=datetime.now(timezone.utc),
            entity=base_ctx.entity_type,
            phase=base_ctx.phase.kind,
            entity_key=current.key,
            accepted=accepted,
            outcomes=outcomes,
            faults=faults,
        )

        if not accepted:
            logger.info(
                "%s %s rejected by %s",
                verdict.entity.value,
                verdict.entity_key,
                ", ".join(o.rule_name for o in verdict.errors),
            )
        if faults:
            names = ", ".join(f.rule_name for f in faults)
            logger.error("%d rule(s) faulted for %s %s: %s", len(faults), verdict.entity.value, verdict.entity_key, names)
            if self._config.raise_on_fault:
                raise RuleEvaluationError(f"Rule evaluation faulted: {names}", faults=faults, verdict=verdict)
        return verdict

    def _execute(self, rules: List[Rule], base_ctx: EvaluationContext) -> List[RuleResult]:
        if self._config.max_workers <= 1 or len(rules) <= 1:
            return [self._evaluate_one(rule, base_ctx) for rule in rules]
        with ThreadPoolExecutor(max_workers=self._config.max_workers) as pool:
            # map() yields in submission order whatever the completion order.
            return list(pool.map(lambda rule: self._evaluate_one(rule, base_ctx), rules))

    def _evaluate_one(self, rule: Rule, base_ctx: EvaluationContext) -> RuleResult:
        ctx = base_ctx.with_severity(rule.severity)
        try:
            outcome = rule.evaluate(ctx)
        except Exception as exc:
            logger.exception("Rule %s raised while evaluating %s", rule.rule_name, base_ctx.current_record.key)
            return RuleFault(
                rule_name=rule.rule_name,
                field_name=rule.field_name,
                entity=rule.entity,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
        if not isinstance(outcome, RuleOutcome):
            logger.error("Rule %s returned %s instead of RuleOutcome", rule.rule_name, type(outcome).__name__)
            return RuleFault(
                rule_name=rule.rule_name,
                field_name=rule.field_name,
                entity=rule.entity,
                error_type="TypeError",
                error_message=f"evaluate() returned {type(outcome).__name__}",
            )
        return outcome


def validate_mutation(
    current: EntityRequest,
    existing: Optional[MasterRecord] = None,
    *,
    config: Optional[EngineConfig] = None,
) -> AggregatedVerdict:
    return RulesRunner(config=config).run(current, existing)
