from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple, Type

from .models import REQUEST_MODELS, EntityType, RuleDefinition
from .rule import Rule


class RuleRegistry:
    def __init__(self):
        self._rules: Dict[str, Type[Rule]] = {}
        self._by_field: Dict[Tuple[EntityType, str], List[Type[Rule]]] = {}

    def register(self, rule_cls: Type[Rule]) -> None:
        rule_name = getattr(rule_cls, "rule_name", None)
        if not rule_name:
            raise ValueError("Rule class missing rule_name")
        if rule_name in self._rules:
            raise ValueError(f"Duplicate rule_name registered: {rule_name}")
        entity = getattr(rule_cls, "entity", None)
        field_name = getattr(rule_cls, "field_name", None)
        if entity is None or not field_name:
            raise ValueError(f"Rule {rule_name} must declare entity and field_name")
        entity = EntityType(entity)
        declared = REQUEST_MODELS[entity].model_fields
        for attr in ("field_name", "trigger_field"):
            name = getattr(rule_cls, attr, None)
            if name is not None and name not in declared:
                raise ValueError(f"Rule {rule_name} names unknown {entity.value} field {name!r} ({attr})")
        self._rules[rule_name] = rule_cls
        self._by_field.setdefault((entity, field_name), []).append(rule_cls)

    def get(self, rule_name: str) -> Type[Rule]:
        return self._rules[rule_name]

    def names(self) -> Iterable[str]:
        return self._rules.keys()

    def for_entity(self, entity: EntityType) -> List[Type[Rule]]:
        return [cls for cls in self._rules.values() if cls.entity == entity]

    def for_field(self, entity: EntityType, field_name: str) -> List[Type[Rule]]:
        return list(self._by_field.get((EntityType(entity), field_name), []))

    def fields(self, entity: EntityType) -> List[str]:
        return [f for (e, f) in self._by_field if e == entity]

    def create_all(self, entity: Optional[EntityType] = None) -> list[Rule]:
        classes = self._rules.values() if entity is None else self.for_entity(entity)
        return [cls() for cls in classes]

    def definitions(self, entity: Optional[EntityType] = None) -> List[RuleDefinition]:
        classes = self._rules.values() if entity is None else self.for_entity(entity)
        return [cls.definition() for cls in classes]


registry = RuleRegistry()


def register_rule(rule_cls: Type[Rule]) -> Type[Rule]:
    registry.register(rule_cls)
    return rule_cls
