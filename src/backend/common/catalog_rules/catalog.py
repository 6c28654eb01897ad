from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

from .models import EntityType, RuleExamples, RulePhase, Severity
from .registry import registry

# Ensure built-in rules are imported/registered when generating a catalog.
from . import rules as _builtin_rules  # noqa: F401


class RuleCatalogEntry(BaseModel):
    rule_name: str
    entity: EntityType
    field: str
    severity: Severity
    when: RulePhase
    description: str = ""
    optional: bool = False
    kind: str = ""
    examples: RuleExamples = Field(default_factory=RuleExamples)

    module: str
    class_name: str


def build_catalog(entity: Optional[EntityType] = None) -> List[RuleCatalogEntry]:
    entries: List[RuleCatalogEntry] = []
    for rule_name in registry.names():
        rule_cls = registry.get(rule_name)
        if entity is not None and rule_cls.entity != entity:
            continue
        definition = rule_cls.definition()
        entries.append(
            RuleCatalogEntry(
                **definition.model_dump(),
                module=getattr(rule_cls, "__module__", ""),
                class_name=getattr(rule_cls, "__name__", ""),
            )
        )

    entries.sort(key=lambda e: (e.entity.value, e.field, e.rule_name))
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, sort_keys=True)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    return yaml.safe_dump(catalog, sort_keys=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a rules catalog from the registry.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    parser.add_argument(
        "--entity",
        choices=[e.value for e in EntityType],
        default=None,
        help="Only include rules for this entity.",
    )
    args = parser.parse_args(argv)

    entity = EntityType(args.entity) if args.entity else None
    catalog: List[Dict[str, Any]] = [e.model_dump(mode="json") for e in build_catalog(entity)]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
