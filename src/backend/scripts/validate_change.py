from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from common.catalog_rules import EngineConfig, RuleEvaluationError, RulesRunner
from common.catalog_rules.models import (
    MASTER_MODELS,
    REQUEST_MODELS,
    AggregatedVerdict,
    EntityType,
)

EXIT_ACCEPTED = 0
EXIT_REJECTED = 1
EXIT_FAULT = 2


@dataclass(frozen=True)
class ChangeInputs:
    entity: EntityType
    current: object
    existing: Optional[object] = None


def _load_json(path: Path):
    with path.open() as handle:
        return json.load(handle)


def load_change_inputs(entity: EntityType, request_path: Path, master_path: Path | None = None) -> ChangeInputs:
    current = REQUEST_MODELS[entity].model_validate(_load_json(request_path))
    existing = None
    if master_path is not None:
        existing = MASTER_MODELS[entity].model_validate(_load_json(master_path))
    return ChangeInputs(entity=entity, current=current, existing=existing)


def render_markdown(verdict: AggregatedVerdict) -> str:
    lines = [
        f"# {verdict.entity.value} {verdict.entity_key} ({verdict.phase.value})",
        "",
        f"Generated at: {verdict.generated_at.isoformat()}",
        f"Accepted: {'yes' if verdict.accepted else 'no'}",
        "",
        "## Totals",
    ]
    for key, count in verdict.totals.items():
        lines.append(f"- {key}: {count}")
    for field_name, outcomes in verdict.outcomes.items():
        lines.append("")
        lines.append(f"## {field_name}")
        for outcome in outcomes:
            status = "PASS" if outcome.valid else f"FAIL ({outcome.severity.value})"
            lines.append(f"- {outcome.rule_name}: {status}")
            if outcome.message:
                lines.append(f"  - Message: {outcome.message}")
            lines.append(f"  - Values: {outcome.old_value!r} -> {outcome.new_value!r}")
            reason = outcome.context.get("reason")
            if reason:
                lines.append(f"  - Reason: {reason}")
    if verdict.faults:
        lines.append("")
        lines.append("## Faults")
        for fault in verdict.faults:
            lines.append(f"- {fault.rule_name} ({fault.field_name}): {fault.error_type}: {fault.error_message}")
    return "\n".join(lines)


def _render(verdict: AggregatedVerdict, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(verdict.model_dump(mode="json"), indent=2)
    return render_markdown(verdict)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Validate a Style/Product change request against the registered catalog rules."
    )
    parser.add_argument(
        "--entity",
        choices=[e.value for e in EntityType],
        required=True,
        help="Entity type of the change request.",
    )
    parser.add_argument("--request", required=True, help="Path to the change request JSON.")
    parser.add_argument(
        "--master",
        default=None,
        help="Path to the master record JSON. Omit for a creation.",
    )
    parser.add_argument(
        "--format",
        choices=("markdown", "json"),
        default="markdown",
        help="Output format (default: markdown).",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    inputs = load_change_inputs(
        EntityType(args.entity),
        Path(args.request),
        Path(args.master) if args.master else None,
    )
    runner = RulesRunner(config=EngineConfig.from_env())
    try:
        verdict = runner.run(inputs.current, inputs.existing)
    except RuleEvaluationError as exc:
        print(_render(exc.verdict, args.format))
        print(str(exc), file=sys.stderr)
        return EXIT_FAULT

    print(_render(verdict, args.format))
    if verdict.faults:
        return EXIT_FAULT
    return EXIT_ACCEPTED if verdict.accepted else EXIT_REJECTED


if __name__ == "__main__":
    raise SystemExit(main())
