from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from .errors import ContextError
from .models import (
    MASTER_MODELS,
    REQUEST_MODELS,
    EntityType,
    MasterProduct,
    MasterStyle,
    ProductRequest,
    RulePhase,
    Severity,
    StyleRequest,
)

EntityRequest = Union[StyleRequest, ProductRequest]
MasterRecord = Union[MasterStyle, MasterProduct]


@dataclass(frozen=True)
class Creation:
    """No master record exists for the entity."""

    kind = RulePhase.CREATION


@dataclass(frozen=True)
class Update:
    existing: MasterRecord

    kind = RulePhase.UPDATE


Phase = Union[Creation, Update]


@dataclass(frozen=True)
class EvaluationContext:
    current_record: EntityRequest
    phase: Phase
    severity: Severity

    @property
    def entity_type(self) -> EntityType:
        return self.current_record.entity_type

    @property
    def is_creation(self) -> bool:
        return isinstance(self.phase, Creation)

    @property
    def is_update(self) -> bool:
        return isinstance(self.phase, Update)

    @property
    def existing_record(self) -> Optional[MasterRecord]:
        if isinstance(self.phase, Update):
            return self.phase.existing
        return None

    def new_value(self, field_name: str) -> Any:
        return self.current_record.get_field(field_name)

    def old_value(self, field_name: str) -> Any:
        existing = self.existing_record
        if existing is None:
            return None
        return existing.get_field(field_name)

    def with_severity(self, severity: Severity) -> "EvaluationContext":
        return EvaluationContext(current_record=self.current_record, phase=self.phase, severity=severity)


def phase_for(existing: Optional[MasterRecord]) -> Phase:
    if existing is None:
        return Creation()
    return Update(existing=existing)


def build_context(
    current: EntityRequest,
    existing: Optional[MasterRecord] = None,
    severity: Severity = Severity.HARD,
) -> EvaluationContext:
    """Combine a change request with its optional master record.

    Raises ``ContextError`` when the records are not a request/master pair of
    the same entity type sharing one natural key.
    """
    entity = getattr(current, "entity_type", None)
    if entity not in REQUEST_MODELS or not isinstance(current, REQUEST_MODELS[entity]):
        raise ContextError(f"Unsupported current record type: {type(current).__name__}")

    if existing is not None:
        master_model = MASTER_MODELS[entity]
        if not isinstance(existing, master_model):
            raise ContextError(
                f"Master record for {entity.value} must be {master_model.__name__}, "
                f"got {type(existing).__name__}"
            )
        if existing.key != current.key:
            raise ContextError(
                f"Master record {current.natural_key} '{existing.key}' does not match "
                f"current record '{current.key}'"
            )

    return EvaluationContext(current_record=current, phase=phase_for(existing), severity=Severity(severity))
