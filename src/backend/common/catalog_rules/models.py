from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    HARD = "HARD"
    SOFT = "SOFT"


class EntityType(str, Enum):
    STYLE = "Style"
    PRODUCT = "Product"


class RulePhase(str, Enum):
    CREATION = "Creation"
    UPDATE = "Update"
    BOTH = "Both"


class Comparison(str, Enum):
    EXACT = "EXACT"
    TRIMMED = "TRIMMED"
    CASEFOLD = "CASEFOLD"

    def normalize(self, value: Any) -> Any:
        if self is Comparison.TRIMMED:
            # Missing and blank compare equal once trimmed.
            return str(value).strip() if value is not None else ""
        if self is Comparison.CASEFOLD:
            return str(value).lower() if value is not None else None
        return value


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)

    entity_type: ClassVar[EntityType]
    natural_key: ClassVar[str]

    @property
    def key(self) -> str:
        return getattr(self, self.natural_key)

    def get_field(self, name: str) -> Any:
        if name in type(self).model_fields:
            return getattr(self, name)
        return None

    def display_value(self, name: str) -> str:
        """Render a field for messages; missing values read as 'null' or 'undefined'."""
        value = self.get_field(name)
        if value is not None:
            return str(value)
        if name in type(self).model_fields and name in self.model_fields_set:
            return "null"
        return "undefined"

    def key_context(self) -> Dict[str, Any]:
        return {"style_code": getattr(self, "style_code", None)}


class StyleRequest(_Record):
    entity_type: ClassVar[EntityType] = EntityType.STYLE
    natural_key: ClassVar[str] = "style_code"

    style_code: str
    name: Optional[str] = None
    category: Optional[str] = None
    gender: Optional[str] = None
    size_range: Optional[str] = None
    vertical: Optional[str] = None
    season_code: Optional[str] = None
    origin_country: Optional[str] = None
    product_type: Optional[str] = None


class ProductRequest(_Record):
    entity_type: ClassVar[EntityType] = EntityType.PRODUCT
    natural_key: ClassVar[str] = "code"

    code: str
    style_code: Optional[str] = None
    sales_color_code: Optional[str] = None
    sales_color_name: Optional[str] = None
    sales_availability: Optional[str] = None
    season_code: Optional[str] = None
    drop_out_date: Optional[str] = None
    original_launch_date: Optional[str] = None

    def key_context(self) -> Dict[str, Any]:
        return {"product_code": self.code, "style_code": self.style_code}


class _MasterRecord(_Record):
    status: str = ""
    data: Dict[str, Any] = Field(default_factory=dict)

    def get_field(self, name: str) -> Any:
        # Fields the master schema does not declare live in the extension mapping.
        if name in type(self).model_fields:
            return getattr(self, name)
        return self.data.get(name)


class MasterStyle(_MasterRecord):
    entity_type: ClassVar[EntityType] = EntityType.STYLE
    natural_key: ClassVar[str] = "style_code"

    style_code: str
    name: Optional[str] = None
    category: Optional[str] = None
    gender: Optional[str] = None
    size_range: Optional[str] = None
    vertical: Optional[str] = None
    season_code: Optional[str] = None


class MasterProduct(_MasterRecord):
    entity_type: ClassVar[EntityType] = EntityType.PRODUCT
    natural_key: ClassVar[str] = "code"

    code: str
    style_code: Optional[str] = None
    sales_color_code: Optional[str] = None
    sales_color_name: Optional[str] = None
    sales_availability: Optional[str] = None
    season_code: Optional[str] = None

    def key_context(self) -> Dict[str, Any]:
        return {"product_code": self.code, "style_code": self.style_code}


REQUEST_MODELS: Dict[EntityType, type] = {
    EntityType.STYLE: StyleRequest,
    EntityType.PRODUCT: ProductRequest,
}

MASTER_MODELS: Dict[EntityType, type] = {
    EntityType.STYLE: MasterStyle,
    EntityType.PRODUCT: MasterProduct,
}


class RuleOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    rule_name: str
    field_name: str
    valid: bool
    severity: Severity
    message: Optional[str] = None
    old_value: Optional[Any] = None
    new_value: Optional[Any] = None
    context: Dict[str, Any] = Field(default_factory=dict)

    @property
    def blocking(self) -> bool:
        return not self.valid and self.severity == Severity.HARD


class RuleFault(BaseModel):
    """A rule raised instead of producing an outcome."""

    model_config = ConfigDict(frozen=True)

    rule_name: str
    field_name: str
    entity: EntityType
    error_type: str
    error_message: str


class AggregatedVerdict(BaseModel):
    """Result of one run. `accepted` covers outcomes only; a run with `faults`
    is incomplete and must not be treated as accepted.
    """

    run_id: str
    generated_at: datetime
    entity: EntityType
    phase: RulePhase
    entity_key: str

    accepted: bool
    outcomes: Dict[str, List[RuleOutcome]] = Field(default_factory=dict)
    faults: List[RuleFault] = Field(default_factory=list)

    def all_outcomes(self) -> List[RuleOutcome]:
        return [o for field_outcomes in self.outcomes.values() for o in field_outcomes]

    def outcome(self, rule_name: str) -> Optional[RuleOutcome]:
        for o in self.all_outcomes():
            if o.rule_name == rule_name:
                return o
        return None

    @property
    def errors(self) -> List[RuleOutcome]:
        return [o for o in self.all_outcomes() if o.blocking]

    @property
    def warnings(self) -> List[RuleOutcome]:
        return [o for o in self.all_outcomes() if not o.valid and o.severity == Severity.SOFT]

    @property
    def totals(self) -> Dict[str, int]:
        return {
            "rules": len(self.all_outcomes()),
            "valid": sum(1 for o in self.all_outcomes() if o.valid),
            "errors": len(self.errors),
            "warnings": len(self.warnings),
            "faults": len(self.faults),
        }


class RuleExamples(BaseModel):
    valid: List[Any] = Field(default_factory=list)
    invalid: List[Any] = Field(default_factory=list)


class RuleDefinition(BaseModel):
    """Registration metadata for one rule; the unit consumed by documentation tooling."""

    rule_name: str
    entity: EntityType
    field: str
    severity: Severity
    when: RulePhase
    description: str = ""
    optional: bool = False
    kind: str = ""
    examples: RuleExamples = Field(default_factory=RuleExamples)
