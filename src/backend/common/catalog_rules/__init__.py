"""Rules engine for product-catalog change validation.

This package intentionally contains only domain logic:
- Rule inputs are a Style/Product change request plus the optional master record.
- Master-record retrieval, transport and PR generation live outside this package.
"""

from .config import EngineConfig, RuleOverride
from .context import Creation, EvaluationContext, Update, build_context
from .errors import CatalogRulesError, ContextError, RuleEvaluationError
from .models import (
    AggregatedVerdict,
    Comparison,
    EntityType,
    MasterProduct,
    MasterStyle,
    ProductRequest,
    RuleDefinition,
    RuleFault,
    RuleOutcome,
    RulePhase,
    Severity,
    StyleRequest,
)
from .registry import registry, register_rule
from .runner import RulesRunner, validate_mutation

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
