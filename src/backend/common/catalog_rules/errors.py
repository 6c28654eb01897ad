"""Engineering-level errors raised by the catalog rules engine.

Validation failures are never raised; they are returned as
``RuleOutcome(valid=False)``. The classes here signal that the input to the
engine was malformed or that a rule implementation itself is broken.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .models import AggregatedVerdict, RuleFault


class CatalogRulesError(Exception):
    """Base class for catalog rules engine errors."""


class ContextError(CatalogRulesError, ValueError):
    """Raised when an evaluation context cannot be built from the given records."""


class RuleEvaluationError(CatalogRulesError):
    """Raised after a run in which one or more rules raised instead of returning an outcome."""

    def __init__(self, message: str, faults: List[RuleFault], verdict: AggregatedVerdict):
        super().__init__(message)
        self.faults = faults
        self.verdict = verdict


__all__ = [
    "CatalogRulesError",
    "ContextError",
    "RuleEvaluationError",
]
