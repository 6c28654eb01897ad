from __future__ import annotations

import os
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class RuleOverride(BaseModel):
    enabled: bool = True


class EngineConfig(BaseModel):
    """Runtime configuration for ``RulesRunner``.

    Rule severity and phase are fixed by each rule's registration and cannot
    be overridden here; configuration only selects which rules run and how.
    """

    # Rules run on a thread pool when greater than 1.
    max_workers: int = 1
    # Raise RuleEvaluationError after a run in which any rule raised.
    raise_on_fault: bool = True
    rules: Dict[str, RuleOverride] = Field(default_factory=dict)

    @field_validator("max_workers")
    @classmethod
    def _positive_workers(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_workers must be >= 1")
        return value

    def is_enabled(self, rule_name: str) -> bool:
        override = self.rules.get(rule_name)
        return override is None or override.enabled

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "EngineConfig":
        """
        Load engine configuration from environment variables (and a `.env` file).

        Reads:
          CATALOG_RULES_MAX_WORKERS, CATALOG_RULES_RAISE_ON_FAULT,
          CATALOG_RULES_DISABLED (comma-separated rule names)
        """
        if environ is None:
            load_dotenv()
            environ = dict(os.environ)

        disabled = [
            name.strip()
            for name in environ.get("CATALOG_RULES_DISABLED", "").split(",")
            if name.strip()
        ]
        return cls(
            max_workers=_int_env(environ, "CATALOG_RULES_MAX_WORKERS", 1),
            raise_on_fault=_bool_env(environ, "CATALOG_RULES_RAISE_ON_FAULT", True),
            rules={name: RuleOverride(enabled=False) for name in disabled},
        )


def _int_env(environ: Dict[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _bool_env(environ: Dict[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
