import pytest
from pydantic import ValidationError

from common.catalog_rules.config import EngineConfig, RuleOverride


def test_defaults():
    cfg = EngineConfig()
    assert cfg.max_workers == 1
    assert cfg.raise_on_fault is True
    assert cfg.is_enabled("AnyRule") is True


def test_rule_overrides_disable_rules():
    cfg = EngineConfig.model_validate({"rules": {"GenderAllowedValues": {"enabled": False}}})
    assert cfg.rules["GenderAllowedValues"] == RuleOverride(enabled=False)
    assert cfg.is_enabled("GenderAllowedValues") is False
    assert cfg.is_enabled("SizeRangeAllowedValues") is True


def test_max_workers_must_be_positive():
    with pytest.raises(ValidationError):
        EngineConfig(max_workers=0)


def test_from_env_reads_settings():
    cfg = EngineConfig.from_env(
        {
            "CATALOG_RULES_MAX_WORKERS": "4",
            "CATALOG_RULES_RAISE_ON_FAULT": "false",
            "CATALOG_RULES_DISABLED": "GenderAllowedValues, SizeRangeAllowedValues,",
        }
    )
    assert cfg.max_workers == 4
    assert cfg.raise_on_fault is False
    assert sorted(cfg.rules) == ["GenderAllowedValues", "SizeRangeAllowedValues"]
    assert cfg.is_enabled("GenderAllowedValues") is False


def test_from_env_empty_uses_defaults():
    assert EngineConfig.from_env({}) == EngineConfig()


@pytest.mark.parametrize(
    "name, raw",
    [("CATALOG_RULES_MAX_WORKERS", "many"), ("CATALOG_RULES_RAISE_ON_FAULT", "maybe")],
)
def test_from_env_rejects_invalid_values(name, raw):
    with pytest.raises(ValueError, match=name):
        EngineConfig.from_env({name: raw})


def test_from_env_loads_process_environment(monkeypatch):
    monkeypatch.setenv("CATALOG_RULES_MAX_WORKERS", "3")
    monkeypatch.delenv("CATALOG_RULES_DISABLED", raising=False)
    monkeypatch.delenv("CATALOG_RULES_RAISE_ON_FAULT", raising=False)
    assert EngineConfig.from_env().max_workers == 3
