from types import SimpleNamespace

import pytest

from utils import secrets
from utils.plan_schema import PlannerConfig


class MissingSecrets:
    def get(self, key, default=None):
        raise FileNotFoundError("No secrets files found.")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("BAR_WEIGHT", "PLATE_STEP", "MAX_RUNGS"):
        monkeypatch.delenv(secrets.ENV_PREFIX + name, raising=False)


def test_defaults_without_overrides(monkeypatch):
    monkeypatch.setattr(secrets, "st", SimpleNamespace(secrets=MissingSecrets()))

    assert secrets.load_planner_config() == PlannerConfig()


def test_secrets_section_overrides(monkeypatch):
    monkeypatch.setattr(secrets, "st", SimpleNamespace(secrets={"lift_planner": {"bar_weight": 15}}))

    cfg = secrets.load_planner_config()
    assert cfg.bar_weight == 15.0
    assert isinstance(cfg.bar_weight, float)
    assert cfg.plate_step == 2.5


def test_env_fallback(monkeypatch):
    monkeypatch.setattr(secrets, "st", SimpleNamespace(secrets=MissingSecrets()))
    monkeypatch.setenv("LIFT_PLANNER_PLATE_STEP", "1.25")
    monkeypatch.setenv("LIFT_PLANNER_MAX_RUNGS", "50")

    cfg = secrets.load_planner_config()
    assert cfg.plate_step == 1.25
    assert cfg.max_rungs == 50


def test_secrets_win_over_env(monkeypatch):
    monkeypatch.setattr(secrets, "st", SimpleNamespace(secrets={"lift_planner": {"bar_weight": 15}}))
    monkeypatch.setenv("LIFT_PLANNER_BAR_WEIGHT", "25")

    assert secrets.load_planner_config().bar_weight == 15.0


def test_invalid_override_raises(monkeypatch):
    monkeypatch.setattr(secrets, "st", SimpleNamespace(secrets={}))
    monkeypatch.setenv("LIFT_PLANNER_MAX_RUNGS", "lots")

    with pytest.raises(ValueError, match="max_rungs"):
        secrets.load_planner_config()
