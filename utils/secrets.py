import os
from dataclasses import fields

import streamlit as st

from .plan_schema import PlannerConfig

SECTION = "lift_planner"
ENV_PREFIX = "LIFT_PLANNER_"


def get_secret(key: str):
    """
    Look up `key` in the [lift_planner] secrets section, then in the
    LIFT_PLANNER_<KEY> environment variable.
    """
    try:
        section = st.secrets.get(SECTION, {})
        if key in section:
            return section[key]
    except Exception:
        # no secrets.toml configured
        pass
    return os.getenv(ENV_PREFIX + key.upper())


def load_planner_config() -> PlannerConfig:
    """PlannerConfig with any scalar field overridden from secrets/env."""
    cfg = PlannerConfig()
    for f in fields(cfg):
        if f.name == "ramp_scheme":
            continue
        raw = get_secret(f.name)
        if raw is None:
            continue
        current = getattr(cfg, f.name)
        try:
            setattr(cfg, f.name, type(current)(raw))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid value for {f.name}: {raw!r}") from exc
    return cfg
