# utils/inputs.py
import math
from dataclasses import dataclass
from typing import Any

import pandas as pd

from analytics.planners import fixed_drop_plan, ladder_plan, percent_ramp_plan
from data_model import Plan
from .plan_schema import DEFAULT_REP_SCHEME, PlannerConfig

BODYWEIGHT_INPUT_MODES = {
    "total": "Total (BW ± load)",
    "external": "External only (+/− kg)",
}


def parse_number(raw: Any) -> float | None:
    """Form text -> float. Blank, unparsable and non-finite input all come back as None."""
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    val = pd.to_numeric(raw, errors="coerce")
    if pd.isna(val):
        return None
    val = float(val)
    return val if math.isfinite(val) else None


def parse_int(raw: Any, default: int) -> int:
    val = parse_number(raw)
    if val is None:
        return default
    return int(val)


def parse_rep_scheme(raw: Any, default=DEFAULT_REP_SCHEME) -> list[int]:
    """
    "3,5,7,9" -> [3, 5, 7, 9]. Entries that don't parse or aren't positive are dropped.
    """
    if raw is None or not str(raw).strip():
        return list(default)
    out = []
    for part in str(raw).split(","):
        val = parse_number(part)
        if val is None:
            continue
        reps = int(val)
        if reps > 0:
            out.append(reps)
    return out


def resolve_daily_max(raw: Any, bodyweight: float, external_input: bool = False) -> float | None:
    """
    Daily max as total system weight. External input is added to bodyweight;
    a negative external load means assistance.
    """
    val = parse_number(raw)
    if val is None:
        return None
    return bodyweight + val if external_input else val


@dataclass
class LiftForm:
    """Raw form values for one lift card, exactly as typed."""

    name: str
    include: bool = True
    mode: str = "Ladder"
    daily_max: str = ""
    increment: str = ""
    start_rep_cap: str = "12"
    drop: str = "10"
    drop_sets: str = "4"
    rep_scheme: str = "3,5,7,9"
    bodyweight_relative: bool = False
    input_mode: str = "total"


def build_plan(form: LiftForm, bodyweight_raw: Any = None, cfg: PlannerConfig | None = None) -> Plan | None:
    """
    Parse a lift form and run the matching planner.

    Returns None while there is nothing to plan yet: lift excluded, daily max
    not parseable, or no increment.
    """
    cfg = cfg or PlannerConfig()
    if not form.include:
        return None

    bodyweight = parse_number(bodyweight_raw) or cfg.default_bodyweight
    daily_max = resolve_daily_max(
        form.daily_max,
        bodyweight,
        external_input=form.bodyweight_relative and form.input_mode == "external",
    )
    if daily_max is None:
        return None

    increment = parse_number(form.increment)
    if not increment:
        return None

    if form.mode == "Ladder":
        return ladder_plan(
            daily_max=daily_max,
            increment=increment,
            start_rep_cap=parse_int(form.start_rep_cap, cfg.default_start_rep_cap),
            is_bodyweight_relative=form.bodyweight_relative,
            bodyweight=bodyweight,
            cfg=cfg,
        )
    if form.mode == "RP %":
        return percent_ramp_plan(daily_max=daily_max, cfg=cfg)
    if form.mode == "RP Drop":
        drop = parse_number(form.drop)
        return fixed_drop_plan(
            daily_max=daily_max,
            drop=cfg.default_drop if drop is None else drop,
            sets=parse_int(form.drop_sets, cfg.default_drop_sets),
            rep_scheme=parse_rep_scheme(form.rep_scheme),
            cfg=cfg,
        )
    raise ValueError(f"Unknown plan mode: {form.mode!r}")
