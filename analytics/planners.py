import math

from loguru import logger

from data_model import MinReps, Plan, SetRow, StartPoint, leading_reps, plan_tonnage
from utils.plan_schema import DEFAULT_REP_SCHEME, PlannerConfig
from utils.rounding import round_half_up, round_money, round_to_step


def _usable(x) -> bool:
    """Finite, non-zero number. Anything else means 'no plan yet'."""
    if x is None or isinstance(x, bool):
        return False
    try:
        x = float(x)
    except (TypeError, ValueError):
        return False
    return math.isfinite(x) and x != 0


def _barbell_start(daily_max: float, increment: float, cap: int, bar: float) -> tuple[float, int]:
    r0 = round_half_up(1 + (daily_max - bar) / increment)
    if 1 <= r0 <= cap:
        return bar, r0

    reps = cap
    weight = daily_max - increment * (reps - 1)
    if weight < bar:
        weight = bar
        reps = max(1, min(cap, 1 + math.floor((daily_max - bar) / increment)))
    return weight, reps


def _bodyweight_start(daily_max: float, increment: float, cap: int) -> tuple[float, int]:
    max_rungs_from_zero = math.floor(1 + daily_max / increment)
    reps = max(1, min(cap, max_rungs_from_zero))
    weight = daily_max - increment * (reps - 1)
    if weight < 0:
        weight = 0.0
    return weight, reps


def ladder_plan(
    daily_max: float,
    increment: float,
    start_rep_cap: int = 12,
    is_bodyweight_relative: bool = False,
    bodyweight: float = 80,
    cfg: PlannerConfig | None = None,
) -> Plan:
    """
    Ascending ladder: every rung adds one increment and drops one rep,
    finishing with a single at the daily max.

    Barbell ladders never start below the empty bar. Bodyweight-relative
    ladders work on total system weight (bodyweight +/- external load) and
    only floor the start at zero; each rung also carries the external load,
    negative when it is assistance.
    """
    cfg = cfg or PlannerConfig()
    if not (_usable(daily_max) and _usable(increment)):
        logger.debug("ladder_plan: no plan for daily_max={} increment={}", daily_max, increment)
        return Plan(sets=[], tonnage=0, start=None)

    if is_bodyweight_relative:
        start_weight, start_reps = _bodyweight_start(daily_max, increment, start_rep_cap)
    else:
        start_weight, start_reps = _barbell_start(daily_max, increment, start_rep_cap, cfg.bar_weight)

    rungs: list[tuple[float, int]] = []
    reps = start_reps
    w = start_weight
    guard = 0
    while reps >= 1 and w <= daily_max + cfg.top_tolerance and guard < cfg.max_rungs:
        rungs.append((round_to_step(w, cfg.plate_step), reps))
        reps -= 1
        w += increment
        guard += 1

    if guard >= cfg.max_rungs:
        logger.warning(
            "ladder_plan: stopped after {} rungs (daily_max={}, increment={}, start_rep_cap={})",
            cfg.max_rungs, daily_max, increment, start_rep_cap,
        )

    last = rungs[-1] if rungs else None
    if last is None or abs(last[0] - daily_max) > cfg.final_single_tolerance or last[1] != 1:
        if last is None or daily_max > last[0]:
            rungs.append((round_to_step(daily_max, cfg.plate_step), 1))

    if is_bodyweight_relative:
        sets = [SetRow(weight=wt, reps=r, external=round_money(wt - bodyweight)) for wt, r in rungs]
    else:
        sets = [SetRow(weight=wt, reps=r) for wt, r in rungs]

    return Plan(
        sets=sets,
        tonnage=plan_tonnage(sets),
        start=StartPoint(weight=round_to_step(start_weight, cfg.plate_step), reps=start_reps),
    )


def percent_ramp_plan(daily_max: float, cfg: PlannerConfig | None = None) -> Plan:
    """
    Reverse pyramid off fixed percentages of the daily max (90/85/80/75/70%),
    each with an open-ended 1+ .. 5+ rep target.
    """
    cfg = cfg or PlannerConfig()
    if not _usable(daily_max):
        logger.debug("percent_ramp_plan: no plan for daily_max={}", daily_max)
        return Plan(sets=[], tonnage=0, heavy_reps=0)

    sets = [
        SetRow(
            weight=round_to_step(pct * daily_max, cfg.plate_step),
            reps=MinReps(min_reps),
            note=f"{round_half_up(pct * 100)}%",
        )
        for pct, min_reps in cfg.ramp_scheme
    ]
    heavy_floor = cfg.heavy_pct * daily_max
    heavy_reps = sum(leading_reps(s.reps) for s in sets if s.weight >= heavy_floor)

    return Plan(sets=sets, tonnage=plan_tonnage(sets), heavy_reps=heavy_reps)


def fixed_drop_plan(
    daily_max: float,
    drop: float = 10,
    sets: int = 4,
    rep_scheme=DEFAULT_REP_SCHEME,
    cfg: PlannerConfig | None = None,
) -> Plan:
    """
    Top single at ~95% of the daily max, then up to `sets` back-off sets,
    each `drop` lighter than the last. Stops early once the weight would hit zero.
    A rep scheme shorter than `sets` repeats its last entry.
    """
    cfg = cfg or PlannerConfig()
    if not (_usable(daily_max) and _usable(drop)):
        logger.debug("fixed_drop_plan: no plan for daily_max={} drop={}", daily_max, drop)
        return Plan(top_single=None, sets=[], tonnage=0)

    rep_scheme = list(rep_scheme) or list(DEFAULT_REP_SCHEME)
    top_single = round_to_step(cfg.top_single_pct * daily_max, cfg.plate_step)

    rows = []
    w = top_single
    for i in range(sets):
        w = w - drop
        if w <= 0:
            break
        reps = rep_scheme[i] if i < len(rep_scheme) else rep_scheme[-1]
        rows.append(SetRow(weight=round_to_step(w, cfg.plate_step), reps=reps, note=f"−{drop:g} kg"))

    tonnage = round_money(top_single * 1 + sum(r.weight * r.reps for r in rows))
    return Plan(top_single=top_single, sets=rows, tonnage=tonnage)
