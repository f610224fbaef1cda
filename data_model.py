import re
from dataclasses import dataclass, field
from typing import Mapping

import numpy as np
import pandas as pd

from utils.rounding import round_money, round_to_step

PLAN_COLUMNS = ["set", "weight", "reps", "note", "external"]
SESSION_COLUMNS = ["lift", "sets", "tonnage"]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class MinReps:
    """Open-ended rep target: at least `count` reps, autoregulated by feel."""

    count: int

    def __str__(self) -> str:
        return f"{self.count}+"


@dataclass(frozen=True)
class SetRow:
    weight: float
    reps: "int | MinReps"
    note: str | None = None
    external: float | None = None


@dataclass(frozen=True)
class StartPoint:
    weight: float
    reps: int


@dataclass(frozen=True)
class Plan:
    sets: list[SetRow] = field(default_factory=list)
    tonnage: float = 0
    start: StartPoint | None = None
    top_single: float | None = None
    heavy_reps: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.sets


def leading_reps(reps) -> int:
    """
    Numeric rep count used for tonnage math.
    "3+" and MinReps(3) both count as 3; anything without a leading integer counts as 0.
    """
    if isinstance(reps, MinReps):
        return reps.count
    if isinstance(reps, (int, np.integer)):
        return int(reps)
    m = _LEADING_INT.match(str(reps))
    return int(m.group(1)) if m else 0


def format_kg(x: float) -> str:
    """6760.0 -> "6760", 82.25 -> "82.25"."""
    return f"{x:.2f}".rstrip("0").rstrip(".")


def plan_tonnage(rows: list[SetRow]) -> float:
    return round_money(sum(r.weight * leading_reps(r.reps) for r in rows))


def plan_to_frame(plan: Plan | None, bodyweight: float | None = None, step: float = 2.5) -> pd.DataFrame:
    """
    Tabular view of a plan's rows.

    With a bodyweight, rows that carry no external load get one derived from
    the total weight (snapped to `step`). Without one, the external column is dropped.
    """
    if plan is None or plan.is_empty:
        cols = PLAN_COLUMNS if bodyweight is not None else PLAN_COLUMNS[:-1]
        return pd.DataFrame(columns=cols)

    df = pd.DataFrame(
        [
            {
                "set": i + 1,
                "weight": row.weight,
                "reps": str(row.reps),
                "note": row.note or "",
                "external": row.external,
            }
            for i, row in enumerate(plan.sets)
        ]
    )

    if bodyweight is None:
        return df.drop(columns=["external"])

    derived = [round_to_step(w - bodyweight, step) for w in df["weight"]]
    df["external"] = np.where(df["external"].isna(), derived, df["external"])
    df["external"] = df["external"].astype(float)
    return df


def summarize_session(plans: Mapping[str, Plan | None]) -> tuple[pd.DataFrame, float]:
    """
    Per-lift set counts and tonnage for every lift that has a plan,
    plus the total session tonnage.
    """
    rows = [
        {
            "lift": lift,
            "sets": len(plan.sets) + (1 if plan.top_single is not None else 0),
            "tonnage": plan.tonnage,
        }
        for lift, plan in plans.items()
        if plan is not None and (plan.sets or plan.top_single is not None)
    ]
    if not rows:
        return pd.DataFrame(columns=SESSION_COLUMNS), 0

    out = pd.DataFrame(rows, columns=SESSION_COLUMNS)
    total = round_money(float(out["tonnage"].sum()))
    return out, total
