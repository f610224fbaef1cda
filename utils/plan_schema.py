# utils/plan_schema.py
from dataclasses import dataclass, field

# (fraction of daily max, minimum reps)
RAMP_SCHEME = (
    (0.90, 1),
    (0.85, 2),
    (0.80, 3),
    (0.75, 4),
    (0.70, 5),
)

DEFAULT_REP_SCHEME = (3, 5, 7, 9)

PLAN_MODES = ["Ladder", "RP %", "RP Drop"]

MODE_LABELS = {
    "Ladder": "Ladder",
    "RP %": "Reverse Pyramid %",
    "RP Drop": "Reverse Pyramid Drop",
}


@dataclass
class PlannerConfig:
    bar_weight: float = 20.0
    plate_step: float = 2.5
    max_rungs: int = 400
    top_tolerance: float = 1e-6
    final_single_tolerance: float = 2.5
    top_single_pct: float = 0.95
    heavy_pct: float = 0.8
    default_bodyweight: float = 80.0
    default_start_rep_cap: int = 12
    default_drop: float = 10.0
    default_drop_sets: int = 4
    ramp_scheme: tuple = field(default_factory=lambda: RAMP_SCHEME)


@dataclass
class LiftDefaults:
    increment: float
    include: bool = False
    bodyweight_relative: bool = False
    drop: float = 10.0


LIFT_DEFAULTS = {
    "Squat": LiftDefaults(increment=10, include=True),
    "Deadlift": LiftDefaults(increment=10),
    "Bench Press": LiftDefaults(increment=5, include=True),
    "Barbell Row": LiftDefaults(increment=5),
    "Overhead Press": LiftDefaults(increment=2.5, include=True),
    "Pull-up": LiftDefaults(increment=2.5, include=True, bodyweight_relative=True, drop=2.5),
}
