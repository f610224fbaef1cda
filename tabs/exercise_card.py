# tabs/exercise_card.py
import streamlit as st

from data_model import Plan, format_kg, plan_to_frame
from utils.inputs import BODYWEIGHT_INPUT_MODES, LiftForm, build_plan, parse_number
from utils.plan_schema import MODE_LABELS, PLAN_MODES, LiftDefaults, PlannerConfig
from utils.rounding import round_to_step


def _key(name: str, field: str) -> str:
    return f"{name}_{field}".replace(" ", "_").replace("-", "_").lower()


def _render_plan(plan: Plan, mode: str, bodyweight: float | None, cfg: PlannerConfig) -> None:
    if mode == "Ladder":
        st.caption(f"Start: {format_kg(plan.start.weight)} kg × {plan.start.reps} reps")
    elif mode == "RP Drop":
        line = f"Top single (~{cfg.top_single_pct:.0%}): {format_kg(plan.top_single)} kg × 1"
        if bodyweight is not None:
            line += f"  (external {format_kg(round_to_step(plan.top_single - bodyweight, cfg.plate_step))} kg)"
        st.caption(line)

    df = plan_to_frame(plan, bodyweight=bodyweight, step=cfg.plate_step)
    if mode == "Ladder":
        df = df.drop(columns=["note"])
    if mode == "RP Drop":
        df = df.rename(columns={"set": "back-off"})
    st.dataframe(df, hide_index=True)

    st.markdown(f"**Tonnage: {format_kg(plan.tonnage)} kg**")
    if mode == "RP %":
        st.caption(f"Heavy reps (≥{cfg.heavy_pct:.0%}): {plan.heavy_reps}")


def render(name: str, defaults: LiftDefaults, cfg: PlannerConfig) -> Plan | None:
    """Draw one lift card and return its plan (None when there is nothing to show)."""
    bw_relative = defaults.bodyweight_relative

    with st.container(border=True):
        head, mode_col, input_col = st.columns([2, 2, 2])
        include = head.checkbox(name, value=defaults.include, key=_key(name, "include"))
        mode = mode_col.selectbox(
            "Mode", PLAN_MODES, format_func=MODE_LABELS.get, key=_key(name, "mode")
        )

        input_mode = "total"
        if bw_relative:
            input_mode = input_col.selectbox(
                "Pull-up input",
                list(BODYWEIGHT_INPUT_MODES),
                format_func=BODYWEIGHT_INPUT_MODES.get,
                key=_key(name, "input_mode"),
            )

        if bw_relative:
            max_label = "External max (+/− kg)" if input_mode == "external" else "Total max (kg)"
        else:
            max_label = "Daily max / top single (kg)"

        c1, c2, c3, c4 = st.columns(4)
        daily_max = c1.text_input(max_label, key=_key(name, "daily_max"))
        increment = c2.text_input("Increment (kg)", value=f"{defaults.increment:g}", key=_key(name, "increment"))
        cap = c3.text_input(
            "Ladder start-rep cap",
            value=str(cfg.default_start_rep_cap),
            key=_key(name, "cap"),
            disabled=mode != "Ladder",
        )
        bodyweight_raw = None
        if bw_relative:
            bodyweight_raw = c4.text_input(
                "Bodyweight (kg)", value=f"{cfg.default_bodyweight:g}", key="bodyweight"
            )

        drop, drop_sets, scheme = f"{defaults.drop:g}", str(cfg.default_drop_sets), "3,5,7,9"
        if mode == "RP Drop":
            d1, d2, d3 = st.columns(3)
            drop = d1.text_input("Drop per set (kg)", value=drop, key=_key(name, "drop"))
            drop_sets = d2.text_input("# back-off sets", value=drop_sets, key=_key(name, "drop_sets"))
            scheme = d3.text_input("Rep scheme (e.g., 3,5,7,9)", value=scheme, key=_key(name, "scheme"))

        form = LiftForm(
            name=name,
            include=include,
            mode=mode,
            daily_max=daily_max,
            increment=increment,
            start_rep_cap=cap,
            drop=drop,
            drop_sets=drop_sets,
            rep_scheme=scheme,
            bodyweight_relative=bw_relative,
            input_mode=input_mode,
        )
        plan = build_plan(form, bodyweight_raw, cfg)

        if not include:
            return None
        if plan is None:
            st.info(f"Enter a daily max and increment to plan {name}.")
            return None
        if plan.is_empty and plan.top_single is None:
            st.warning(f"No sets could be planned for {name} with these numbers.")
            return plan

        bodyweight = None
        if bw_relative:
            bodyweight = parse_number(bodyweight_raw) or cfg.default_bodyweight
        _render_plan(plan, mode, bodyweight, cfg)
        return plan
