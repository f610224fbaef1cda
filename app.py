import streamlit as st

# ---- Local modules ----
from data_model import format_kg, summarize_session
from tabs import exercise_card
from utils.plan_schema import LIFT_DEFAULTS
from utils.secrets import load_planner_config

st.set_page_config(
    page_title="Ladder & Reverse Pyramid Planner",
    page_icon="🏋️",
    layout="centered",
)


@st.cache_resource(show_spinner=False)
def get_config():
    return load_planner_config()


def main() -> None:
    cfg = get_config()

    st.title("Ladder & Reverse Pyramid Planner")
    st.write(
        "Enter your daily max for each lift, choose Ladder or Reverse Pyramid, "
        "and get weights, reps, and tonnage."
    )
    st.caption(
        "Pull-ups: enter total system weight (BW ± load) or external load "
        "(use negative kg for assistance). Tables show external (+/−) too."
    )

    plans = {}
    for name, defaults in LIFT_DEFAULTS.items():
        plans[name] = exercise_card.render(name, defaults, cfg)

    st.subheader("Session")
    summary, total = summarize_session(plans)
    if summary.empty:
        st.info("No lifts planned yet.")
    else:
        st.dataframe(summary, hide_index=True)
        st.metric("Session tonnage (kg)", format_kg(total))

    st.caption(
        "Tip: Cap ladder start-reps to keep sessions short. For pull-ups, "
        "switch to external mode to log assistance (negative kg)."
    )


main()
