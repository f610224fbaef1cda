import pytest

from analytics.planners import fixed_drop_plan, ladder_plan, percent_ramp_plan
from data_model import (
    MinReps,
    Plan,
    SetRow,
    format_kg,
    leading_reps,
    plan_tonnage,
    plan_to_frame,
    summarize_session,
)


@pytest.mark.parametrize(
    "reps, expected",
    [
        (7, 7),
        (MinReps(4), 4),
        ("3+", 3),
        ("12", 12),
        (" 5+ ", 5),
        ("abc", 0),
        ("", 0),
    ],
)
def test_leading_reps(reps, expected):
    assert leading_reps(reps) == expected


def test_min_reps_renders_with_plus():
    assert str(MinReps(3)) == "3+"


def test_plan_tonnage_counts_min_reps_by_their_floor():
    rows = [SetRow(weight=90, reps=MinReps(1)), SetRow(weight=80, reps=3)]
    assert plan_tonnage(rows) == 330


def test_empty_plan_is_empty():
    assert Plan().is_empty
    assert not ladder_plan(daily_max=100, increment=10).is_empty


@pytest.mark.parametrize("value, expected", [(6760.0, "6760"), (82.25, "82.25"), (42.5, "42.5"), (0, "0")])
def test_format_kg(value, expected):
    assert format_kg(value) == expected


def test_barbell_ladder_frame():
    df = plan_to_frame(ladder_plan(daily_max=100, increment=10))

    assert list(df.columns) == ["set", "weight", "reps", "note"]
    assert df["set"].tolist() == list(range(1, 10))
    assert df["reps"].tolist()[-1] == "1"
    assert df["weight"].tolist()[-1] == 100


def test_pullup_ladder_frame_keeps_row_external():
    plan = ladder_plan(daily_max=60, increment=2.5, is_bodyweight_relative=True, bodyweight=80, start_rep_cap=8)
    df = plan_to_frame(plan, bodyweight=80)

    assert df["external"].tolist() == [s.external for s in plan.sets]
    assert df["external"].iloc[-1] == -20


def test_percent_frame_derives_external_from_bodyweight():
    df = plan_to_frame(percent_ramp_plan(daily_max=100), bodyweight=80)

    assert df["external"].tolist() == [10, 5, 0, -5, -10]
    assert df["reps"].tolist() == ["1+", "2+", "3+", "4+", "5+"]
    assert df["note"].tolist() == ["90%", "85%", "80%", "75%", "70%"]


def test_empty_plan_frame_has_columns():
    assert list(plan_to_frame(Plan()).columns) == ["set", "weight", "reps", "note"]
    assert list(plan_to_frame(None, bodyweight=80).columns) == ["set", "weight", "reps", "note", "external"]


def test_summarize_session():
    plans = {
        "Squat": ladder_plan(daily_max=160, increment=10),
        "Bench Press": percent_ramp_plan(daily_max=100),
        "Deadlift": fixed_drop_plan(daily_max=100),
        "Barbell Row": None,
        "Overhead Press": ladder_plan(daily_max=0, increment=2.5),
    }
    summary, total = summarize_session(plans)

    assert summary["lift"].tolist() == ["Squat", "Bench Press", "Deadlift"]
    assert summary["sets"].tolist() == [12, 5, 5]
    assert summary["tonnage"].tolist() == [6760, 1150, 1675]
    assert total == 9585


def test_summarize_session_counts_lone_top_single():
    summary, total = summarize_session({"Squat": fixed_drop_plan(daily_max=100, sets=0)})

    assert summary["sets"].tolist() == [1]
    assert total == 95


def test_summarize_session_empty():
    summary, total = summarize_session({"Squat": None})

    assert summary.empty
    assert list(summary.columns) == ["lift", "sets", "tonnage"]
    assert total == 0
