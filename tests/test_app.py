from streamlit.testing.v1 import AppTest

APP = "../app.py"


def test_app_renders_without_input():
    at = AppTest.from_file(APP, default_timeout=30).run()

    assert not at.exception
    assert at.title[0].value == "Ladder & Reverse Pyramid Planner"
    assert any("No lifts planned yet." in i.value for i in at.info)


def test_squat_ladder_shows_tonnage():
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.text_input(key="squat_daily_max").input("160").run()

    assert not at.exception
    assert any("Tonnage: 6760 kg" in m.value for m in at.markdown)
    assert at.metric[0].value == "6760"
