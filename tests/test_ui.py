import pytest

from streamlit.testing.v1 import AppTest


@pytest.fixture
def app():
    at = AppTest.from_file("../main.py", default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _metrics(at):
    return {m.label: m.value for m in at.metric}


def test_initial_page_is_empty(app):
    assert _metrics(app) == {
        "They don't follow you back": "0",
        "You don't follow them back": "0",
        "Mutuals": "0",
    }


def test_pasted_lists_are_compared(app):
    app.text_area(key="following_text").input("alice\nBOB!!\nc")
    app.text_area(key="followers_text").input("alice\nbob\ncarol")
    app.run()

    assert not app.exception
    assert _metrics(app) == {
        "They don't follow you back": "0",
        "You don't follow them back": "1",
        "Mutuals": "2",
    }


def test_org_toggle_only_changes_display(app):
    app.text_area(key="following_text").input("bookclub99\nalice")
    app.text_area(key="followers_text").input("bookclub99")
    app.run()
    assert _metrics(app)["Mutuals"] == "1"

    app.checkbox[0].check().run()
    assert _metrics(app)["Mutuals"] == "0"
    assert _metrics(app)["They don't follow you back"] == "1"


def test_clear_empties_both_inputs(app):
    app.text_area(key="following_text").input("alice")
    app.text_area(key="followers_text").input("bob")
    app.run()

    clear = next(b for b in app.button if b.label == "Clear")
    clear.click().run()

    assert app.text_area(key="following_text").value == ""
    assert app.text_area(key="followers_text").value == ""


def test_each_input_shows_its_handle_count(app):
    app.text_area(key="following_text").input("alice\nBOB!!\nc")
    app.text_area(key="followers_text").input("alice\nbob\ncarol")
    app.run()

    captions = [c.value for c in app.caption]
    assert "2 handles" in captions
    assert "3 handles" in captions


def test_comparison_cache_is_bounded():
    from followcheck.ui import run_comparison

    assert run_comparison._info.max_entries == 32
