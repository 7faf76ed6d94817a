import pytest
from streamlit.testing.v1 import AppTest

from casebook.ui.state import STATE_KEY, CatalogState

JOINS_TITLES = ["Conditional Aggregation", "Complex Joins", "Self-Joins"]


@pytest.fixture
def app():
    at = AppTest.from_file("../app.py", default_timeout=30)
    return at


def _active_tabs(at):
    return [b.label for b in at.button if b.key and b.key.startswith("cb_tab_") and b.proto.type == "primary"]


def _card_titles(at, catalog):
    titles = {e.title for e in catalog.entries}
    return [m.value.strip("*") for m in at.markdown if m.value.strip("*") in titles]


def test_initial_render_shows_all(app, catalog):
    app.run()
    assert not app.exception
    assert _active_tabs(app) == ["All (15)"]
    assert _card_titles(app, catalog) == [e.title for e in catalog.entries]


def test_selecting_joins_tab(app, catalog):
    app.run()
    app.button(key="cb_tab_joins").click().run()
    assert not app.exception
    assert _active_tabs(app) == ["Joins (3)"]
    assert _card_titles(app, catalog) == JOINS_TITLES
    assert app.session_state[STATE_KEY] == CatalogState("joins")


def test_selecting_same_tab_twice(app, catalog):
    app.run()
    app.button(key="cb_tab_joins").click().run()
    once = _card_titles(app, catalog)
    app.button(key="cb_tab_joins").click().run()
    assert _card_titles(app, catalog) == once == JOINS_TITLES
    assert _active_tabs(app) == ["Joins (3)"]


def test_stale_category_falls_back_and_reset(app, catalog):
    app.session_state[STATE_KEY] = CatalogState("gone")
    app.run()
    assert not app.exception
    assert _active_tabs(app) == ["All (15)"]
    assert len(_card_titles(app, catalog)) == 15

    app.button(key="cb_tab_ctes").click().run()
    app.text_input(key="cb_search").input("refactoring").run()
    assert _card_titles(app, catalog) == ["CTE Refactoring"]

    app.button(key="cb_reset").click().run()
    assert app.session_state[STATE_KEY] == CatalogState()
    assert app.text_input(key="cb_search").value == ""
    assert _active_tabs(app) == ["All (15)"]
    assert len(_card_titles(app, catalog)) == 15
