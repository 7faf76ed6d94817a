import pytest

from casebook.data.catalog import CatalogError
from casebook.data.filters import filter_by_category
from casebook.ui.state import CatalogState, build_tabs, select_category


def test_initial_state_is_all(catalog):
    tabs = build_tabs(catalog.categories, CatalogState())
    active = [t for t in tabs if t.active]
    assert [t.key for t in active] == ["all"]
    assert tabs[0].label == "All"


def test_selecting_marks_exactly_one_tab(catalog):
    state = CatalogState()
    for key in catalog.category_keys:
        state = select_category(state, key, catalog.categories)
        active = [t.key for t in build_tabs(catalog.categories, state) if t.active]
        assert active == [key]


def test_select_returns_new_state(catalog):
    state = CatalogState()
    new_state = select_category(state, "joins", catalog.categories)
    assert state.active_category == "all"
    assert new_state.active_category == "joins"


def test_selecting_twice_gives_same_visible_set(catalog):
    once = select_category(CatalogState(), "optimization", catalog.categories)
    twice = select_category(once, "optimization", catalog.categories)
    assert once == twice
    assert filter_by_category(catalog.entries, once.active_category) == filter_by_category(
        catalog.entries, twice.active_category
    )


def test_unknown_category_raises(catalog):
    with pytest.raises(CatalogError):
        select_category(CatalogState(), "nosql", catalog.categories)
