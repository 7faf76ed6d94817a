"""
Layout helpers for the Streamlit application (page setup, sidebar, category tabs).
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import streamlit as st

from casebook.config import ALL_CATEGORY
from casebook.data.catalog import Catalog
from casebook.data.filters import CatalogFilters
from casebook.ui.state import STATE_KEY, CatalogState, build_tabs, select_category

log = logging.getLogger("casebook.layout")

SEARCH_KEY = "cb_search"


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title="SQL Case Studies",
        layout="wide",
        page_icon=":card_index_dividers:",
    )
    _inject_sidebar_primary_button_red()


def get_catalog_state(catalog: Catalog) -> CatalogState:
    """Current selection; falls back to "all" if the stored key left the catalog."""
    state = st.session_state.get(STATE_KEY)
    if not isinstance(state, CatalogState) or state.active_category not in catalog.category_map:
        state = CatalogState()
        st.session_state[STATE_KEY] = state
    return state


def _on_select_category(key: str, categories: Sequence[Tuple[str, str]]) -> None:
    current = st.session_state.get(STATE_KEY, CatalogState())
    st.session_state[STATE_KEY] = select_category(current, key, categories)


def render_category_tabs(catalog: Catalog, counts: Optional[Dict[str, int]] = None) -> CatalogState:
    """
    Draw one button per category, highlighting the active one.

    Clicking a button runs the selection callback before Streamlit reruns the
    script, so the tab row and the cards are both drawn from the new state.
    """
    state = get_catalog_state(catalog)
    tabs = build_tabs(catalog.categories, state)
    cols = st.columns(len(tabs))
    for col, tab in zip(cols, tabs):
        label = tab.label if counts is None else f"{tab.label} ({counts.get(tab.key, 0)})"
        col.button(
            label,
            key=f"cb_tab_{tab.key}",
            type="primary" if tab.active else "secondary",
            width="stretch",
            on_click=_on_select_category,
            args=(tab.key, catalog.categories),
        )
    return state


def _reset_filters() -> None:
    st.session_state[STATE_KEY] = CatalogState()
    st.session_state[SEARCH_KEY] = ""


def sidebar_filters_ui(catalog: Catalog) -> CatalogFilters:
    """
    Render the sidebar filter controls and return the selected values.
    """
    st.sidebar.header("Filters")
    search = st.sidebar.text_input(
        "Search title or description",
        key=SEARCH_KEY,
        help="Case-insensitive match within the active category.",
    )
    st.sidebar.button("Reset filters", type="primary", on_click=_reset_filters, key="cb_reset")
    state = get_catalog_state(catalog)
    return CatalogFilters(category=state.active_category, search=search or None)


def active_filter_badges(filters: CatalogFilters, catalog: Catalog) -> List[str]:
    badges = []
    if filters.category != ALL_CATEGORY:
        badges.append(f"Category: {catalog.label_for(filters.category)}")
    if filters.search and filters.search.strip():
        badges.append(f'Search: "{filters.search.strip()}"')
    return badges


def _inject_sidebar_primary_button_red() -> None:
    """Style PRIMARY buttons in the sidebar as red (danger-like) so the reset action stands out.

    Primary buttons in the main area mark the active category tab and keep the theme colour.
    """
    st.sidebar.markdown(
        """
        <style>
        /* Streamlit uses test IDs for buttons; cover both attribute patterns */
        div[data-testid="stSidebar"] button[kind="primary"],
        div[data-testid="stSidebar"] button[data-testid="baseButton-primary"] {
            background-color: #e53935 !important; /* red 600 */
            border-color: #e53935 !important;
            color: #ffffff !important;
        }
        div[data-testid="stSidebar"] button[kind="primary"]:hover,
        div[data-testid="stSidebar"] button[data-testid="baseButton-primary"]:hover {
            background-color: #c62828 !important; /* red 800 */
            border-color: #c62828 !important;
            color: #ffffff !important;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
