import casebook.bootstrap_env  # must be first to set env/secrets
import logging

import streamlit as st

from casebook.config import TABS, get_settings
from casebook.data.catalog import CatalogError
from casebook.data.filters import apply_catalog_filters, serialize_filters
from casebook.data.loader import clear_caches, load_data
from casebook.logging_setup import setup_logging
from casebook.ui.layout import active_filter_badges, setup_page, sidebar_filters_ui
from casebook.ui.pages import case_studies, engine_compat, sample_schema
from casebook.ui.pages.context import PageContext

log = logging.getLogger("casebook.app")

PAGE_RENDERERS = {
    "case_studies": case_studies.render,
    "sample_schema": sample_schema.render,
    "engine_compat": engine_compat.render,
}


def _active_filter_summary(context: PageContext) -> None:
    badges = active_filter_badges(context.filters, context.catalog)
    summary_text = "Active Filters: " + " | ".join(badges) if badges else "Active Filters: All case studies"
    st.markdown(f"**{summary_text}**")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    setup_page()
    st.title("SQL Case Studies")

    if st.sidebar.button("🔄 Reload Catalog"):
        clear_caches()

    try:
        catalog = load_data(settings)
    except (FileNotFoundError, CatalogError) as exc:
        log.error("catalog unavailable: %s", exc)
        st.error(f"Catalog could not be loaded: {exc}")
        return

    filters = sidebar_filters_ui(catalog)
    st.session_state["cb_active_filters"] = serialize_filters(filters)

    prev_count = st.session_state.get("cb_prev_visible_count")
    current_count = len(apply_catalog_filters(catalog.entries, filters))
    if prev_count is not None and prev_count != current_count:
        st.toast(f"Showing {current_count} case studies", icon="🔎")
    st.session_state["cb_prev_visible_count"] = current_count

    context = PageContext(catalog=catalog, filters=filters, settings=settings)
    _active_filter_summary(context)

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()
