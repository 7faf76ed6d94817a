from __future__ import annotations

import streamlit as st

from casebook.config import ALL_CATEGORY
from casebook.data.catalog import CaseStudyEntry, catalog_frame
from casebook.data.filters import apply_catalog_filters, category_counts
from casebook.data.loader import load_study_document
from casebook.ui.components.cards import StudyCard, render_study_cards
from casebook.ui.components.charts import category_counts_chart, render_plotly
from casebook.ui.components.formatting import format_count
from casebook.ui.components.tables import render_table
from casebook.ui.layout import render_category_tabs
from casebook.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    catalog = context.catalog
    st.subheader("Case Studies")
    st.caption(
        "Each case study pairs a business question with a SQL query, an explanation, "
        "sample output and notes on engine compatibility."
    )

    counts = category_counts(catalog.entries, catalog.category_keys)
    render_category_tabs(catalog, counts)

    visible = apply_catalog_filters(catalog.entries, context.filters)
    st.caption(f"Showing {format_count(len(visible), 'case study', 'case studies')}.")

    labels = catalog.category_map
    studies_dir = str(context.settings.studies_dir)

    def _load(entry: CaseStudyEntry):
        return load_study_document(studies_dir, entry)

    render_study_cards(
        [StudyCard(entry=entry, category_label=labels[entry.category]) for entry in visible],
        load_document=_load,
    )

    with st.expander("Catalog overview", expanded=False):
        per_category = {k: v for k, v in counts.items() if k != ALL_CATEGORY}
        active = context.filters.category
        render_plotly(
            category_counts_chart(
                per_category,
                labels,
                active_label=labels.get(active) if active != ALL_CATEGORY else None,
            )
        )
        render_table(
            catalog_frame(catalog, visible),
            column_config={
                "category_label": st.column_config.TextColumn("Category"),
                "path": st.column_config.TextColumn("Document"),
            },
            export_file_name="case_studies.csv",
            key="cb_catalog_csv",
        )
