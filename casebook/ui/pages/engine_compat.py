from __future__ import annotations

import streamlit as st

from casebook.data.schema import ENGINES, engine_syntax_frame
from casebook.ui.components.tables import render_table
from casebook.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    st.subheader("Engine Compatibility")
    st.write(
        "The case studies are written for PostgreSQL first. Where SQLite or DuckDB spell an "
        "operation differently, the equivalent expression is listed below."
    )
    frame = engine_syntax_frame()
    search = st.text_input("Filter operations", key="cb_compat_search").strip().lower()
    if search:
        frame = frame[frame["operation"].str.lower().str.contains(search, regex=False)]
    render_table(
        frame,
        column_config={engine: st.column_config.TextColumn(engine) for engine in ENGINES},
        export_file_name="engine_syntax.csv",
        key="cb_compat_csv",
    )
