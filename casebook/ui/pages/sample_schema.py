from __future__ import annotations

import streamlit as st

from casebook.data.loader import load_schema
from casebook.data.schema import load_commands, schema_frame, tables_frame
from casebook.ui.components.tables import render_table
from casebook.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    st.subheader("Sample Schema")
    schema_file = context.settings.schema_file
    try:
        text, tables = load_schema(str(schema_file))
    except FileNotFoundError as exc:
        st.error(str(exc))
        return

    st.caption(
        f"{len(tables)} tables with seed rows. The script runs unchanged on PostgreSQL, SQLite and DuckDB."
    )
    render_table(
        tables_frame(tables),
        column_config={
            "seed_rows": st.column_config.NumberColumn("Seed Rows", format="%d"),
            "foreign_keys": st.column_config.TextColumn("Foreign Keys"),
        },
        export_file_name=None,
    )

    st.markdown("#### Columns")
    names = [t.name for t in tables]
    selected = st.multiselect("Tables", options=names, default=names, key="cb_schema_tables")
    columns_df = schema_frame([t for t in tables if t.name in selected])
    render_table(
        columns_df,
        column_config={
            "nullable": st.column_config.CheckboxColumn("Nullable"),
            "primary_key": st.column_config.CheckboxColumn("PK"),
        },
        export_file_name="schema_columns.csv",
        key="cb_schema_columns_csv",
    )

    st.markdown("#### Load the schema")
    for engine, command in load_commands(schema_file.name).items():
        st.markdown(f"**{engine}**")
        st.code(command, language="bash")

    st.download_button(
        "Download schema script",
        data=text.encode("utf-8"),
        file_name=schema_file.name,
        mime="application/sql",
        key="cb_schema_download",
    )
    with st.expander("View script", expanded=False):
        st.code(text, language="sql")
