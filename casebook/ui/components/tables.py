"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, object]] = None,
    height: Optional[int] = None,
    show_index: bool = False,
    export_file_name: Optional[str] = "export.csv",
    key: Optional[str] = None,
) -> None:
    if df.empty:
        st.info("Nothing to display.")
        return

    kwargs = {}
    if height is not None:
        kwargs["height"] = height
    st.dataframe(
        df,
        width="stretch",
        hide_index=not show_index,
        column_config={k: v for k, v in (column_config or {}).items() if k in df.columns},
        **kwargs,
    )

    if export_file_name:
        csv_bytes = df.to_csv(index=show_index).encode("utf-8")
        st.download_button(
            "Download CSV",
            data=csv_bytes,
            file_name=export_file_name,
            mime="text/csv",
            key=key,
        )
