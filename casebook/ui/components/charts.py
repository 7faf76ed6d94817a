"""
Plotly chart factory functions with consistent styling for the browser.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


DEFAULT_TEMPLATE = "plotly_white"
DEFAULT_COLOR_SEQUENCE = [
    "#336791",  # postgres blue
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
]


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        showlegend=False,
        margin=dict(l=40, r=20, t=60, b=40),
        height=320,
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    fig.update_xaxes(showgrid=False, title=None)
    fig.update_yaxes(showgrid=True, zeroline=True, dtick=1)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, width="stretch", config={"displayModeBar": False})


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    category_orders: Optional[Dict[str, List[str]]] = None,
    highlight: Optional[str] = None,
) -> go.Figure:
    colors = None
    if highlight is not None:
        colors = [DEFAULT_COLOR_SEQUENCE[1] if v == highlight else DEFAULT_COLOR_SEQUENCE[0] for v in df[x]]
    fig = px.bar(df, x=x, y=y, category_orders=category_orders, text_auto=True)
    fig = _configure_layout(fig, title, yaxis_title)
    if colors is not None:
        fig.update_traces(marker_color=colors)
    fig.update_traces(textposition="outside", cliponaxis=False)
    return fig


def category_counts_chart(
    counts: Mapping[str, int],
    labels: Mapping[str, str],
    active_label: Optional[str] = None,
) -> go.Figure:
    """Bar chart of case studies per category; the sentinel row is expected to be excluded."""
    df = pd.DataFrame(
        {"category": [labels.get(k, k) for k in counts], "case_studies": list(counts.values())}
    )
    return bar_chart(
        df,
        x="category",
        y="case_studies",
        title="Case studies per category",
        yaxis_title="Case studies",
        category_orders={"category": df["category"].tolist()},
        highlight=active_label,
    )
