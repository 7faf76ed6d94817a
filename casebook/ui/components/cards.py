from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import streamlit as st

from casebook.data.catalog import CaseStudyEntry
from casebook.data.documents import CaseStudyDocument, TEMPLATE_SECTIONS, extract_sql, strip_sql

# Sections shown as code rather than prose
_SQL_SECTIONS = {"SQL Query"}


@dataclass
class StudyCard:
    entry: CaseStudyEntry
    category_label: str

    @property
    def title(self) -> str:
        return self.entry.title

    @property
    def description(self) -> str:
        return self.entry.description

    @property
    def link(self) -> str:
        return self.entry.link


def render_document(doc: Optional[CaseStudyDocument], link: str) -> None:
    if doc is None:
        st.warning(f"Document not found: `{link}`")
        return
    ordered = [name for name in TEMPLATE_SECTIONS if name in doc.sections]
    extra = [name for name in doc.sections if name not in TEMPLATE_SECTIONS]
    for name in ordered + extra:
        body = doc.section(name)
        st.markdown(f"##### {name}")
        if name in _SQL_SECTIONS:
            blocks = extract_sql(body)
            if blocks:
                prose = strip_sql(body)
                if prose:
                    st.markdown(prose)
                for block in blocks:
                    st.code(block, language="sql")
                continue
        st.markdown(body or "_Empty section._")


def render_study_cards(
    cards: Sequence[StudyCard],
    load_document: Callable[[CaseStudyEntry], Optional[CaseStudyDocument]],
    columns: int = 3,
) -> None:
    """
    Render case study cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No case studies match the current filters.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(columns)
        for col, card in zip(cols, row_cards):
            with col:
                with st.container(border=True):
                    st.markdown(f"**{card.title}**")
                    st.caption(card.category_label)
                    st.write(card.description)
                    with st.expander("Read case study", expanded=False):
                        st.caption(f"`{card.link}`")
                        render_document(load_document(card.entry), card.link)
