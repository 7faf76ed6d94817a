from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import streamlit as st

from casebook.config import Settings, get_settings
from casebook.data.catalog import Catalog, CaseStudyEntry, load_catalog
from casebook.data.documents import CaseStudyDocument, read_document
from casebook.data.schema import TableSummary, read_schema, summarize_schema

log = logging.getLogger("casebook.loader")


def load_data(settings: Optional[Settings] = None) -> Catalog:
    """Wrapper that resolves config and calls the cached implementation."""
    settings = settings or get_settings()
    # Call cached impl with explicit params for proper cache keying
    return _load_catalog_impl(str(settings.catalog_file))


@st.cache_data(show_spinner=False)
def _load_catalog_impl(catalog_file: str) -> Catalog:
    """Load the catalog once per file path; cleared by the refresh button."""
    return load_catalog(Path(catalog_file))


@st.cache_data(show_spinner=False, ttl=600)
def load_study_document(studies_dir: str, entry: CaseStudyEntry) -> Optional[CaseStudyDocument]:
    return read_document(Path(studies_dir), entry)


@st.cache_data(show_spinner=False)
def load_schema(schema_file: str) -> Tuple[str, List[TableSummary]]:
    text = read_schema(Path(schema_file))
    tables = summarize_schema(text)
    log.info("summarised schema %s: %d tables", schema_file, len(tables))
    return text, tables


def clear_caches() -> None:
    _load_catalog_impl.clear()  # type: ignore[attr-defined]
    load_study_document.clear()  # type: ignore[attr-defined]
    load_schema.clear()  # type: ignore[attr-defined]
