"""
Category tab selection as an explicit state value.

`CatalogState` is replaced, never mutated: `select_category` returns a new
value which the page stores in `st.session_state` under `STATE_KEY`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

from casebook.config import ALL_CATEGORY
from casebook.data.catalog import CatalogError

log = logging.getLogger("casebook.state")

STATE_KEY = "cb_catalog_state"


@dataclass(frozen=True)
class CatalogState:
    active_category: str = ALL_CATEGORY


@dataclass(frozen=True)
class TabView:
    key: str
    label: str
    active: bool


def select_category(
    state: CatalogState,
    key: str,
    categories: Sequence[Tuple[str, str]],
) -> CatalogState:
    known = [k for k, _ in categories]
    if key not in known:
        raise CatalogError(f"Unknown category {key!r}; expected one of {known}")
    if key != state.active_category:
        log.debug("active category %s -> %s", state.active_category, key)
    return replace(state, active_category=key)


def build_tabs(categories: Sequence[Tuple[str, str]], state: CatalogState) -> List[TabView]:
    return [TabView(key=key, label=label, active=key == state.active_category) for key, label in categories]
