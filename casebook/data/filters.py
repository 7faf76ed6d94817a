"""
Filter utilities that narrow the case study catalog to the visible cards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from casebook.config import ALL_CATEGORY
from casebook.data.catalog import CaseStudyEntry


@dataclass(frozen=True)
class CatalogFilters:
    category: str = ALL_CATEGORY
    search: Optional[str] = None


DEFAULT_FILTERS = CatalogFilters()


def filter_by_category(entries: Sequence[CaseStudyEntry], category: str) -> List[CaseStudyEntry]:
    """
    Return the entries whose category equals `category`, in catalog order.

    The "all" sentinel returns every entry unchanged.
    """
    if category == ALL_CATEGORY:
        return list(entries)
    return [entry for entry in entries if entry.category == category]


def _matches(entry: CaseStudyEntry, needle: str) -> bool:
    return needle in entry.title.lower() or needle in entry.description.lower()


def apply_catalog_filters(entries: Sequence[CaseStudyEntry], filters: CatalogFilters) -> List[CaseStudyEntry]:
    filtered = filter_by_category(entries, filters.category)
    needle = (filters.search or "").strip().lower()
    if needle:
        filtered = [entry for entry in filtered if _matches(entry, needle)]
    return filtered


def category_counts(entries: Iterable[CaseStudyEntry], category_keys: Sequence[str]) -> Dict[str, int]:
    """Ordered count of entries per category key; the sentinel counts everything."""
    entries = list(entries)
    counts = {key: 0 for key in category_keys}
    for entry in entries:
        if entry.category in counts:
            counts[entry.category] += 1
    if ALL_CATEGORY in counts:
        counts[ALL_CATEGORY] = len(entries)
    return counts


def serialize_filters(filters: CatalogFilters) -> Dict[str, Any]:
    """
    Convert the CatalogFilters dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "category": filters.category,
        "search": (filters.search or "").strip() or None,
    }
