"""
Case study catalog: the fixed list of document records and the ordered
category map that drive the browser page.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from casebook.config import ALL_CATEGORY, ALL_LABEL

log = logging.getLogger("casebook.catalog")

REQUIRED_FIELDS = ("category", "title", "description", "file")


class CatalogError(ValueError):
    """Raised when catalog content breaks an invariant or a key is unknown."""


@dataclass(frozen=True)
class CaseStudyEntry:
    category: str
    title: str
    description: str
    file: str

    @property
    def link(self) -> str:
        return f"case_studies/{self.category}/{self.file}"


@dataclass(frozen=True)
class Catalog:
    categories: Tuple[Tuple[str, str], ...]
    entries: Tuple[CaseStudyEntry, ...]

    @property
    def category_map(self) -> Dict[str, str]:
        return dict(self.categories)

    @property
    def category_keys(self) -> List[str]:
        return [key for key, _ in self.categories]

    def label_for(self, key: str) -> str:
        try:
            return self.category_map[key]
        except KeyError:
            raise CatalogError(f"Unknown category: {key!r}") from None


def _parse_categories(raw: Any) -> Tuple[Tuple[str, str], ...]:
    if not isinstance(raw, Mapping) or not raw:
        raise CatalogError("Catalog 'categories' must be a non-empty mapping of key -> label")
    pairs = [(str(k), str(v)) for k, v in raw.items()]
    # "all" is the no-filter sentinel and always leads the tab row
    pairs = [(k, v) for k, v in pairs if k != ALL_CATEGORY]
    all_label = str(raw.get(ALL_CATEGORY, ALL_LABEL))
    return ((ALL_CATEGORY, all_label), *pairs)


def _parse_entry(idx: int, raw: Any) -> CaseStudyEntry:
    if not isinstance(raw, Mapping):
        raise CatalogError(f"Case study #{idx} must be an object, got {type(raw).__name__}")
    missing = [f for f in REQUIRED_FIELDS if not str(raw.get(f) or "").strip()]
    if missing:
        raise CatalogError(f"Case study #{idx} is missing fields: {missing}")
    return CaseStudyEntry(**{f: str(raw[f]).strip() for f in REQUIRED_FIELDS})


def validate_catalog(catalog: Catalog) -> None:
    """Check the category invariant and reject duplicate document paths."""
    known = set(catalog.category_keys) - {ALL_CATEGORY}
    unknown = [e.title for e in catalog.entries if e.category not in known]
    if unknown:
        raise CatalogError(f"Case studies reference unknown categories: {unknown}")

    dupes = [
        f"{category}/{file}"
        for (category, file), count in Counter((e.category, e.file) for e in catalog.entries).items()
        if count > 1
    ]
    if dupes:
        raise CatalogError(f"Duplicate case study files: {dupes}")


def parse_catalog(payload: Mapping[str, Any]) -> Catalog:
    categories = _parse_categories(payload.get("categories"))
    raw_entries = payload.get("case_studies")
    if not isinstance(raw_entries, list):
        raise CatalogError("Catalog 'case_studies' must be a list")
    entries = tuple(_parse_entry(i, raw) for i, raw in enumerate(raw_entries))
    catalog = Catalog(categories=categories, entries=entries)
    validate_catalog(catalog)
    return catalog


def load_catalog(path: Path) -> Catalog:
    """Read and validate the catalog JSON document at `path`."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file {path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise CatalogError(f"Catalog file {path} must contain a JSON object")
    catalog = parse_catalog(payload)
    log.info(
        "loaded catalog %s: %d case studies across %d categories",
        path,
        len(catalog.entries),
        len(catalog.categories) - 1,
    )
    return catalog


CATALOG_COLUMNS = ["category", "category_label", "title", "description", "file", "path"]


def catalog_frame(catalog: Catalog, entries: Optional[Sequence[CaseStudyEntry]] = None) -> pd.DataFrame:
    """Tabular view of (a subset of) the catalog for display and CSV export."""
    rows = entries if entries is not None else catalog.entries
    labels = catalog.category_map
    return pd.DataFrame(
        [
            {
                "category": e.category,
                "category_label": labels.get(e.category, e.category),
                "title": e.title,
                "description": e.description,
                "file": e.file,
                "path": e.link,
            }
            for e in rows
        ],
        columns=CATALOG_COLUMNS,
    )
