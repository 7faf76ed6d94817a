from __future__ import annotations

from dataclasses import dataclass

from casebook.config import Settings
from casebook.data.catalog import Catalog
from casebook.data.filters import CatalogFilters


@dataclass
class PageContext:
    catalog: Catalog
    filters: CatalogFilters
    settings: Settings
