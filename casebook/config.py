"""
Application-wide configuration constants and settings resolution.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

REPO_ROOT = Path(__file__).resolve().parent.parent

ALL_CATEGORY = "all"
ALL_LABEL = "All"


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered page sections for the browser
TABS: List[TabConfig] = [
    TabConfig("case_studies", "Case Studies"),
    TabConfig("sample_schema", "Sample Schema"),
    TabConfig("engine_compat", "Engine Compatibility"),
]


@dataclass(frozen=True)
class Settings:
    catalog_file: Path
    studies_dir: Path
    schema_file: Path
    log_level: str


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else default


def _resolve(value: str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else REPO_ROOT / path


def get_settings() -> Settings:
    """
    Resolve settings from the environment. Relative paths are anchored at the
    repository root so the app behaves the same regardless of the working dir.
    """
    return Settings(
        catalog_file=_resolve(_getenv("CASEBOOK_CATALOG_FILE", "data/catalog.json")),
        studies_dir=_resolve(_getenv("CASEBOOK_STUDIES_DIR", "case_studies")),
        schema_file=_resolve(_getenv("CASEBOOK_SCHEMA_FILE", "data/sample_schema.sql")),
        log_level=(_getenv("CASEBOOK_LOG_LEVEL", "INFO") or "INFO").upper(),
    )
