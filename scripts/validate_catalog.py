"""Quick validation script for the case study catalog.

Run with `python scripts/validate_catalog.py` to ensure the catalog loads,
every category is declared, and each document exists with the full
section template.
"""

from __future__ import annotations

import logging

from casebook.config import get_settings
from casebook.data.catalog import CatalogError, load_catalog
from casebook.data.documents import missing_sections, read_document, study_path
from casebook.data.schema import read_schema, summarize_schema
from casebook.logging_setup import setup_logging

EXPECTED_TABLES = 7


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        catalog = load_catalog(settings.catalog_file)
    except (FileNotFoundError, CatalogError) as exc:
        raise SystemExit(f"Catalog invalid: {exc}")

    problems = []
    for entry in catalog.entries:
        doc = read_document(settings.studies_dir, entry)
        if doc is None:
            problems.append(f"missing or unreadable document: {study_path(settings.studies_dir, entry)}")
            continue
        gaps = missing_sections(doc)
        if gaps:
            problems.append(f"{entry.link}: missing sections {gaps}")

    try:
        tables = summarize_schema(read_schema(settings.schema_file))
    except FileNotFoundError as exc:
        raise SystemExit(f"Schema invalid: {exc}")
    if len(tables) != EXPECTED_TABLES:
        problems.append(f"schema defines {len(tables)} tables, expected {EXPECTED_TABLES}")
    empty = [t.name for t in tables if t.seed_rows == 0]
    if empty:
        problems.append(f"tables without seed rows: {empty}")

    if problems:
        raise SystemExit("Catalog validation failed:\n- " + "\n- ".join(problems))

    logging.getLogger("casebook.validate").info("catalog validation passed")
    print("Catalog validation passed. Case studies:", len(catalog.entries), "Tables:", len(tables))


if __name__ == "__main__":
    main()
