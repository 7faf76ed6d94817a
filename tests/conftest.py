from pathlib import Path

import pytest

from casebook.data.catalog import load_catalog

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(scope="session")
def catalog():
    return load_catalog(REPO_ROOT / "data" / "catalog.json")


@pytest.fixture
def payload():
    return {
        "categories": {"all": "All", "joins": "Joins", "ctes": "CTEs"},
        "case_studies": [
            {"category": "joins", "title": "A", "description": "first join", "file": "01_a.md"},
            {"category": "ctes", "title": "B", "description": "a cte", "file": "01_b.md"},
            {"category": "joins", "title": "C", "description": "second join", "file": "02_c.md"},
        ],
    }
