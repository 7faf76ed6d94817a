import os

from casebook.bootstrap_env import bridge_mapping_to_env
from casebook.config import REPO_ROOT, TABS, get_settings


def test_default_settings(monkeypatch):
    for name in ("CASEBOOK_CATALOG_FILE", "CASEBOOK_STUDIES_DIR", "CASEBOOK_SCHEMA_FILE", "CASEBOOK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.catalog_file == REPO_ROOT / "data" / "catalog.json"
    assert settings.studies_dir == REPO_ROOT / "case_studies"
    assert settings.log_level == "INFO"


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("CASEBOOK_CATALOG_FILE", str(tmp_path / "c.json"))
    monkeypatch.setenv("CASEBOOK_STUDIES_DIR", "docs")
    monkeypatch.setenv("CASEBOOK_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.catalog_file == tmp_path / "c.json"
    assert settings.studies_dir == REPO_ROOT / "docs"
    assert settings.log_level == "DEBUG"


def test_blank_env_falls_back(monkeypatch):
    monkeypatch.setenv("CASEBOOK_SCHEMA_FILE", "   ")
    assert get_settings().schema_file == REPO_ROOT / "data" / "sample_schema.sql"


def test_bridge_mapping_flattens_without_override(monkeypatch):
    monkeypatch.setenv("CASEBOOK_LOG_LEVEL", "WARNING")
    try:
        bridge_mapping_to_env({"casebook": {"log-level": "ERROR", "bridge_flag": 1}})
        assert os.environ["CASEBOOK_LOG_LEVEL"] == "WARNING"
        assert os.environ["CASEBOOK_BRIDGE_FLAG"] == "1"
    finally:
        os.environ.pop("CASEBOOK_BRIDGE_FLAG", None)


def test_tab_order():
    assert [t.key for t in TABS] == ["case_studies", "sample_schema", "engine_compat"]
