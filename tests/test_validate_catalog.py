import pytest

from scripts.validate_catalog import main


def test_validation_passes_on_shipped_content(capsys):
    main()
    assert "Catalog validation passed" in capsys.readouterr().out


def test_missing_schema_exits_cleanly(monkeypatch, tmp_path):
    monkeypatch.setenv("CASEBOOK_SCHEMA_FILE", str(tmp_path / "missing.sql"))
    with pytest.raises(SystemExit, match="Schema invalid"):
        main()


def test_missing_catalog_exits_cleanly(monkeypatch, tmp_path):
    monkeypatch.setenv("CASEBOOK_CATALOG_FILE", str(tmp_path / "missing.json"))
    with pytest.raises(SystemExit, match="Catalog invalid"):
        main()


def test_unreadable_document_reported(monkeypatch, tmp_path, catalog):
    studies = tmp_path / "studies"
    for entry in catalog.entries:
        path = studies / entry.category / entry.file
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"# Broken\n\xff\xfe\n")
    monkeypatch.setenv("CASEBOOK_STUDIES_DIR", str(studies))
    with pytest.raises(SystemExit, match="unreadable document"):
        main()
