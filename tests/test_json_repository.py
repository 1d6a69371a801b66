from __future__ import annotations

import json
from pathlib import Path

from photo_catalog.infrastructure.json_repository import JsonDocumentRepository


def test_load_returns_parsed_value(tmp_path: Path) -> None:
    doc = tmp_path / "photos.json"
    doc.write_text('[{"id": 1, "title": "Caf\\u00e9"}]', encoding="utf-8")
    result = JsonDocumentRepository().load(str(doc))
    assert result.ok
    assert result.value == [{"id": 1, "title": "Café"}]


def test_load_missing_file_reports_error(tmp_path: Path) -> None:
    doc = tmp_path / "missing.json"
    result = JsonDocumentRepository().load(str(doc))
    assert not result.ok
    assert result.value is None
    assert result.document == str(doc)
    assert result.error


def test_load_malformed_file_reports_error(tmp_path: Path) -> None:
    doc = tmp_path / "photos.json"
    doc.write_text("[{not json", encoding="utf-8")
    result = JsonDocumentRepository().load(str(doc))
    assert not result.ok


def test_load_deeply_nested_document_reports_error(tmp_path: Path) -> None:
    doc = tmp_path / "photos.json"
    doc.write_text("[" * 200_000 + "]" * 200_000, encoding="utf-8")
    result = JsonDocumentRepository().load(str(doc))
    assert not result.ok
    assert result.value is None
    assert result.error


def test_save_replaces_contents_with_indented_json(tmp_path: Path) -> None:
    doc = tmp_path / "photos.json"
    doc.write_text("x" * 1000, encoding="utf-8")
    value = [{"id": 1, "title": "Café", "tags": ["a"]}]
    result = JsonDocumentRepository().save(str(doc), value)
    assert result.ok
    text = doc.read_text(encoding="utf-8")
    assert text == json.dumps(value, indent=2, ensure_ascii=False)
    assert json.loads(text) == value


def test_save_honours_indent(tmp_path: Path) -> None:
    doc = tmp_path / "albums.json"
    JsonDocumentRepository(indent=4).save(str(doc), [{"id": 1}])
    assert '\n    {\n        "id": 1' in doc.read_text(encoding="utf-8")


def test_save_failure_is_reported_not_raised(tmp_path: Path) -> None:
    doc = tmp_path / "no-such-dir" / "photos.json"
    result = JsonDocumentRepository().save(str(doc), [])
    assert not result.ok
    assert result.error
    assert not doc.exists()
