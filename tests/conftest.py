from __future__ import annotations

import json
from pathlib import Path

import pytest

from photo_catalog.app.viewmodels.catalog_vm import CatalogVM
from photo_catalog.infrastructure.json_repository import JsonDocumentRepository


class ScriptedConsole:
    """Console that answers prompts from a fixed list and records output."""

    def __init__(self, answers: list[str] | None = None) -> None:
        self.answers = list(answers or [])
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def feed(self, *answers: str) -> None:
        self.answers.extend(answers)

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def echo(self, line: str = "") -> None:
        self.lines.append(line)


PHOTOS = [
    {
        "id": 1,
        "filename": "a.jpg",
        "title": "A",
        "tags": ["x"],
        "albums": [10],
    },
    {
        "id": 2,
        "filename": "beach.jpg",
        "title": "Beach day",
        "description": "Sunny",
        "date": 1704456000000,
        "resolution": [1920, 1080],
        "albums": [10, 20, 99],
        "tags": ["sun", "sea"],
    },
    {
        "id": 3,
        "filename": "city.png",
        "resolution": "800x600",
        "albums": [20],
    },
]

ALBUMS = [
    {"id": 10, "name": "Trip"},
    {"id": 20, "name": "Summer"},
]


@pytest.fixture
def catalog_files(tmp_path: Path) -> tuple[Path, Path]:
    photos = tmp_path / "photos.json"
    albums = tmp_path / "albums.json"
    photos.write_text(json.dumps(PHOTOS, indent=2), encoding="utf-8")
    albums.write_text(json.dumps(ALBUMS, indent=2), encoding="utf-8")
    return photos, albums


@pytest.fixture
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture
def vm(catalog_files: tuple[Path, Path], console: ScriptedConsole) -> CatalogVM:
    photos, albums = catalog_files
    return CatalogVM(JsonDocumentRepository(), console, str(photos), str(albums))
