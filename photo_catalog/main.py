"""Typer-based CLI entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from photo_catalog.app.viewmodels.catalog_vm import CatalogVM
from photo_catalog.app.views.console import TerminalConsole
from photo_catalog.app.views.menu_controller import MenuController
from photo_catalog.infrastructure.json_repository import JsonDocumentRepository
from photo_catalog.infrastructure.logging import init_logging
from photo_catalog.infrastructure.settings import CatalogSettings

DEFAULT_SETTINGS = Path("settings.json")

app = typer.Typer(help="Query and edit a photo catalog kept in two JSON files")


def _load_settings(path: Path | None) -> CatalogSettings:
    if path is None and DEFAULT_SETTINGS.exists():
        path = DEFAULT_SETTINGS
    return CatalogSettings(path)


def build_menu(
    settings: CatalogSettings, photos: str | None = None, albums: str | None = None
) -> MenuController:
    """Wire repository, console, view-model and menu from settings and overrides."""
    photos_document = photos or settings.photos_file
    albums_document = albums or settings.albums_file
    repo = JsonDocumentRepository(indent=settings.indent)
    console = TerminalConsole()
    vm = CatalogVM(repo, console, photos_document, albums_document)
    logger.info("Catalog documents: photos={} albums={}", photos_document, albums_document)
    return MenuController(vm, console)


@app.command()
def main(
    photos: Optional[str] = typer.Option(None, "--photos", help="Photo JSON document"),
    albums: Optional[str] = typer.Option(None, "--albums", help="Album JSON document"),
    settings_path: Optional[Path] = typer.Option(
        None, "--settings", exists=True, dir_okay=False, help="settings.json to read"
    ),
    log_dir: Optional[str] = typer.Option(None, "--log-dir", help="Directory for log files"),
) -> None:
    """Run the interactive catalog menu."""
    settings = _load_settings(settings_path)
    init_logging(log_dir or settings.log_dir, level=settings.log_level)
    menu = build_menu(settings, photos, albums)
    raise typer.Exit(menu.run())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
