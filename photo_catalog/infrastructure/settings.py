"""Catalog configuration read from an optional settings.json.

Recognised keys::

    {
      "data": {"photos_file": "photos.json", "albums_file": "albums.json"},
      "storage": {"indent": 2},
      "logging": {"dir": "~/.photo_catalog/logs", "level": "INFO"}
    }

Every key is optional; missing keys fall back to the defaults below.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from photo_catalog.infrastructure.json_repository import DEFAULT_INDENT

DEFAULT_PHOTOS_FILE = "photos.json"
DEFAULT_ALBUMS_FILE = "albums.json"
DEFAULT_LOG_LEVEL = "INFO"


class CatalogSettings:
    """Dotted-key view over the settings document plus typed accessors."""

    def __init__(self, settings_path: str | Path | None = None) -> None:
        """Read `settings_path`; no path means every value takes its default.

        Raises:
            FileNotFoundError: if a path is given but does not exist.
        """
        self._data: dict[str, Any] = {}
        self.path = Path(settings_path) if settings_path is not None else None
        if self.path is None:
            return
        if not self.path.exists():
            raise FileNotFoundError(f"settings.json not found: {self.path}")
        with self.path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        node: Any = self._data
        for part in key.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    @property
    def photos_file(self) -> str:
        return str(self.get("data.photos_file", DEFAULT_PHOTOS_FILE))

    @property
    def albums_file(self) -> str:
        return str(self.get("data.albums_file", DEFAULT_ALBUMS_FILE))

    @property
    def indent(self) -> int:
        """JSON indentation used when saving documents."""
        return int(self.get("storage.indent", DEFAULT_INDENT))

    @property
    def log_level(self) -> str:
        return str(self.get("logging.level", DEFAULT_LOG_LEVEL)).upper()

    @property
    def log_dir(self) -> str | None:
        """Configured log directory with `~` expanded; None selects the default."""
        value = self.get("logging.dir")
        if value is None:
            return None
        return str(Path(str(value)).expanduser())
