"""JSON persistence for the photo and album documents.

Each document is read and written whole. Failures are logged and returned as
result objects; nothing here raises to the caller.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from photo_catalog.core.services.interfaces import LoadResult, SaveResult

DEFAULT_INDENT = 2


class JsonDocumentRepository:
    """Load and save whole JSON documents."""

    def __init__(self, indent: int = DEFAULT_INDENT) -> None:
        self._indent = indent

    def load(self, document: str) -> LoadResult:
        """Read and parse the JSON document at `document`."""
        path = Path(document)
        try:
            with path.open("r", encoding="utf-8") as f:
                value = json.load(f)
        except (OSError, ValueError, RecursionError) as ex:
            logger.error("Error reading file {}: {}", document, ex)
            return LoadResult(document=document, error=str(ex))
        logger.debug("Loaded {}", document)
        return LoadResult(document=document, value=value)

    def save(self, document: str, value: Any) -> SaveResult:
        """Replace the contents of `document` with `value` as indented JSON."""
        path = Path(document)
        try:
            text = json.dumps(value, indent=self._indent, ensure_ascii=False)
            path.write_text(text, encoding="utf-8")
        except (OSError, TypeError, ValueError) as ex:
            logger.error("Error writing file {}: {}", document, ex)
            return SaveResult(document=document, error=str(ex))
        logger.debug("Saved {}", document)
        return SaveResult(document=document)
