"""Lightweight view model wrapper around `Photo`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from photo_catalog.app.views.constants import (
    ALBUM_LIST_TAG_SEPARATOR,
    DETAIL_FALLBACK,
    DETAIL_SEPARATOR,
)
from photo_catalog.core.formatting import (
    format_date,
    format_resolution,
    join_with_separator,
    resolve_album_names,
)
from photo_catalog.core.models import Photo


@dataclass
class PhotoVM:
    """Expose display strings for a photo."""

    record: Photo

    @property
    def filename(self) -> str:
        return self.record.filename

    @property
    def title(self) -> str:
        return self.record.title

    @property
    def date_text(self) -> str:
        """Long-form capture date, "Unknown" when missing."""
        return format_date(self.record.date)

    @property
    def resolution_text(self) -> str:
        return format_resolution(self.record.resolution)

    @property
    def tags_text(self) -> str:
        """Comma separated tags, "None" when untagged."""
        return join_with_separator(self.record.tags, DETAIL_SEPARATOR, DETAIL_FALLBACK)

    def albums_text(self, albums: Any) -> str:
        """Comma separated album names resolved against `albums`."""
        names = resolve_album_names(self.record.album_ids, albums)
        return join_with_separator(names, DETAIL_SEPARATOR, DETAIL_FALLBACK)

    def detail_lines(self, albums: Any) -> list[str]:
        """Lines printed by Find Photo."""
        return [
            f"Filename: {self.filename}",
            f"Title: {self.title}",
            f"Date: {self.date_text}",
            f"Albums: {self.albums_text(albums)}",
            f"Tags: {self.tags_text}",
        ]

    def csv_row(self) -> str:
        """Row of the album photo list: filename, resolution and colon-joined tags."""
        tags = join_with_separator(self.record.tags, ALBUM_LIST_TAG_SEPARATOR)
        return f"{self.filename},{self.resolution_text},{tags}"
