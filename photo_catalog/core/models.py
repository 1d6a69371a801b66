"""Core domain models for catalog photos and albums.

Records are kept as the raw JSON objects read from disk. The dataclasses
below are thin views over those dicts: reads go through accessors and writes
land in the same dict, so saving the collection keeps unknown keys and key
order intact.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Photo:
    """A single photo entry of the photo document."""

    data: dict[str, Any]

    @property
    def id(self) -> Any:
        return self.data.get("id")

    @property
    def filename(self) -> str:
        return self.data.get("filename") or ""

    @property
    def title(self) -> str:
        return self.data.get("title") or ""

    @title.setter
    def title(self, value: str) -> None:
        self.data["title"] = value

    @property
    def description(self) -> str:
        return self.data.get("description") or ""

    @description.setter
    def description(self, value: str) -> None:
        self.data["description"] = value

    @property
    def date(self) -> Any:
        """Raw timestamp (epoch milliseconds) or None when absent."""
        return self.data.get("date")

    @property
    def resolution(self) -> Any:
        return self.data.get("resolution")

    @property
    def album_ids(self) -> list[Any]:
        """Album ids in stored order; empty when the key is missing."""
        return list(self.data.get("albums") or [])

    @property
    def tags(self) -> list[Any]:
        return list(self.data.get("tags") or [])

    def append_tag(self, tag: str) -> None:
        """Append `tag`, creating the `tags` list when the record has none."""
        tags = self.data.get("tags") or []
        tags.append(tag)
        self.data["tags"] = tags


@dataclass
class Album:
    """A single album entry of the album document."""

    data: dict[str, Any]

    @property
    def id(self) -> Any:
        return self.data.get("id")

    @property
    def name(self) -> str | None:
        name = self.data.get("name")
        return name if isinstance(name, str) else None
