"""Linear lookups over the in-memory photo and album collections."""

from __future__ import annotations

import re
from typing import Any

from photo_catalog.core.errors import InvalidInputError
from photo_catalog.core.models import Album, Photo

# Leading integer, surrounding text ignored ("12abc" -> 12)
_ID_PREFIX = re.compile(r"\s*([+-]?\d+)")


def same_id(stored: Any, wanted: Any) -> bool:
    """Exact id equality; JSON booleans never match a number."""
    if isinstance(stored, bool) != isinstance(wanted, bool):
        return False
    return stored == wanted


def parse_photo_id(text: str) -> int:
    """Parse a photo id typed by the user.

    Raises:
        InvalidInputError: if `text` does not start with an integer.
    """
    match = _ID_PREFIX.match(text or "")
    if match is None:
        raise InvalidInputError("Invalid ID")
    return int(match.group(1))


def find_photo_by_id(photos: Any, photo_id: int) -> Photo | None:
    """Return the first photo whose id equals `photo_id`.

    Returns None when nothing matches or `photos` is not a list.
    """
    if not isinstance(photos, list):
        return None
    for entry in photos:
        if isinstance(entry, dict) and same_id(entry.get("id"), photo_id):
            return Photo(entry)
    return None


def find_album_by_name(albums: Any, name: str) -> Album | None:
    """Return the first album whose trimmed name matches `name`, ignoring case."""
    if not isinstance(albums, list):
        return None
    wanted = name.strip().lower()
    for entry in albums:
        if not isinstance(entry, dict):
            continue
        album = Album(entry)
        if album.name is not None and album.name.strip().lower() == wanted:
            return album
    return None


def photos_in_album(photos: Any, album_id: Any) -> list[Photo]:
    """Photos whose `albums` list contains `album_id`, in storage order."""
    if not isinstance(photos, list):
        return []
    return [
        Photo(entry)
        for entry in photos
        if isinstance(entry, dict)
        and any(same_id(member, album_id) for member in Photo(entry).album_ids)
    ]
