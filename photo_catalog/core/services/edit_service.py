"""Field mutation rules for photo records.

The service only changes the in-memory record; persisting the collection is
the caller's job.
"""

from __future__ import annotations

from loguru import logger

from photo_catalog.core.errors import DuplicateTagError, InvalidInputError
from photo_catalog.core.models import Photo

EDITABLE_FIELDS = ("title", "description")
TAG_EMPTY = "Tag cannot be empty"
TAG_EXISTS = "Tag already exists, no changes made"


def apply_detail_edit(photo: Photo, field_name: str, raw: str) -> bool:
    """Replace `field_name` with `raw` unless `raw` is blank.

    The stored value is `raw` exactly as typed; only the blank check trims.

    Returns:
        True if the field was replaced.
    """
    if field_name not in EDITABLE_FIELDS:
        raise ValueError(f"Field is not editable: {field_name}")
    if raw.strip() == "":
        return False
    setattr(photo, field_name, raw)
    logger.info("Photo {} {} set to {!r}", photo.id, field_name, raw)
    return True


def has_tag(photo: Photo, tag: str) -> bool:
    """True if `photo` already carries `tag`, ignoring case."""
    wanted = tag.lower()
    return any(str(existing).lower() == wanted for existing in photo.tags)


def add_tag(photo: Photo, raw_tag: str) -> str:
    """Append the trimmed `raw_tag` to the photo's tags and return it.

    Raises:
        InvalidInputError: if the tag is blank.
        DuplicateTagError: if the photo already has the tag in any casing.
    """
    tag = raw_tag.strip()
    if not tag:
        raise InvalidInputError(TAG_EMPTY)
    if has_tag(photo, tag):
        raise DuplicateTagError(TAG_EXISTS)
    photo.append_tag(tag)
    logger.info("Photo {} tagged {!r}", photo.id, tag)
    return tag
