"""Exceptions that abort a catalog operation with a user-facing message."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for operation aborts; `message` is shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(CatalogError):
    """Raised when prompted input fails validation, before any file I/O."""


class DataLoadError(CatalogError):
    """Raised when a required document could not be loaded."""


class NotFoundError(CatalogError):
    """Raised when a photo or album lookup finds no match."""


class DuplicateTagError(CatalogError):
    """Raised when a tag already exists on the photo, ignoring case."""
