"""ViewModel for the four catalog operations.

Every operation reads its documents fresh, acts on them and, when it changed
something, writes the photo document back in full. Aborts are raised as
`CatalogError` and rendered by `_run`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from loguru import logger

from photo_catalog.app.viewmodels.photo_vm import PhotoVM
from photo_catalog.app.views import constants as c
from photo_catalog.app.views.console import Console
from photo_catalog.core.errors import CatalogError, DataLoadError, InvalidInputError, NotFoundError
from photo_catalog.core.lookup import (
    find_album_by_name,
    find_photo_by_id,
    parse_photo_id,
    photos_in_album,
)
from photo_catalog.core.models import Photo
from photo_catalog.core.services.edit_service import add_tag, apply_detail_edit


class CatalogVM:
    """Catalog operations bound to a repository, a console and two documents."""

    def __init__(
        self,
        repo,
        console: Console,
        photos_document: str,
        albums_document: str,
    ) -> None:
        """Create a CatalogVM.

        Args:
            repo: Repository with `load(document)` and `save(document, value)`.
            console: Prompt/echo primitives used for all user interaction.
            photos_document: Path of the photo JSON document.
            albums_document: Path of the album JSON document.
        """
        self._repo = repo
        self._console = console
        self.photos_document = photos_document
        self.albums_document = albums_document

    # Operations -----------------------------------------------------------

    def find_photo(self) -> bool:
        """Show filename, title, date, albums and tags of one photo."""
        return self._run("find_photo", self._find_photo)

    def update_photo_details(self) -> bool:
        """Edit the title and description of one photo."""
        return self._run("update_photo_details", self._update_photo_details)

    def album_photo_list(self) -> bool:
        """List the photos of one album as filename,resolution,tags rows."""
        return self._run("album_photo_list", self._album_photo_list)

    def tag_photo(self) -> bool:
        """Add a single tag to one photo."""
        return self._run("tag_photo", self._tag_photo)

    # Implementation -------------------------------------------------------

    def _run(self, name: str, action: Callable[[], None]) -> bool:
        """Run `action`; print the abort message and return False on abort."""
        try:
            action()
        except CatalogError as ex:
            logger.info("{} aborted: {}", name, ex.message)
            self._console.echo(ex.message)
            return False
        return True

    def _prompt_photo_id(self, text: str) -> int:
        return parse_photo_id(self._console.prompt(text))

    def _load(self, document: str) -> tuple[bool, Any]:
        result = self._repo.load(document)
        if not result.ok:
            self._console.echo(c.MSG_READ_ERROR.format(document=document, error=result.error))
        return result.ok, result.value

    def _load_photos(self) -> Any:
        ok, photos = self._load(self.photos_document)
        if not ok:
            raise DataLoadError(c.MSG_LOAD_PHOTOS)
        return photos

    def _save_photos(self, photos: Any) -> None:
        result = self._repo.save(self.photos_document, photos)
        if not result.ok:
            # the caller still reports success afterwards
            self._console.echo(
                c.MSG_WRITE_ERROR.format(document=self.photos_document, error=result.error)
            )

    @staticmethod
    def _require_photo(photos: Any, photo_id: int) -> Photo:
        photo = find_photo_by_id(photos, photo_id)
        if photo is None:
            raise NotFoundError(c.MSG_PHOTO_NOT_FOUND)
        return photo

    def _find_photo(self) -> None:
        photo_id = self._prompt_photo_id(c.PROMPT_PHOTO_ID)
        photos_ok, photos = self._load(self.photos_document)
        albums_ok, albums = self._load(self.albums_document)
        if not (photos_ok and albums_ok):
            raise DataLoadError(c.MSG_LOAD_DATA_FILES)
        photo = self._require_photo(photos, photo_id)
        for line in PhotoVM(photo).detail_lines(albums):
            self._console.echo(line)

    def _update_photo_details(self) -> None:
        photo_id = self._prompt_photo_id(c.PROMPT_PHOTO_ID)
        photos = self._load_photos()
        photo = self._require_photo(photos, photo_id)
        self._console.echo(c.MSG_REUSE_HINT)
        for field_name in ("title", "description"):
            current = getattr(photo, field_name)
            raw = self._console.prompt(c.PROMPT_FIELD.format(field=field_name, current=current))
            apply_detail_edit(photo, field_name, raw)
        self._save_photos(photos)
        self._console.echo(c.MSG_PHOTO_UPDATED)

    def _album_photo_list(self) -> None:
        name = self._console.prompt(c.PROMPT_ALBUM_NAME)
        if name.strip() == "":
            raise InvalidInputError(c.MSG_ALBUM_NAME_REQUIRED)
        albums_ok, albums = self._load(self.albums_document)
        photos_ok, photos = self._load(self.photos_document)
        if not (albums_ok and photos_ok):
            raise DataLoadError(c.MSG_LOAD_DATA)
        album = find_album_by_name(albums, name)
        if album is None:
            raise NotFoundError(c.MSG_ALBUM_NOT_FOUND)
        self._console.echo(c.ALBUM_LIST_HEADER)
        for photo in photos_in_album(photos, album.id):
            self._console.echo(PhotoVM(photo).csv_row())

    def _tag_photo(self) -> None:
        photo_id = self._prompt_photo_id(c.PROMPT_TAG_PHOTO_ID)
        raw_tag = self._console.prompt(c.PROMPT_TAG)
        if raw_tag.strip() == "":
            raise InvalidInputError(c.MSG_TAG_EMPTY)
        photos = self._load_photos()
        photo = self._require_photo(photos, photo_id)
        add_tag(photo, raw_tag)
        self._save_photos(photos)
        self._console.echo(c.MSG_TAG_UPDATED)
