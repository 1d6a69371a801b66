"""
Console text constants centralized for reuse across view modules.

Prompts and messages are part of the tool's observable behavior; change them
only together with the tests that pin them.
"""

from __future__ import annotations

BANNER: str = "Digital Media Catalog - INFS3201"

# Menu entries in display order; the key is what the user types
MENU_FIND: str = "1"
MENU_UPDATE: str = "2"
MENU_ALBUM_LIST: str = "3"
MENU_TAG: str = "4"
MENU_EXIT: str = "5"

MENU_ITEMS: list[tuple[str, str]] = [
    (MENU_FIND, "Find Photo"),
    (MENU_UPDATE, "Update Photo Details"),
    (MENU_ALBUM_LIST, "Album Photo List"),
    (MENU_TAG, "Tag Photo"),
    (MENU_EXIT, "Exit"),
]

# Prompts
PROMPT_SELECTION: str = "Your selection> "
PROMPT_PHOTO_ID: str = "Photo ID? "
PROMPT_TAG_PHOTO_ID: str = "What photo ID to tag? "
PROMPT_TAG: str = "What tag to add (single tag)? "
PROMPT_ALBUM_NAME: str = "What is the name of the album? "
PROMPT_FIELD: str = "Enter value for {field} [{current}]: "

# Messages
MSG_INVALID_SELECTION: str = "Invalid selection"
MSG_GOODBYE: str = "Goodbye"
MSG_UNEXPECTED: str = "Unexpected error {error}"
MSG_LOAD_DATA_FILES: str = "Could not load data files"
MSG_LOAD_PHOTOS: str = "Could not load photos"
MSG_LOAD_DATA: str = "Could not load data"
MSG_PHOTO_NOT_FOUND: str = "Photo not found"
MSG_ALBUM_NOT_FOUND: str = "Album not found"
MSG_ALBUM_NAME_REQUIRED: str = "Album name required"
MSG_REUSE_HINT: str = "Press enter to reuse existing value."
MSG_PHOTO_UPDATED: str = "Photo updated"
MSG_TAG_EMPTY: str = "Tag cannot be empty"
MSG_TAG_UPDATED: str = "Updated!"
MSG_READ_ERROR: str = "Error reading file {document} - {error}"
MSG_WRITE_ERROR: str = "Error writing file {document} - {error}"

# Album photo list output
ALBUM_LIST_HEADER: str = "filename,resolution,tags"
ALBUM_LIST_TAG_SEPARATOR: str = ":"
DETAIL_SEPARATOR: str = ", "
DETAIL_FALLBACK: str = "None"
