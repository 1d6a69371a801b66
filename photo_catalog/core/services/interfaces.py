"""Core service interfaces and shared data structures.

This module defines the result objects returned by document storage so that
callers handle success and failure explicitly instead of testing for None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class LoadResult:
    """Outcome of loading one JSON document.

    Attributes:
        document: Path of the document that was read.
        value: Parsed root JSON value (only meaningful when `ok`).
        error: Description of the failure, or None on success.
    """

    document: str
    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when the document was read and parsed."""
        return self.error is None


@dataclass
class SaveResult:
    """Outcome of writing one JSON document.

    Attributes:
        document: Path of the document that was written.
        error: Description of the failure, or None on success.
    """

    document: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when the document was fully written."""
        return self.error is None
