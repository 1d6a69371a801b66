"""Rendering helpers for dates, lists and resolutions.

All helpers are total: they never raise on odd input and fall back to a
fixed text instead, so callers can print their result directly.
"""

from __future__ import annotations

from collections.abc import Iterable
import calendar
import math
from typing import Any

from photo_catalog.core.lookup import same_id
from photo_catalog.core.models import Album

UNKNOWN_DATE = "Unknown"
INVALID_DATE = "Invalid date"

# Largest distance from the epoch a timestamp may have (100 million days)
MAX_MILLIS = 8_640_000_000_000_000
MILLIS_PER_DAY = 86_400_000


def _timestamp_millis(value: Any) -> float | None:
    """Coerce a stored timestamp to epoch milliseconds; None if not numeric."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return None
    return None


def format_date(timestamp: Any) -> str:
    """Render an epoch-milliseconds timestamp as e.g. ``January 5, 2024``.

    Returns "Unknown" for a missing timestamp and "Invalid date" when the
    value is not numeric or lies more than 100 million days from the epoch.
    Years before 1 are shown as BC.
    """
    if timestamp is None:
        return UNKNOWN_DATE
    millis = _timestamp_millis(timestamp)
    if millis is None or not math.isfinite(millis):
        return INVALID_DATE
    millis = math.trunc(millis)
    if abs(millis) > MAX_MILLIS:
        return INVALID_DATE
    year, month, day = civil_from_days(millis // MILLIS_PER_DAY)
    year_text = str(year) if year > 0 else f"{1 - year} BC"
    return f"{calendar.month_name[month]} {day}, {year_text}"


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Proleptic Gregorian (year, month, day) for a count of days since 1970-01-01.

    Works on plain integers, so it is not bound to `datetime`'s years 1-9999.
    Year 0 is 1 BC.
    """
    shifted = days + 719_468
    era = shifted // 146_097
    day_of_era = shifted - era * 146_097
    year_of_era = (
        day_of_era - day_of_era // 1_460 + day_of_era // 36_524 - day_of_era // 146_096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def join_with_separator(items: Iterable[Any], separator: str, fallback: str = "") -> str:
    """Join `items` as text with `separator`; `fallback` when there are none."""
    joined = separator.join(str(item) for item in items)
    return joined or fallback


def resolve_album_names(album_ids: Iterable[Any], albums: Any) -> list[str]:
    """Map album ids to album names in the given order, dropping dangling ids."""
    if not isinstance(albums, list):
        return []
    known = [Album(entry) for entry in albums if isinstance(entry, dict)]
    names: list[str] = []
    for album_id in album_ids:
        for album in known:
            if same_id(album.id, album_id):
                names.append(album.name or "")
                break
    return names


def _dimension(value: Any) -> str | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_resolution(resolution: Any) -> str:
    """Render ``[w, h]`` as ``"WxH"``; text passes through; anything else is ""."""
    if isinstance(resolution, str):
        return resolution
    if isinstance(resolution, (list, tuple)) and len(resolution) >= 2:
        width = _dimension(resolution[0])
        height = _dimension(resolution[1])
        if width is not None and height is not None:
            return f"{width}x{height}"
    return ""
