"""File naming for exported calendars."""

import re
from collections.abc import Collection
from datetime import date

from calmigrate.constants import FILENAME_EXT

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9\-_ ]")

DEFAULT_BASE_NAME = "calendar"


def sanitize_name(name: str) -> str:
    """Remove every character outside [A-Za-z0-9-_ ]."""
    return _UNSAFE_CHARS.sub("", name)


def _base_name(name: str, fallback: str) -> str:
    """Sanitized name, or the sanitized fallback when nothing printable is left."""
    for candidate in (name, fallback):
        sanitized = sanitize_name(candidate)
        if sanitized.strip():
            return sanitized
    return DEFAULT_BASE_NAME


def export_filename(
    name: str, on: date | None = None, fallback: str = DEFAULT_BASE_NAME
) -> str:
    """
    Build the export filename for a calendar.

    Args:
        name: Calendar display name
        on: Export date (default: today)
        fallback: Used instead of name when it sanitizes to nothing

    Returns:
        Filename like "Team Q1Q2-2025-01-31.ics"
    """
    on = on or date.today()
    return f"{_base_name(name, fallback)}-{on.strftime('%Y-%m-%d')}{FILENAME_EXT}"


def unique_export_filename(
    name: str, uri: str, taken: Collection[str], on: date | None = None
) -> str:
    """
    Build an export filename that is not in taken.

    Calendars sharing a display name are told apart by their uri, which is
    unique per user: "Personal-2025-01-01.ics" is followed by
    "Personal personal-old-2025-01-01.ics".

    Args:
        name: Calendar display name
        uri: Calendar uri
        taken: Filenames already written in this run
        on: Export date (default: today)
    """
    filename = export_filename(name, on=on, fallback=uri)
    base = _base_name(name, uri)
    attempt = 1
    while filename in taken:
        qualifier = uri if attempt == 1 else f"{uri} {attempt}"
        filename = export_filename(f"{base} {qualifier}", on=on, fallback=qualifier)
        attempt += 1
    return filename
