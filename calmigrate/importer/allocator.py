"""Collision-free calendar uri allocation for imports."""

from collections.abc import Collection

from calmigrate.constants import FILENAME_EXT


def candidate_base(filename: str) -> str:
    """
    Derive the candidate calendar uri from an import filename.

    The part before the first '-' is used, so "work-2025-01-31.ics" gives
    "work". A filename without '-' only loses its .ics extension; an empty
    result falls back to "calendar".
    """
    base = filename.split("-", 1)[0]
    if base == filename and base.lower().endswith(FILENAME_EXT):
        base = base[: -len(FILENAME_EXT)]
    return base or "calendar"


def allocate_uri(base: str, existing: Collection[str]) -> str:
    """
    Return base, or the first of base-1, base-2, ... not in existing.

    Args:
        base: Candidate uri
        existing: Uris already taken by the principal

    Returns:
        A uri not in existing
    """
    uri = base
    suffix = 1
    while uri in existing:
        uri = f"{base}-{suffix}"
        suffix += 1
    return uri
