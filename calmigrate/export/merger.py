"""Merge a calendar's objects into one exportable VCALENDAR."""

import logging
import re
from collections.abc import Mapping

from icalendar import Calendar, vDuration

from calmigrate.constants import (
    DEFAULT_PRODID,
    DEFAULT_REFRESH_INTERVAL,
    OBJECT_COMPONENTS,
    PROP_CALNAME,
    PROP_COLOR,
    PROP_PUBLISHED_TTL,
    PROP_REFRESH_INTERVAL,
)
from calmigrate.exceptions import ExportError
from calmigrate.models.calendar import CalendarMetadata
from calmigrate.models.document import EventBlob, MergedDocument

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


def _parse_refresh_interval(value: str):
    """Parse an ISO-8601 duration, falling back to the default when invalid."""
    try:
        return vDuration.from_ical(value)
    except ValueError:
        logger.debug(
            f"Invalid refresh-interval '{value}' set for calendar, "
            f"falling back to {DEFAULT_REFRESH_INTERVAL}"
        )
        return vDuration.from_ical(DEFAULT_REFRESH_INTERVAL)


def _component_lines(data: str) -> list[str]:
    """
    Lines of every component in a document, without its VCALENDAR envelope.

    Works on raw text so objects icalendar rejects can still be carried over
    unchanged. Envelope properties and folded continuations of dropped lines
    are left out.
    """
    lines = [line for line in _LINE_BREAK.split(data) if line.strip()]
    wrapped = bool(lines) and lines[0].strip().upper() == "BEGIN:VCALENDAR"
    envelope_depth = 1 if wrapped else 0

    kept = []
    depth = 0
    keep = False
    for line in lines:
        if line[0] in " \t":
            if keep:
                kept.append(line)
            continue
        marker = line.split(":", 1)[0].strip().upper()
        if marker == "BEGIN":
            depth += 1
            keep = depth > envelope_depth
        elif marker == "END":
            keep = depth > envelope_depth
            depth -= 1
        else:
            keep = depth > envelope_depth
        if keep:
            kept.append(line)
    return kept


def _build_envelope(metadata: CalendarMetadata, prodid: str) -> Calendar:
    """Top-level VCALENDAR carrying the calendar's metadata."""
    cal = Calendar()
    cal.add("prodid", prodid)
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add(PROP_CALNAME, metadata.display_name)
    if metadata.color:
        cal.add(PROP_COLOR, metadata.color)

    # RFC 7986 refresh interval plus the legacy property older clients read
    refresh_interval = _parse_refresh_interval(metadata.refresh_interval)
    cal.add(
        PROP_REFRESH_INTERVAL,
        vDuration(refresh_interval),
        parameters={"VALUE": "DURATION"},
    )
    cal.add(PROP_PUBLISHED_TTL, vDuration(refresh_interval))
    return cal


def merge_objects(
    metadata: CalendarMetadata,
    blobs: Mapping[str, EventBlob],
    prodid: str = DEFAULT_PRODID,
) -> MergedDocument:
    """
    Combine calendar metadata and per-event blobs into one document.

    Blobs are visited in sorted path order. Each blob's own VCALENDAR is
    stripped and its objects appended to the shared envelope. Timezones are
    kept once per TZID and emitted ahead of the objects. Event bodies are not
    validated: a blob icalendar cannot parse is merged as raw text after the
    parsed objects. The caller is expected to pass metadata of a live calendar.

    Args:
        metadata: Resolved metadata of the calendar
        blobs: Single-event documents keyed by resource path
        prodid: PRODID of the merged document

    Returns:
        MergedDocument wrapping the merged VCALENDAR

    Raises:
        ExportError: If an unparseable blob holds no component at all
    """
    cal = _build_envelope(metadata, prodid)

    timezones = []
    collected_tzids = set()
    objects = []
    passthrough: list[str] = []

    for path in sorted(blobs):
        blob = blobs[path]
        try:
            node = Calendar.from_ical(blob.data)
        except ValueError as e:
            lines = _component_lines(blob.data)
            if not lines:
                raise ExportError(
                    f"Calendar object {path} holds no calendar component: {e}"
                ) from e
            logger.warning(f"Could not parse calendar object {path}, merging it unchanged: {e}")
            passthrough.extend(lines)
            continue

        # Objects stored without a VCALENDAR wrapper
        if node.name in OBJECT_COMPONENTS:
            objects.append(node)
            continue

        for child in node.subcomponents:
            if child.name in OBJECT_COMPONENTS:
                objects.append(child)
            elif child.name == "VTIMEZONE":
                tzid = str(child.get("tzid", ""))
                if tzid in collected_tzids:
                    continue
                collected_tzids.add(tzid)
                timezones.append(child)

    for timezone in timezones:
        cal.add_component(timezone)
    for obj in objects:
        cal.add_component(obj)

    logger.info(
        f"Merged {len(objects)} objects and {len(timezones)} timezones "
        f"into '{metadata.display_name}'"
    )
    return MergedDocument(calendar=cal, passthrough=passthrough)
