"""Parse and validate imported calendar documents."""

import logging
import re

from icalendar import Calendar

from calmigrate.constants import PROP_CALNAME, PROP_COLOR
from calmigrate.exceptions import ValidationError
from calmigrate.models.document import ParsedCalendar

logger = logging.getLogger(__name__)

# Folded content lines continue with a single space or tab (RFC 5545 3.1)
_FOLD = re.compile(r"\r?\n[ \t]")


def _content_lines(text: str):
    """Yield unfolded, non-empty content lines."""
    for line in _FOLD.sub("", text).splitlines():
        if line.strip():
            yield line


def _line_name(line: str) -> str:
    return line.split(":", 1)[0].split(";", 1)[0].strip().upper()


def _line_value(line: str) -> str:
    if ":" not in line:
        raise ValidationError(f"Malformed content line: {line!r}")
    return line.split(":", 1)[1].strip().upper()


def validate_structure(text: str) -> None:
    """
    Check that BEGIN/END markers form exactly one VCALENDAR envelope.

    Raises:
        ValidationError: On unbalanced or mismatched markers, content outside
            the envelope, or a top-level component other than VCALENDAR
    """
    stack: list[str] = []
    top_level = []

    for line in _content_lines(text):
        name = _line_name(line)
        if name == "BEGIN":
            component = _line_value(line)
            if not stack and top_level:
                raise ValidationError(
                    f"Found multiple top-level components ({top_level[0]}, {component})"
                )
            stack.append(component)
        elif name == "END":
            component = _line_value(line)
            if not stack:
                raise ValidationError(f"END:{component} encountered without a BEGIN")
            if stack[-1] != component:
                raise ValidationError(
                    f"END:{component} does not match BEGIN:{stack[-1]}"
                )
            stack.pop()
            if not stack:
                top_level.append(component)
        elif not stack:
            raise ValidationError(f"Property {name} outside of any component")

    if stack:
        raise ValidationError(f"Unterminated component BEGIN:{stack[-1]}")
    if not top_level:
        raise ValidationError("Found no calendar component")
    if top_level[0] != "VCALENDAR":
        raise ValidationError(f"Top-level component is {top_level[0]}, expected VCALENDAR")


def parse_calendar(data: bytes | str) -> ParsedCalendar:
    """
    Parse an exported calendar document.

    Args:
        data: Raw document content

    Returns:
        ParsedCalendar with name/color hints, the ordered VEVENT components
        and the timezones they may refer to

    Raises:
        ValidationError: If the document is not a well-formed VCALENDAR
    """
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ValidationError(f"Calendar is not valid UTF-8: {e}") from e
    else:
        text = data

    validate_structure(text)

    try:
        cal = Calendar.from_ical(text)
    except ValueError as e:
        raise ValidationError(f"Could not parse calendar: {e}") from e

    if cal.get("version") is None:
        logger.warning("Imported calendar has no VERSION property")

    events = [c for c in cal.subcomponents if c.name == "VEVENT"]
    timezones = {
        str(c["tzid"]): c
        for c in cal.subcomponents
        if c.name == "VTIMEZONE" and c.get("tzid")
    }
    logger.info(
        f"Parsed calendar with {len(events)} events and {len(timezones)} timezones"
    )

    return ParsedCalendar(
        name=str(cal.get(PROP_CALNAME, "")),
        color=str(cal.get(PROP_COLOR, "")),
        events=events,
        timezones=timezones,
    )
