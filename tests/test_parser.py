"""Tests for the import parser."""

import pytest

from calmigrate.exceptions import ValidationError
from calmigrate.importer.parser import parse_calendar, validate_structure
from tests.helpers import make_calendar_ics, make_zoned_calendar_ics


def test_parse_calendar_extracts_hints_and_events():
    data = make_calendar_ics([("a", "First"), ("b", "Second")], name="Work", color="#00ff00")

    parsed = parse_calendar(data.encode("utf-8"))

    assert parsed.name == "Work"
    assert parsed.color == "#00ff00"
    assert [str(e["uid"]) for e in parsed.events] == ["a", "b"]
    assert [str(e["summary"]) for e in parsed.events] == ["First", "Second"]


def test_parse_calendar_defaults_missing_hints():
    data = (
        "BEGIN:VCALENDAR\r\n"
        "VERSION:2.0\r\n"
        "PRODID:-//Test//EN\r\n"
        "END:VCALENDAR\r\n"
    )

    parsed = parse_calendar(data)

    assert parsed.name == ""
    assert parsed.color == ""
    assert parsed.events == []


def test_parse_calendar_accepts_bom():
    data = b"\xef\xbb\xbf" + make_calendar_ics([("a", "First")]).encode("utf-8")

    parsed = parse_calendar(data)

    assert len(parsed.events) == 1


def test_parse_calendar_keeps_event_subcomponents():
    data = make_calendar_ics([("a", "First")]).replace(
        "END:VEVENT",
        "BEGIN:VALARM\r\nACTION:DISPLAY\r\nTRIGGER:-PT15M\r\nDESCRIPTION:Soon\r\nEND:VALARM\r\nEND:VEVENT",
    )

    parsed = parse_calendar(data)

    assert [c.name for c in parsed.events[0].subcomponents] == ["VALARM"]


def test_parse_calendar_unfolds_long_lines():
    data = make_calendar_ics([("a", "First")]).replace(
        "SUMMARY:First", "SUMMARY:A very long\r\n  summary"
    )

    parsed = parse_calendar(data)

    assert str(parsed.events[0]["summary"]) == "A very long summary"


def test_parse_calendar_ignores_non_event_components():
    data = make_calendar_ics([("a", "First")]).replace(
        "END:VCALENDAR",
        "BEGIN:VTODO\r\nUID:t\r\nSUMMARY:Task\r\nEND:VTODO\r\nEND:VCALENDAR",
    )

    parsed = parse_calendar(data)

    assert [str(e["uid"]) for e in parsed.events] == ["a"]


def test_parse_calendar_unterminated_envelope():
    data = make_calendar_ics([("a", "First")]).replace("END:VCALENDAR\r\n", "")

    with pytest.raises(ValidationError, match="Unterminated"):
        parse_calendar(data)


def test_parse_calendar_unterminated_event():
    data = make_calendar_ics([("a", "First")]).replace("END:VEVENT\r\n", "")

    with pytest.raises(ValidationError, match="does not match"):
        parse_calendar(data)


def test_parse_calendar_end_without_begin():
    data = "END:VCALENDAR\r\n"

    with pytest.raises(ValidationError, match="without a BEGIN"):
        parse_calendar(data)


def test_parse_calendar_requires_vcalendar():
    data = (
        "BEGIN:VEVENT\r\n"
        "UID:a\r\n"
        "SUMMARY:First\r\n"
        "END:VEVENT\r\n"
    )

    with pytest.raises(ValidationError, match="expected VCALENDAR"):
        parse_calendar(data)


def test_parse_calendar_rejects_two_envelopes():
    single = make_calendar_ics([("a", "First")])

    with pytest.raises(ValidationError, match="multiple top-level"):
        parse_calendar(single + single)


def test_parse_calendar_rejects_content_outside_envelope():
    data = "VERSION:2.0\r\n" + make_calendar_ics([("a", "First")])

    with pytest.raises(ValidationError, match="outside of any component"):
        parse_calendar(data)


def test_parse_calendar_rejects_empty_document():
    with pytest.raises(ValidationError, match="no calendar component"):
        parse_calendar(b"")


def test_parse_calendar_rejects_invalid_utf8():
    with pytest.raises(ValidationError, match="UTF-8"):
        parse_calendar(b"BEGIN:VCALENDAR\r\nX-WR-CALNAME:\xff\xfe\r\nEND:VCALENDAR\r\n")


def test_validate_structure_accepts_nested_components():
    data = make_calendar_ics([("a", "First")]).replace(
        "END:VEVENT",
        "BEGIN:VALARM\r\nACTION:DISPLAY\r\nTRIGGER:-PT15M\r\nEND:VALARM\r\nEND:VEVENT",
    )

    validate_structure(data)


def test_parsed_calendar_released_after_use():
    parsed = parse_calendar(make_calendar_ics([("a", "First")]))

    with parsed as calendar:
        assert len(calendar.events) == 1

    assert parsed.released
    assert parsed.events == []


def test_parse_calendar_collects_timezones():
    parsed = parse_calendar(make_zoned_calendar_ics())

    assert sorted(parsed.timezones) == ["America/New_York", "Europe/Berlin"]
    assert parsed.timezones["Europe/Berlin"].name == "VTIMEZONE"


def test_release_drops_timezones():
    parsed = parse_calendar(make_zoned_calendar_ics())

    parsed.release()

    assert parsed.timezones == {}
