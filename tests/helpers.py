"""Shared builders for calendar test data."""


def make_event_ics(
    uid: str,
    summary: str = "Meeting",
    dtstart: str = "20250101T090000",
    dtend: str = "20250101T100000",
    extra: str = "",
) -> str:
    """A complete single-event VCALENDAR document."""
    return (
        "BEGIN:VCALENDAR\r\n"
        "VERSION:2.0\r\n"
        "PRODID:-//Test//EN\r\n"
        "BEGIN:VEVENT\r\n"
        f"UID:{uid}\r\n"
        "DTSTAMP:20250101T000000Z\r\n"
        f"SUMMARY:{summary}\r\n"
        f"DTSTART:{dtstart}\r\n"
        f"DTEND:{dtend}\r\n"
        f"{extra}"
        "END:VEVENT\r\n"
        "END:VCALENDAR\r\n"
    )


def make_calendar_ics(events: list[tuple[str, str]], name: str = "Work", color: str = "#ff0000") -> str:
    """A multi-event VCALENDAR as produced by an export."""
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Test//EN",
        f"X-WR-CALNAME:{name}",
        f"X-APPLE-CALENDAR-COLOR:{color}",
    ]
    for uid, summary in events:
        lines += [
            "BEGIN:VEVENT",
            f"UID:{uid}",
            "DTSTAMP:20250101T000000Z",
            f"SUMMARY:{summary}",
            "DTSTART:20250101T090000",
            "DTEND:20250101T100000",
            "END:VEVENT",
        ]
    lines.append("END:VCALENDAR")
    return "\r\n".join(lines) + "\r\n"


class RecordingSink:
    """OutputSink that keeps every line for assertions."""

    def __init__(self):
        self.lines: list[str] = []
        self.errors: list[str] = []

    def writeln(self, message: str) -> None:
        self.lines.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


def make_timezone_ics(tzid: str, offset: str = "+0100") -> str:
    """A minimal VTIMEZONE block with a single STANDARD rule."""
    return (
        "BEGIN:VTIMEZONE\r\n"
        f"TZID:{tzid}\r\n"
        "BEGIN:STANDARD\r\n"
        "DTSTART:19701025T030000\r\n"
        f"TZOFFSETFROM:{offset}\r\n"
        f"TZOFFSETTO:{offset}\r\n"
        "END:STANDARD\r\n"
        "END:VTIMEZONE\r\n"
    )


def make_zoned_calendar_ics(uid: str = "zoned", tzid: str = "Europe/Berlin") -> str:
    """A calendar with two timezones and one event using the first of them."""
    return (
        "BEGIN:VCALENDAR\r\n"
        "VERSION:2.0\r\n"
        "PRODID:-//Test//EN\r\n"
        "X-WR-CALNAME:Travel\r\n"
        + make_timezone_ics(tzid)
        + make_timezone_ics("America/New_York", offset="-0500")
        + "BEGIN:VEVENT\r\n"
        f"UID:{uid}\r\n"
        "DTSTAMP:20250101T000000Z\r\n"
        "SUMMARY:Flight\r\n"
        f"DTSTART;TZID={tzid}:20250101T090000\r\n"
        f"DTEND;TZID={tzid}:20250101T100000\r\n"
        "END:VEVENT\r\n"
        "END:VCALENDAR\r\n"
    )
