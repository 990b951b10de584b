"""Calendar documents moving through export and import."""

from dataclasses import dataclass, field

from icalendar import Calendar, Event, Timezone


@dataclass(frozen=True)
class EventBlob:
    """One complete single-event calendar document, keyed by its resource path."""

    path: str
    data: str


@dataclass
class MergedDocument:
    """A calendar's metadata and all of its objects in one VCALENDAR."""

    calendar: Calendar
    # Content lines of objects icalendar could not parse, kept verbatim
    passthrough: list[str] = field(default_factory=list)

    @property
    def event_count(self) -> int:
        """Number of VEVENT sub-components, parsed or passed through."""
        parsed = sum(1 for c in self.calendar.subcomponents if c.name == "VEVENT")
        raw = sum(1 for line in self.passthrough if line.strip().upper() == "BEGIN:VEVENT")
        return parsed + raw

    def to_ical(self) -> bytes:
        """Serialize to iCalendar bytes, passthrough lines last inside the envelope."""
        data = self.calendar.to_ical()
        if not self.passthrough:
            return data
        end = b"END:VCALENDAR\r\n"
        body = "".join(f"{line}\r\n" for line in self.passthrough).encode("utf-8")
        return data[: -len(end)] + body + end


@dataclass
class ParsedCalendar:
    """Structured result of parsing an imported document.

    Use as a context manager so the tree is released once its events have
    been consumed, even if loading fails half way.
    """

    name: str = ""
    color: str = ""
    events: list[Event] = field(default_factory=list)
    # Top-level VTIMEZONE components by TZID
    timezones: dict[str, Timezone] = field(default_factory=dict)
    released: bool = False

    def release(self) -> None:
        """Drop the parsed tree."""
        self.events.clear()
        self.timezones.clear()
        self.released = True

    def __enter__(self) -> "ParsedCalendar":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
