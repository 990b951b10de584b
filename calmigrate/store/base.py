"""Collaborator protocols used by the migration core."""

from pathlib import Path
from typing import Protocol

from calmigrate.models.calendar import (
    CalendarProperties,
    CalendarRef,
    ChildResource,
    NewCalendar,
)


class CalendarStore(Protocol):
    """Protocol for the internal calendar store."""

    def get_calendars_for_principal(self, principal_uri: str) -> list[CalendarRef]:
        """Enumerate the live calendars of a principal."""
        ...

    def get_calendar_by_id(self, calendar_id: int) -> CalendarRef | None:
        """Look up a calendar by id, None if it no longer exists."""
        ...

    def fetch_properties(self, ref: CalendarRef) -> CalendarProperties | None:
        """Return the stored properties of a calendar, None if unknown."""
        ...

    def fetch_children(self, ref: CalendarRef) -> list[ChildResource]:
        """List resources one level below a calendar with their calendar-data."""
        ...

    def create_calendar(
        self, principal_uri: str, uri: str, properties: NewCalendar
    ) -> int:
        """Create a calendar and return its id."""
        ...

    def create_calendar_object(
        self, calendar_id: int, object_uri: str, calendar_data: str
    ) -> None:
        """Insert a calendar object.

        Raises:
            DuplicateObjectError: If the object uri or its UID already exists
        """
        ...


class FileStorage(Protocol):
    """Protocol for byte-level file access."""

    def read_bytes(self, directory: Path, filename: str) -> bytes:
        """Read a file; raises StorageIOError on failure."""
        ...

    def write_bytes(self, directory: Path, filename: str, data: bytes) -> Path:
        """Write a file and return its path; raises StorageIOError on failure."""
        ...


class OutputSink(Protocol):
    """Line-based progress output."""

    def writeln(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...
