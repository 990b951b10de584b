"""Load parsed calendars into the store."""

import logging
import uuid
from collections.abc import Mapping

from icalendar import Calendar, Event, Timezone

from calmigrate.constants import DEFAULT_PRODID, FILENAME_EXT
from calmigrate.exceptions import DuplicateObjectError, ImportAbortedError
from calmigrate.models.calendar import ComponentKind, NewCalendar
from calmigrate.models.document import ParsedCalendar
from calmigrate.models.outcome import ImportOutcome, InsertResult, InsertStatus
from calmigrate.store.base import CalendarStore

logger = logging.getLogger(__name__)


def referenced_tzids(event: Event) -> list[str]:
    """TZID parameters used by an event and its sub-components, in order of use."""
    tzids = []
    for component in event.walk():
        for value in component.values():
            for item in value if isinstance(value, list) else [value]:
                params = getattr(item, "params", None)
                tzid = params.get("TZID") if params else None
                if tzid and str(tzid) not in tzids:
                    tzids.append(str(tzid))
    return tzids


def wrap_event(
    event: Event,
    prodid: str = DEFAULT_PRODID,
    timezones: Mapping[str, Timezone] | None = None,
) -> str:
    """
    Wrap one VEVENT into a standalone VCALENDAR document.

    VTIMEZONE components from timezones are included for every TZID the
    event refers to; TZIDs without a definition are left as they are.
    """
    cal = Calendar()
    cal.add("prodid", prodid)
    cal.add("version", "2.0")
    for tzid in referenced_tzids(event):
        timezone = (timezones or {}).get(tzid)
        if timezone is not None:
            cal.add_component(timezone)
    cal.add_component(event)
    return cal.to_ical().decode("utf-8")


class ImportLoader:
    """Create the destination calendar and insert each event individually."""

    def __init__(self, store: CalendarStore, prodid: str = DEFAULT_PRODID):
        """
        Initialize loader.

        Args:
            store: Calendar store to create the calendar and objects in
            prodid: PRODID for each inserted single-event document
        """
        self.store = store
        self.prodid = prodid

    def _insert(
        self, calendar_id: int, event: Event, timezones: Mapping[str, Timezone]
    ) -> InsertResult:
        object_uri = f"{uuid.uuid4()}{FILENAME_EXT}"
        try:
            self.store.create_calendar_object(
                calendar_id, object_uri, wrap_event(event, self.prodid, timezones)
            )
        except DuplicateObjectError as e:
            return InsertResult(InsertStatus.DUPLICATE_SKIPPED, object_uri, e)
        except Exception as e:
            return InsertResult(InsertStatus.FATAL, object_uri, e)
        return InsertResult(InsertStatus.INSERTED, object_uri)

    def load(
        self, principal_uri: str, calendar_uri: str, parsed: ParsedCalendar
    ) -> ImportOutcome:
        """
        Create a calendar from a parsed document.

        Duplicate rejections are counted and skipped. Any other insertion
        failure aborts the import; events inserted before it remain. The
        parsed calendar is released on return either way.

        Args:
            principal_uri: Principal to create the calendar under
            calendar_uri: Allocated, collision-free calendar uri
            parsed: Parsed import document

        Returns:
            ImportOutcome with inserted and duplicate counts

        Raises:
            ImportAbortedError: On a non-duplicate insertion failure
        """
        with parsed:
            calendar_id = self.store.create_calendar(
                principal_uri,
                calendar_uri,
                NewCalendar(
                    display_name=parsed.name,
                    color=parsed.color,
                    enabled=True,
                    components={ComponentKind.VEVENT},
                ),
            )
            logger.info(f"Created calendar {calendar_uri} (id {calendar_id})")

            inserted = 0
            duplicates = 0
            for event in parsed.events:
                result = self._insert(calendar_id, event, parsed.timezones)
                if result.status == InsertStatus.INSERTED:
                    inserted += 1
                elif result.status == InsertStatus.DUPLICATE_SKIPPED:
                    duplicates += 1
                    logger.info(f"Skipped duplicate event: {result.error}")
                else:
                    raise ImportAbortedError(
                        f"Could not import event into calendar {calendar_uri}: "
                        f"{result.error}"
                    ) from result.error

        logger.info(
            f"Imported {inserted} events into {calendar_uri}, "
            f"skipped {duplicates} duplicates"
        )
        return ImportOutcome(
            calendar_id=calendar_id,
            calendar_uri=calendar_uri,
            inserted_count=inserted,
            duplicate_count=duplicates,
        )
