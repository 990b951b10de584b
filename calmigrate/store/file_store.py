"""Directory-backed calendar store."""

import json
import logging
from datetime import datetime
from pathlib import Path

from icalendar import Calendar
from pydantic import BaseModel, Field

from calmigrate.constants import FILENAME_EXT, OBJECT_COMPONENTS
from calmigrate.exceptions import CalendarError, CalendarNotFoundError, DuplicateObjectError
from calmigrate.models.calendar import (
    CalendarProperties,
    CalendarRef,
    ChildResource,
    ComponentKind,
    NewCalendar,
    ResourceKind,
    user_for_principal,
)

logger = logging.getLogger(__name__)


class IndexEntry(BaseModel):
    """Location of one calendar in the store."""

    principal_uri: str
    uri: str


class StoreIndex(BaseModel):
    """Contents of index.json at the store root."""

    next_id: int = 1
    calendars: dict[int, IndexEntry] = Field(default_factory=dict)


class StoredCalendar(BaseModel):
    """Contents of calendar.json inside each calendar directory."""

    calendar_id: int
    principal_uri: str
    uri: str
    display_name: str | None = None
    color: str | None = None
    refresh_interval: str | None = None
    components: set[ComponentKind] = Field(
        default_factory=lambda: {ComponentKind.VEVENT}
    )
    enabled: bool = True
    deleted: bool = False
    sync_token: int = 1
    created: datetime
    # object uri -> UID
    objects: dict[str, str | None] = Field(default_factory=dict)


class FileCalendarStore:
    """Calendar store keeping one directory per calendar.

    Layout:
        <root>/index.json
        <root>/<user>/<calendar_id>/calendar.json
        <root>/<user>/<calendar_id>/objects/<object_uri>
    """

    def __init__(self, root: Path):
        """
        Initialize store.

        Args:
            root: Base directory of the store
        """
        self.root = Path(root)

    def _index_path(self) -> Path:
        return self.root / "index.json"

    def _calendar_dir(self, principal_uri: str, calendar_id: int) -> Path:
        return self.root / user_for_principal(principal_uri) / str(calendar_id)

    def _metadata_path(self, principal_uri: str, calendar_id: int) -> Path:
        return self._calendar_dir(principal_uri, calendar_id) / "calendar.json"

    def _objects_dir(self, principal_uri: str, calendar_id: int) -> Path:
        return self._calendar_dir(principal_uri, calendar_id) / "objects"

    def _load_index(self) -> StoreIndex:
        path = self._index_path()
        if not path.exists():
            return StoreIndex()
        with open(path, "r", encoding="utf-8") as f:
            return StoreIndex.model_validate(json.load(f))

    def _save_index(self, index: StoreIndex) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        with open(self._index_path(), "w", encoding="utf-8") as f:
            json.dump(index.model_dump(mode="json"), f, indent=2)

    def _load_calendar(self, principal_uri: str, calendar_id: int) -> StoredCalendar | None:
        path = self._metadata_path(principal_uri, calendar_id)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return StoredCalendar.model_validate(json.load(f))

    def _save_calendar(self, stored: StoredCalendar) -> None:
        path = self._metadata_path(stored.principal_uri, stored.calendar_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(stored.model_dump(mode="json"), f, indent=2)

    def _require_calendar(self, calendar_id: int) -> StoredCalendar:
        entry = self._load_index().calendars.get(calendar_id)
        stored = (
            self._load_calendar(entry.principal_uri, calendar_id) if entry else None
        )
        if stored is None:
            raise CalendarNotFoundError(f"Calendar {calendar_id} does not exist")
        return stored

    def get_calendars_for_principal(
        self, principal_uri: str, include_deleted: bool = False
    ) -> list[CalendarRef]:
        """
        Enumerate calendars of a principal, ordered by id.

        Args:
            principal_uri: Owning principal
            include_deleted: If True, also list soft-deleted calendars

        Returns:
            List of CalendarRef
        """
        refs = []
        for calendar_id, entry in sorted(self._load_index().calendars.items()):
            if entry.principal_uri != principal_uri:
                continue
            if not include_deleted:
                stored = self._load_calendar(principal_uri, calendar_id)
                if stored is None or stored.deleted:
                    continue
            refs.append(
                CalendarRef(
                    principal_uri=principal_uri, calendar_id=calendar_id, uri=entry.uri
                )
            )
        return refs

    def get_calendar_by_id(self, calendar_id: int) -> CalendarRef | None:
        """Look up a calendar by id."""
        entry = self._load_index().calendars.get(calendar_id)
        if entry is None:
            return None
        if not self._metadata_path(entry.principal_uri, calendar_id).exists():
            return None
        return CalendarRef(
            principal_uri=entry.principal_uri, calendar_id=calendar_id, uri=entry.uri
        )

    def fetch_properties(self, ref: CalendarRef) -> CalendarProperties | None:
        """Return stored properties, None if the calendar is gone."""
        stored = self._load_calendar(ref.principal_uri, ref.calendar_id)
        if stored is None:
            return None
        return CalendarProperties(
            resource_kind=ResourceKind.DELETED if stored.deleted else ResourceKind.CALENDAR,
            display_name=stored.display_name,
            sync_token=f"{stored.sync_token}",
            color=stored.color,
            refresh_interval=stored.refresh_interval,
            components=stored.components,
        )

    def fetch_children(self, ref: CalendarRef) -> list[ChildResource]:
        """List the files below a calendar, with calendar-data for .ics objects."""
        objects_dir = self._objects_dir(ref.principal_uri, ref.calendar_id)
        if not objects_dir.exists():
            return []

        children = []
        for path in sorted(objects_dir.iterdir()):
            if not path.is_file():
                continue
            href = f"/{ref.path}/{path.name}"
            if path.suffix == FILENAME_EXT:
                children.append(
                    ChildResource(href=href, calendar_data=path.read_text(encoding="utf-8"))
                )
            else:
                children.append(ChildResource(href=href))
        return children

    def create_calendar(
        self, principal_uri: str, uri: str, properties: NewCalendar
    ) -> int:
        """
        Create a calendar.

        Raises:
            CalendarError: If a live calendar with this uri already exists
        """
        existing = {ref.uri for ref in self.get_calendars_for_principal(principal_uri)}
        if uri in existing:
            raise CalendarError(f"Calendar uri '{uri}' already exists for {principal_uri}")

        index = self._load_index()
        calendar_id = index.next_id
        index.next_id += 1
        index.calendars[calendar_id] = IndexEntry(principal_uri=principal_uri, uri=uri)

        stored = StoredCalendar(
            calendar_id=calendar_id,
            principal_uri=principal_uri,
            uri=uri,
            display_name=properties.display_name or None,
            color=properties.color or None,
            components=properties.components,
            enabled=properties.enabled,
            created=datetime.now(),
        )
        self._save_calendar(stored)
        self._save_index(index)

        logger.info(f"Created calendar {calendar_id} ({principal_uri}/{uri})")
        return calendar_id

    def create_calendar_object(
        self, calendar_id: int, object_uri: str, calendar_data: str
    ) -> None:
        """
        Insert a calendar object.

        Raises:
            CalendarNotFoundError: If the calendar does not exist
            DuplicateObjectError: If the object uri or UID already exists
        """
        stored = self._require_calendar(calendar_id)

        if object_uri in stored.objects:
            raise DuplicateObjectError(f"Calendar object {object_uri} already exists")

        uid = _extract_uid(calendar_data)
        if uid is not None and uid in stored.objects.values():
            raise DuplicateObjectError(
                f"Calendar object with uid {uid} already exists in calendar {calendar_id}"
            )

        objects_dir = self._objects_dir(stored.principal_uri, calendar_id)
        objects_dir.mkdir(parents=True, exist_ok=True)
        (objects_dir / object_uri).write_text(calendar_data, encoding="utf-8")

        stored.objects[object_uri] = uid
        stored.sync_token += 1
        self._save_calendar(stored)

    def delete_calendar(self, calendar_id: int) -> None:
        """Soft-delete a calendar; its files stay on disk."""
        stored = self._require_calendar(calendar_id)
        stored.deleted = True
        stored.sync_token += 1
        self._save_calendar(stored)

    def update_properties(
        self,
        calendar_id: int,
        display_name: str | None = None,
        color: str | None = None,
        refresh_interval: str | None = None,
    ) -> None:
        """Update descriptive properties of a calendar."""
        stored = self._require_calendar(calendar_id)
        if display_name is not None:
            stored.display_name = display_name
        if color is not None:
            stored.color = color
        if refresh_interval is not None:
            stored.refresh_interval = refresh_interval
        stored.sync_token += 1
        self._save_calendar(stored)

    def count_objects(self, calendar_id: int) -> int:
        """Number of objects stored in a calendar."""
        return len(self._require_calendar(calendar_id).objects)


def _extract_uid(calendar_data: str) -> str | None:
    """UID of the first object in a calendar document, if any."""
    try:
        cal = Calendar.from_ical(calendar_data)
    except ValueError as e:
        raise CalendarError(f"Invalid calendar object data: {e}") from e

    for component in cal.walk():
        if component.name in OBJECT_COMPONENTS:
            uid = component.get("uid")
            return str(uid) if uid else None
    return None
