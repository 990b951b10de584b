"""Models for calendar migration."""

from calmigrate.models.calendar import (
    CalendarMetadata,
    CalendarProperties,
    CalendarRef,
    ChildResource,
    ComponentKind,
    NewCalendar,
    ResourceKind,
    principal_uri_for,
    user_for_principal,
)
from calmigrate.models.document import EventBlob, MergedDocument, ParsedCalendar
from calmigrate.models.outcome import (
    ExportedCalendar,
    ExportReport,
    ImportOutcome,
    InsertResult,
    InsertStatus,
)

__all__ = [
    "CalendarMetadata",
    "CalendarProperties",
    "CalendarRef",
    "ChildResource",
    "ComponentKind",
    "NewCalendar",
    "ResourceKind",
    "principal_uri_for",
    "user_for_principal",
    "EventBlob",
    "MergedDocument",
    "ParsedCalendar",
    "ExportedCalendar",
    "ExportReport",
    "ImportOutcome",
    "InsertResult",
    "InsertStatus",
]
