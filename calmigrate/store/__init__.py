"""Store collaborators for calendar migration."""

from calmigrate.store.base import CalendarStore, FileStorage, OutputSink
from calmigrate.store.file_storage import LocalFileStorage
from calmigrate.store.file_store import FileCalendarStore

__all__ = [
    "CalendarStore",
    "FileStorage",
    "OutputSink",
    "FileCalendarStore",
    "LocalFileStorage",
]
