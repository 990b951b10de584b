"""Exception hierarchy for calendar migration."""


class CalendarError(Exception):
    """Base exception for calendar migration."""

    pass


class CalendarNotFoundError(CalendarError):
    """Calendar identity no longer resolves to a live calendar."""

    pass


class ValidationError(CalendarError):
    """Imported document is not a well-formed calendar."""

    pass


class DuplicateObjectError(CalendarError):
    """Calendar object conflicts with an existing object in the store."""

    pass


class ImportAbortedError(CalendarError):
    """Non-duplicate failure while inserting an imported event."""

    pass


class StorageIOError(CalendarError, OSError):
    """Reading or writing a migration file failed."""

    pass


class ExportError(CalendarError):
    """Error during calendar export."""

    pass
