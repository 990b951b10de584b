"""Result models for import and export runs."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class InsertStatus(str, Enum):
    """Outcome of inserting one imported event."""

    INSERTED = "inserted"
    DUPLICATE_SKIPPED = "duplicate_skipped"
    FATAL = "fatal"


@dataclass(frozen=True)
class InsertResult:
    """Result of one calendar object insertion."""

    status: InsertStatus
    object_uri: str
    error: Exception | None = None


class ImportOutcome(BaseModel):
    """Summary of one imported calendar file."""

    calendar_id: int
    calendar_uri: str
    inserted_count: int = 0
    duplicate_count: int = 0


class ExportedCalendar(BaseModel):
    """One calendar written during an export run."""

    calendar_id: int
    filename: str
    path: Path
    event_count: int


@dataclass
class ExportReport:
    """Summary of an export run across all of a user's calendars."""

    user: str
    exported: list[ExportedCalendar] = field(default_factory=list)
    not_found: list[int] = field(default_factory=list)

    @property
    def exported_count(self) -> int:
        return len(self.exported)
