"""Calendar identity and metadata models with Pydantic v2 validation."""

from enum import Enum

from pydantic import BaseModel, Field

from calmigrate.constants import CALENDAR_ROOT, DEFAULT_REFRESH_INTERVAL, USERS_URI_ROOT


class ResourceKind(str, Enum):
    """Resource type of an entry in a calendar home."""

    CALENDAR = "calendar"
    DELETED = "deleted"
    COLLECTION = "collection"


class ComponentKind(str, Enum):
    """Component types a calendar declares support for."""

    VEVENT = "VEVENT"
    VTODO = "VTODO"
    VJOURNAL = "VJOURNAL"


def principal_uri_for(user: str) -> str:
    """Principal uri of a user account."""
    return f"{USERS_URI_ROOT}{user}"


def user_for_principal(principal_uri: str) -> str:
    """User id from a principal uri (inverse of principal_uri_for)."""
    return principal_uri.rstrip("/").rsplit("/", 1)[-1]


class CalendarRef(BaseModel):
    """Opaque identity of a calendar in the store."""

    principal_uri: str
    calendar_id: int
    uri: str

    class Config:
        """Pydantic config."""

        frozen = True

    @property
    def path(self) -> str:
        """Calendar path relative to the calendar root."""
        return f"{CALENDAR_ROOT}/{user_for_principal(self.principal_uri)}/{self.uri}"


class CalendarProperties(BaseModel):
    """Raw properties the store holds for one calendar.

    Every field except the resource kind may be missing; defaults are
    applied by the PropertyResolver, not here.
    """

    resource_kind: ResourceKind
    display_name: str | None = None
    sync_token: str | None = None
    color: str | None = None
    refresh_interval: str | None = None
    components: set[ComponentKind] | None = None


class CalendarMetadata(BaseModel):
    """Resolved calendar metadata with defaults applied."""

    display_name: str
    color: str | None = None
    refresh_interval: str = DEFAULT_REFRESH_INTERVAL
    components: set[ComponentKind] = Field(
        default_factory=lambda: {ComponentKind.VEVENT}
    )
    resource_kind: ResourceKind = ResourceKind.CALENDAR
    sync_token: str | None = None

    @property
    def is_live(self) -> bool:
        """True if this describes a live (non-deleted) calendar."""
        return self.resource_kind == ResourceKind.CALENDAR


class ChildResource(BaseModel):
    """A resource one level below a calendar."""

    href: str
    calendar_data: str | None = None


class NewCalendar(BaseModel):
    """Properties for a calendar being created."""

    display_name: str = ""
    color: str = ""
    enabled: bool = True
    components: set[ComponentKind] = Field(
        default_factory=lambda: {ComponentKind.VEVENT}
    )
