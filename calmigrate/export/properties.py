"""Resolve calendar metadata for export."""

import logging

from calmigrate.constants import DEFAULT_REFRESH_INTERVAL
from calmigrate.exceptions import CalendarNotFoundError
from calmigrate.models.calendar import (
    CalendarMetadata,
    CalendarRef,
    ComponentKind,
    ResourceKind,
)
from calmigrate.store.base import CalendarStore

logger = logging.getLogger(__name__)


class PropertyResolver:
    """Fetch a calendar's descriptive properties and apply defaults."""

    def __init__(
        self,
        store: CalendarStore,
        default_refresh_interval: str = DEFAULT_REFRESH_INTERVAL,
    ):
        """
        Initialize resolver.

        Args:
            store: Calendar store to read properties from
            default_refresh_interval: Used when a calendar has no refresh interval
        """
        self.store = store
        self.default_refresh_interval = default_refresh_interval

    def resolve(self, ref: CalendarRef) -> CalendarMetadata:
        """
        Resolve metadata for a calendar.

        Args:
            ref: Calendar to resolve

        Returns:
            CalendarMetadata with defaults applied

        Raises:
            CalendarNotFoundError: If the calendar is gone, deleted, or not a calendar
        """
        properties = self.store.fetch_properties(ref)
        if properties is None:
            raise CalendarNotFoundError(f"Calendar {ref.calendar_id} does not exist")

        # Filter out deleted calendars and other resource types
        if properties.resource_kind != ResourceKind.CALENDAR:
            logger.debug(
                f"Calendar {ref.calendar_id} has resource type "
                f"{properties.resource_kind.value}, skipping"
            )
            raise CalendarNotFoundError(f"Calendar {ref.calendar_id} does not exist")

        refresh_interval = properties.refresh_interval
        if not refresh_interval:
            refresh_interval = self.default_refresh_interval

        return CalendarMetadata(
            display_name=properties.display_name or ref.uri,
            color=properties.color or None,
            refresh_interval=refresh_interval,
            components=properties.components or {ComponentKind.VEVENT},
            resource_kind=properties.resource_kind,
            sync_token=properties.sync_token,
        )
