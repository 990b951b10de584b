"""Fetch the per-event objects of a calendar."""

import logging

from calmigrate.models.calendar import CalendarRef
from calmigrate.models.document import EventBlob
from calmigrate.store.base import CalendarStore

logger = logging.getLogger(__name__)


class ObjectFetcher:
    """Collect calendar-data of every child one level below a calendar."""

    def __init__(self, store: CalendarStore):
        self.store = store

    def fetch(self, ref: CalendarRef) -> dict[str, EventBlob]:
        """Return blobs keyed by resource path; children without calendar-data are omitted."""
        blobs = {}
        for child in self.store.fetch_children(ref):
            if child.calendar_data is None:
                logger.debug(f"Skipping {child.href}: no calendar-data")
                continue
            blobs[child.href] = EventBlob(path=child.href, data=child.calendar_data)

        logger.info(f"Fetched {len(blobs)} objects from {ref.path}")
        return blobs
