"""Export and import a user's calendars."""

import logging
from datetime import date
from pathlib import Path

from calmigrate.config import MigrationConfig
from calmigrate.exceptions import CalendarNotFoundError, ExportError
from calmigrate.export.merger import merge_objects
from calmigrate.export.naming import unique_export_filename
from calmigrate.export.objects import ObjectFetcher
from calmigrate.export.properties import PropertyResolver
from calmigrate.importer.allocator import allocate_uri, candidate_base
from calmigrate.importer.loader import ImportLoader
from calmigrate.importer.parser import parse_calendar
from calmigrate.models.calendar import CalendarRef, principal_uri_for
from calmigrate.models.outcome import ExportedCalendar, ExportReport, ImportOutcome
from calmigrate.store.base import CalendarStore, FileStorage, OutputSink

logger = logging.getLogger(__name__)


class CalendarMigrator:
    """Move a user's calendars between the store and .ics files."""

    def __init__(
        self,
        store: CalendarStore,
        files: FileStorage,
        config: MigrationConfig,
        output: OutputSink,
    ):
        """
        Initialize migrator.

        Args:
            store: Calendar store
            files: File storage for export and import files
            config: Migration configuration
            output: Sink for progress and error lines
        """
        self.store = store
        self.files = files
        self.config = config
        self.output = output

        self.resolver = PropertyResolver(store, config.default_refresh_interval)
        self.fetcher = ObjectFetcher(store)
        self.loader = ImportLoader(store, prodid=config.prodid)

    def _export_calendar(
        self, user: str, ref: CalendarRef, on: date, written: set[str]
    ) -> ExportedCalendar:
        """Export one calendar; raises CalendarNotFoundError if it is gone.

        written holds the filenames of this run and gains the new one.
        """
        current = self.store.get_calendar_by_id(ref.calendar_id)
        if current is None:
            raise CalendarNotFoundError(f"Calendar {ref.calendar_id} does not exist")

        metadata = self.resolver.resolve(current)
        blobs = self.fetcher.fetch(current)
        document = merge_objects(metadata, blobs, prodid=self.config.prodid)

        data = document.to_ical()
        if not data:
            raise ExportError(f"Calendar {ref.calendar_id} serialized to empty content")

        filename = unique_export_filename(
            metadata.display_name, current.uri, written, on=on
        )
        dest_dir = self.config.user_export_dir(user)
        path = self.files.write_bytes(dest_dir, filename, data)
        written.add(filename)

        self.output.writeln(f"✅ Exported calendar of user {user} into {dest_dir}/{filename}")
        return ExportedCalendar(
            calendar_id=current.calendar_id,
            filename=filename,
            path=path,
            event_count=document.event_count,
        )

    def export(self, user: str, on: date | None = None) -> ExportReport:
        """
        Export every calendar of a user to its own .ics file.

        Calendars that no longer resolve are reported and skipped; any other
        error ends the run.

        Args:
            user: User id
            on: Date used in filenames (default: today)

        Returns:
            ExportReport listing exported and skipped calendars
        """
        on = on or date.today()
        principal_uri = principal_uri_for(user)
        report = ExportReport(user=user)

        refs = self.store.get_calendars_for_principal(principal_uri)
        logger.info(f"Exporting {len(refs)} calendars of {principal_uri}")

        written: set[str] = set()
        for ref in refs:
            try:
                report.exported.append(self._export_calendar(user, ref, on, written))
            except CalendarNotFoundError as e:
                logger.error(str(e))
                self.output.error(f"Calendar {ref.calendar_id} does not exist")
                report.not_found.append(ref.calendar_id)

        logger.info(
            f"Exported {report.exported_count} calendars of {user}, "
            f"skipped {len(report.not_found)}"
        )
        return report

    def import_calendar(
        self, user: str, src_dir: Path, filename: str
    ) -> ImportOutcome:
        """
        Import one .ics file as a new calendar of a user.

        Args:
            user: User id
            src_dir: Directory holding the file
            filename: File name; the part before the first '-' seeds the uri

        Returns:
            ImportOutcome with inserted and duplicate counts

        Raises:
            StorageIOError: If the file cannot be read
            ValidationError: If the file is not a well-formed calendar
            ImportAbortedError: On a non-duplicate insertion failure
        """
        principal_uri = principal_uri_for(user)

        data = self.files.read_bytes(src_dir, filename)
        parsed = parse_calendar(data)

        existing = {
            ref.uri for ref in self.store.get_calendars_for_principal(principal_uri)
        }
        calendar_uri = allocate_uri(candidate_base(filename), existing)
        logger.info(f"Importing {filename} as {principal_uri}/{calendar_uri}")

        outcome = self.loader.load(principal_uri, calendar_uri, parsed)

        message = f'✅ Imported calendar "{filename}" to account of {user}'
        if outcome.duplicate_count:
            message += f", skipped {outcome.duplicate_count} duplicate events"
        self.output.writeln(message)
        return outcome
