"""Calendar migration between a calendar store and .ics files."""

from calmigrate.config import MigrationConfig
from calmigrate.migrator import CalendarMigrator
from calmigrate.store.base import OutputSink
from calmigrate.store.file_storage import LocalFileStorage
from calmigrate.store.file_store import FileCalendarStore


def create_migrator(
    output: OutputSink, config: MigrationConfig | None = None
) -> CalendarMigrator:
    """Set up a migrator over the filesystem store and local files."""
    config = config or MigrationConfig.from_env()
    return CalendarMigrator(
        FileCalendarStore(config.store_dir),
        LocalFileStorage(),
        config,
        output,
    )


__all__ = ["CalendarMigrator", "MigrationConfig", "create_migrator"]
