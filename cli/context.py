"""Shared CLI context with lazy-initialized dependencies."""

from calmigrate import create_migrator
from calmigrate.config import MigrationConfig
from calmigrate.migrator import CalendarMigrator
from calmigrate.store.file_store import FileCalendarStore
from cli.display.sink import ConsoleSink


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        report = ctx.migrator.export("alice")
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: MigrationConfig | None = None
        self._store: FileCalendarStore | None = None
        self._migrator: CalendarMigrator | None = None

    @property
    def config(self) -> MigrationConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = MigrationConfig.from_env()
        return self._config

    @property
    def store(self) -> FileCalendarStore:
        """Get calendar store (lazy-loaded)."""
        if self._store is None:
            self._store = FileCalendarStore(self.config.store_dir)
        return self._store

    @property
    def migrator(self) -> CalendarMigrator:
        """Get calendar migrator (lazy-loaded)."""
        if self._migrator is None:
            self._migrator = create_migrator(
                ConsoleSink(quiet=self.quiet), config=self.config
            )
        return self._migrator


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
