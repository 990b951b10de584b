"""CLI package for calendar migration."""

import logging
import sys

from calmigrate.config import MigrationConfig


# Console verbosity for (verbose, quiet); quiet wins over verbose
def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: MigrationConfig | None = None
) -> None:
    """Route migration logs to a run log file and to stderr.

    The log file under config.log_dir receives every record with a
    timestamp. Stderr only shows warnings and errors unless verbose is set;
    quiet narrows it to errors. Calling this again replaces the handlers of
    the previous call.

    Args:
        verbose: Show info records on stderr
        quiet: Show only errors on stderr
        config: MigrationConfig naming the log directory and file (default: from env)
    """
    config = config or MigrationConfig.from_env()
    config.log_dir.mkdir(parents=True, exist_ok=True)

    run_log = logging.FileHandler(config.log_dir / config.log_filename)
    run_log.setLevel(logging.DEBUG)
    run_log.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s")
    )

    stderr = logging.StreamHandler(sys.stderr)
    stderr.setLevel(_console_level(verbose, quiet))
    stderr.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(run_log)
    root.addHandler(stderr)


def main() -> None:
    """Entry point of the calendar-migrate command."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
