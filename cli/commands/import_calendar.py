"""Import an .ics file as a new calendar."""

import logging
import sys
from pathlib import Path

import typer
from typing_extensions import Annotated

from calmigrate.exceptions import CalendarError, StorageIOError, ValidationError
from cli.context import get_context

logger = logging.getLogger(__name__)


def import_command(
    user: Annotated[
        str,
        typer.Argument(help="User to import the calendar for"),
    ],
    filename: Annotated[
        str,
        typer.Argument(help="Name of the .ics file; the part before the first '-' becomes the calendar uri"),
    ],
    source_dir: Annotated[
        Path | None,
        typer.Option(
            "--source-dir", "-s", help="Directory holding the file (default: the user's export directory)"
        ),
    ] = None,
) -> None:
    """
    Import FILENAME into the account of USER.

    Events whose UID already exists are skipped and counted.
    """
    ctx = get_context()
    src_dir = source_dir or ctx.config.user_export_dir(user)

    try:
        outcome = ctx.migrator.import_calendar(user, src_dir, filename)
    except StorageIOError as e:
        logger.error(f"Could not read {filename}: {e}")
        sys.exit(1)
    except ValidationError as e:
        logger.error(f"Could not import calendar: {e}")
        sys.exit(1)
    except CalendarError as e:
        logger.error(f"Import failed: {e}")
        sys.exit(1)

    logger.info(
        f"Imported {outcome.inserted_count} events into {outcome.calendar_uri} "
        f"(id {outcome.calendar_id})"
    )
