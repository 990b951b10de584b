"""Export a user's calendars to .ics files."""

import logging
import sys

import typer
from typing_extensions import Annotated

from calmigrate.exceptions import CalendarError
from cli.context import get_context

logger = logging.getLogger(__name__)


def export_command(
    user: Annotated[
        str,
        typer.Argument(help="User whose calendars are exported"),
    ],
) -> None:
    """
    Export every calendar of USER.

    Each calendar is written to <export dir>/USER/<name>-<date>.ics.
    Calendars that no longer exist are reported and skipped.
    """
    ctx = get_context()

    try:
        report = ctx.migrator.export(user)
    except CalendarError as e:
        logger.error(f"Export failed: {e}")
        sys.exit(1)

    if not ctx.quiet:
        print(
            f"\nExported: {report.exported_count}, "
            f"Skipped: {len(report.not_found)}"
        )
