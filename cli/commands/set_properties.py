"""Change the descriptive properties of a calendar."""

import logging

import typer
from icalendar import vDuration
from typing_extensions import Annotated

from calmigrate.exceptions import CalendarError
from calmigrate.models.calendar import principal_uri_for
from cli.context import get_context

logger = logging.getLogger(__name__)


def set_command(
    user: Annotated[
        str,
        typer.Argument(help="Owner of the calendar"),
    ],
    uri: Annotated[
        str,
        typer.Argument(help="Calendar uri (see 'ls')"),
    ],
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="New display name"),
    ] = None,
    color: Annotated[
        str | None,
        typer.Option("--color", "-c", help="New color, e.g. '#ff0000'"),
    ] = None,
    refresh_interval: Annotated[
        str | None,
        typer.Option(
            "--refresh-interval", "-r", help="ISO-8601 duration written to exports, e.g. PT1H"
        ),
    ] = None,
) -> None:
    """Set the display name, color or refresh interval of a calendar.

    Example:
        calendar-migrate set alice work --name "Work" --refresh-interval PT1H
    """
    if name is None and color is None and refresh_interval is None:
        logger.error("Nothing to change: pass --name, --color or --refresh-interval")
        raise typer.Exit(1)

    if refresh_interval is not None:
        try:
            vDuration.from_ical(refresh_interval)
        except ValueError:
            logger.error(f"Invalid refresh interval '{refresh_interval}'")
            raise typer.Exit(1)

    ctx = get_context()
    store = ctx.store

    refs = store.get_calendars_for_principal(principal_uri_for(user))
    ref = next((r for r in refs if r.uri == uri), None)
    if ref is None:
        logger.error(f"Calendar '{uri}' not found for {user}")
        raise typer.Exit(1)

    try:
        store.update_properties(
            ref.calendar_id,
            display_name=name,
            color=color,
            refresh_interval=refresh_interval,
        )
    except CalendarError as e:
        logger.error(f"Could not update calendar '{uri}': {e}")
        raise typer.Exit(1)

    if not ctx.quiet:
        print(f"✅ Updated calendar '{uri}' of {user}")
