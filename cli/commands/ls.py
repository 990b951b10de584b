"""List a user's calendars."""

import typer
from typing_extensions import Annotated

from calmigrate.models.calendar import ResourceKind, principal_uri_for
from cli.context import get_context
from cli.display.table_renderer import CalendarInfo, TableRenderer


def ls_command(
    user: Annotated[
        str,
        typer.Argument(help="User whose calendars are listed"),
    ],
    include_deleted: Annotated[
        bool,
        typer.Option("--deleted", "-d", help="Include deleted calendars"),
    ] = False,
) -> None:
    """List the calendars of USER."""
    ctx = get_context()
    store = ctx.store

    calendars = []
    refs = store.get_calendars_for_principal(
        principal_uri_for(user), include_deleted=include_deleted
    )
    for ref in refs:
        properties = store.fetch_properties(ref)
        if properties is None:
            continue
        calendars.append(
            CalendarInfo(
                calendar_id=ref.calendar_id,
                uri=ref.uri,
                name=properties.display_name,
                color=properties.color,
                object_count=store.count_objects(ref.calendar_id),
                deleted=properties.resource_kind == ResourceKind.DELETED,
            )
        )

    TableRenderer().render_calendar_list(user, calendars)
