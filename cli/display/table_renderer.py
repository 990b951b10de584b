"""Table renderer for calendar lists."""

from dataclasses import dataclass

from rich.markup import escape
from rich.table import Table

from cli.display.console import console


@dataclass
class CalendarInfo:
    """Information about a calendar for display."""

    calendar_id: int
    uri: str
    name: str | None
    color: str | None
    object_count: int
    deleted: bool


class TableRenderer:
    """Render tables for calendar lists.

    Uses Rich's Table class for consistent, well-formatted output.
    """

    def render_calendar_list(self, user: str, calendars: list[CalendarInfo]) -> None:
        """Render a user's calendars as a table.

        Args:
            user: Owner of the calendars (for header).
            calendars: List of CalendarInfo objects to display.
        """
        if not calendars:
            console.print(f"No calendars found for {user}")
            return

        deleted_count = sum(1 for cal in calendars if cal.deleted)
        console.print(f"Calendars of {user} ({deleted_count} deleted):")
        console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("ID", style="dim", justify="right")
        table.add_column("URI", style="cyan")
        table.add_column("NAME")
        table.add_column("COLOR", style="dim")
        table.add_column("OBJECTS", justify="right")

        for cal in calendars:
            uri_display = escape(cal.uri)
            if cal.deleted:
                uri_display += " [dim](deleted)[/dim]"

            table.add_row(
                str(cal.calendar_id),
                uri_display,
                escape(cal.name) if cal.name else "-",
                escape(cal.color) if cal.color else "-",
                str(cal.object_count),
            )

        console.print(table)
