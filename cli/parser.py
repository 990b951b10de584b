"""CLI application and command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import export_command, import_command, ls_command, set_command
from cli.context import CLIContext, set_context

app = typer.Typer(
    help="Export and import a user's calendars as .ics files.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info logging on the console"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up the shared context and logging for every command."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command("export")(export_command)
app.command("import")(import_command)
app.command("ls")(ls_command)
app.command("set")(set_command)
