"""CLI commands package."""

from cli.commands.export import export_command
from cli.commands.import_calendar import import_command
from cli.commands.ls import ls_command
from cli.commands.set_properties import set_command

__all__ = [
    "export_command",
    "import_command",
    "ls_command",
    "set_command",
]
