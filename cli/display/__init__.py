"""Display module for rendering migration output.

This module provides:
- console: Shared Rich console instance
- ConsoleSink: Progress/error line sink for the migrator
- TableRenderer: Calendar list tables
"""

from cli.display.console import console
from cli.display.sink import ConsoleSink
from cli.display.table_renderer import CalendarInfo, TableRenderer

__all__ = [
    "console",
    "ConsoleSink",
    "CalendarInfo",
    "TableRenderer",
]
