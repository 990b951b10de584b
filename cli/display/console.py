"""Shared Rich console for migration progress and tables."""

from rich.console import Console

# Used by ConsoleSink and TableRenderer
console = Console()
