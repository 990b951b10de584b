"""Progress output sink printing through the shared console."""

from rich.markup import escape

from cli.display.console import console


class ConsoleSink:
    """OutputSink that writes progress and error lines to the terminal."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def writeln(self, message: str) -> None:
        if self.quiet:
            return
        console.print(message, markup=False, highlight=False, soft_wrap=True)

    def error(self, message: str) -> None:
        console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)
