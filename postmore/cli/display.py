"""CLI display implementation using Rich library."""

import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape


class CLIDisplay:
    """Status lines on stderr so stdout carries only content."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.stderr_console = Console(file=sys.stderr, highlight=False, soft_wrap=True)

    def _print(self, icon: str, message: str) -> None:
        if self.quiet:
            return
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] {icon} {escape(message)}")

    def status(self, message: str) -> None:
        self._print("[blue]i[/blue]", message)

    def success(self, message: str) -> None:
        self._print("[green]✓[/green]", message)

    def error(self, message: str) -> None:
        # Errors are shown even in quiet mode
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [red]✗[/red] {escape(message)}")

    def info(self, message: str) -> None:
        self._print("", message)
