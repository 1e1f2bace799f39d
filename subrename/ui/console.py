"""Console UI wrapper using Rich library."""

from typing import Optional

from rich.console import Console
from rich.markup import escape


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled output methods.

    Centralizes console output so every message type shares one styling.
    Messages are escaped, so filenames with brackets print verbatim.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize with a Rich Console (a stdout one by default)."""
        if console is None:
            console = Console(highlight=False, emoji=False, soft_wrap=True)
        self.console = console

    def print(self, *args, **kwargs) -> None:
        """Print to console (delegates to Rich Console)."""
        self.console.print(*args, **kwargs)

    def print_line(self, message: str, style: str = "") -> None:
        """Print a plain line, optionally styled, without markup parsing."""
        if style:
            self.console.print(f"[{style}]{escape(message)}[/{style}]")
        else:
            self.console.print(escape(message))

    def print_warning(self, message: str) -> None:
        """Print a warning message with yellow styling."""
        self.console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")

    def print_error(self, message: str) -> None:
        """Print an error message with red styling."""
        self.console.print(f"[red]{escape(message)}[/red]")


# Global console instance
console = ConsoleUI()
