"""Utility functions for terminal UI and user input."""

from typing import Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def scanline(prompt: str = "") -> str:
    """Read a line of input from user."""
    if prompt:
        return input(prompt)
    return input()


def scanline_trim(prompt: str = "") -> str:
    """Read and trim a line of input from user."""
    return scanline(prompt).strip()


def choose_index(prompt: str, options: list, max_attempts: int = 3) -> Optional[int]:
    """
    Let user choose an index from a list of options.
    Returns the selected index or None if invalid.
    """
    for _ in range(max_attempts):
        try:
            choice = input(f"{prompt} (0-{len(options) - 1}): ")
            idx = int(choice)
            if 0 <= idx < len(options):
                return idx
            console.print(
                f"[red]Please enter a number between 0 and {len(options) - 1}[/red]"
            )
        except ValueError:
            console.print("[red]Please enter a valid number[/red]")
        except (KeyboardInterrupt, EOFError):
            console.print("\n[yellow]Cancelled[/yellow]")
            return None

    console.print("[red]Too many invalid attempts[/red]")
    return None


def create_table(title: str, headers: list) -> Table:
    """Create a formatted table for display."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for header in headers:
        table.add_column(header)
    return table


class ConsoleNotifier:
    """Transient notifications printed to the terminal."""

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def info(self, message: str) -> None:
        self.console.print(f"[green]✅ {escape(message)}[/green]")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠ {escape(message)}[/yellow]")

    def error(self, message: str) -> None:
        self.console.print(f"[red]❌ {escape(message)}[/red]")
