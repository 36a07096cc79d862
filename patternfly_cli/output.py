"""Rich console output utilities for the patternfly CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(highlight = False)
error_console = Console(stderr = True, highlight = False)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}", soft_wrap = True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {escape(message)}", soft_wrap = True)


def print_info(message: str) -> None:
    console.print(f"[blue]→[/blue] {escape(message)}", soft_wrap = True)


def print_step(message: str) -> None:
    """Print a dimmed progress line for a long-running step."""
    console.print(f"[dim]{escape(message)}[/dim]", soft_wrap = True)
