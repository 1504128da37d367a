"""Rich console helpers for the CLI.

Everything goes to stderr: while serving, stdout carries the MCP protocol.
"""

from typing import Any

from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


def print_error(message: str) -> None:
    console.print(f"[bold red]✗[/bold red] {message}")


def print_warning(message: str) -> None:
    console.print(f"[bold yellow]![/bold yellow] {message}")


def print_success(message: str) -> None:
    console.print(f"[bold green]✓[/bold green] {message}")


def print_info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {message}")


def print_config(config: dict[str, Any], title: str = "Configuration") -> None:
    """Print a flat key/value mapping as a two-column table."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in config.items():
        table.add_row(key, "[dim](not set)[/dim]" if value is None else str(value))
    console.print(table)
