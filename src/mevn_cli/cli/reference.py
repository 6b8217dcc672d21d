"""Static command reference printed after a project is created."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mevn_cli.core.config import AVAILABLE_COMMANDS, CONFIG_FILENAME


def build_commands_table() -> Table:
    table = Table(show_header=False, show_lines=True)
    table.add_column("Command", style="green", no_wrap=True)
    table.add_column("Description")
    for command, description in AVAILABLE_COMMANDS.items():
        table.add_row(command, description)
    return table


def show_commands_list(console: Console, project_name: str) -> None:
    """Print every top-level command plus the post-init reminders."""
    console.print()
    console.print("[yellow] Available commands:-[/yellow]")
    console.print(build_commands_table())

    console.print()
    console.print()
    console.print(f"[bright_cyan] Make sure that you've done [bright_green]cd {escape(project_name)}[/bright_green][/bright_cyan]")

    console.print()
    console.print(f"[bold yellow] Warning: [/bold yellow] Do not delete the {CONFIG_FILENAME} file")


__all__ = ["build_commands_table", "show_commands_list"]
