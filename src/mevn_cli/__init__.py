#!/usr/bin/env python3
"""
Mevn CLI - light speed setup for MEVN stack based apps.

Usage:
    mevn init <project-name>
"""

from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.align import Align
from rich.console import Console
from rich.text import Text
from typer.core import TyperGroup

from mevn_cli.cli.commands import register_init_command
from mevn_cli.core.config import BANNER, TAGLINE

__version__ = "0.1.0"

console = Console()


class BannerGroup(TyperGroup):
    """Custom group that shows banner before help."""

    def format_help(self, ctx, formatter):
        show_banner()
        super().format_help(ctx, formatter)


app = typer.Typer(
    name="mevn",
    help="Light speed setup for MEVN stack based apps",
    add_completion=False,
    invoke_without_command=True,
    cls=BannerGroup,
)


def show_banner():
    """Display the ASCII art banner."""
    banner_lines = BANNER.strip("\n").split("\n")
    colors = ["bright_green", "green", "bright_green", "green", "bright_green"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        color = colors[i % len(colors)]
        styled_banner.append(line + "\n", style=color)

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"mevn {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Show banner when no subcommand is provided."""
    if ctx.invoked_subcommand is None and "--help" not in sys.argv and "-h" not in sys.argv:
        show_banner()
        console.print(Align.center("[dim]Run 'mevn --help' for usage information[/dim]"))
        console.print()


register_init_command(app, console=console, show_banner=show_banner)


def main():
    app()


if __name__ == "__main__":
    main()
