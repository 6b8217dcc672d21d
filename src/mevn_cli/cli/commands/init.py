"""The ``mevn init`` command."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from mevn_cli.cli.commands.init_help import INIT_COMMAND_DOC
from mevn_cli.cli.reference import show_commands_list
from mevn_cli.cli.ui import InteractivePromptProvider, StepTracker
from mevn_cli.core.config import CHOICE_DESCRIPTIONS, load_settings
from mevn_cli.core.errors import (
    ConfigError,
    EnvironmentCheckError,
    FetchError,
    MevnError,
    PatchError,
    PromptError,
    ValidationError,
)
from mevn_cli.core.git import GitRunner
from mevn_cli.core.logging_setup import configure_logging
from mevn_cli.scaffold.prompts import PromptProvider
from mevn_cli.scaffold.workflow import InitWorkflow

logger = logging.getLogger(__name__)

# Finalization failures (GitCommandError, OSError) are deliberately absent.
HANDLED_ERRORS: tuple[type[MevnError], ...] = (
    ConfigError,
    ValidationError,
    EnvironmentCheckError,
    FetchError,
    PatchError,
    PromptError,
)


def _print_error(console: Console, exc: MevnError) -> None:
    error_panel = Panel(
        Text(str(exc)),
        title=f"[red]{exc.title}[/red]",
        border_style="red",
        padding=(1, 2),
    )
    console.print()
    console.print(error_panel)


def register_init_command(
    app: typer.Typer,
    *,
    console: Console,
    show_banner: Callable[[], None],
    prompt_provider_factory: Optional[Callable[[Console], PromptProvider]] = None,
) -> None:
    """Attach ``init`` to ``app`` using the supplied console and prompt source."""

    def _prompts() -> PromptProvider:
        if prompt_provider_factory is not None:
            return prompt_provider_factory(console)
        return InteractivePromptProvider(console=console, descriptions=CHOICE_DESCRIPTIONS)

    def init(
        ctx: typer.Context,
        project_name: str = typer.Argument(..., help="Name for your new project directory"),
        debug: bool = typer.Option(False, "--debug", help="Show debug logging (git commands, file writes)"),
    ) -> None:
        show_banner()

        try:
            settings = load_settings()
        except ConfigError as exc:
            _print_error(console, exc)
            raise typer.Exit(1)
        configure_logging(logging.DEBUG if debug else settings.numeric_log_level)

        tracker = StepTracker("Initialize MEVN Project")
        workflow = InitWorkflow(
            _prompts(),
            git=GitRunner(settings.git_executable),
            tracker=tracker,
            console=console,
        )

        try:
            context = asyncio.run(workflow.run(project_name, ctx.args))
        except HANDLED_ERRORS as exc:
            logger.debug("init aborted", exc_info=True)
            if not isinstance(exc, ValidationError):
                console.print(tracker.render())
            _print_error(console, exc)
            raise typer.Exit(1)

        console.print(tracker.render())
        console.print("\n[bold green]Project ready.[/bold green]")
        show_commands_list(console, context.request.name)

    init.__doc__ = INIT_COMMAND_DOC
    app.command(
        "init",
        context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    )(init)


__all__ = ["HANDLED_ERRORS", "register_init_command"]
