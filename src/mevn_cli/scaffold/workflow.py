"""The ``mevn init`` pipeline: validate, fetch, finalize.

The three stages run strictly in order inside one coroutine. State moves
between them through an :class:`InitContext` built once the template has been
chosen.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from pathlib import Path
from typing import ContextManager, Iterable, Mapping

from rich.console import Console

from mevn_cli.cli.ui import StepTracker
from mevn_cli.core.config import (
    BOILERPLATE_URLS,
    INITIAL_COMMIT_MESSAGES,
    NUXT_CONFIG_FILENAME,
    RENDER_MODES,
    TEMPLATE_CHOICES,
)
from mevn_cli.core.errors import MevnError
from mevn_cli.core.fs import DirectoryRemover, get_directory_remover
from mevn_cli.core.git import GitRunner
from mevn_cli.core.naming import validate_project_name

from .metadata import enable_pwa, write_project_config
from .models import InitContext, ProjectRequest
from .nuxt import set_universal_mode
from .prompts import PromptProvider

logger = logging.getLogger(__name__)

__all__ = ["InitWorkflow", "TRACKER_STEPS"]

TEMPLATE_PROMPT = "Please select your template of choice"
PWA_PROMPT = "Do you require pwa support"
MODE_PROMPT = "Choose your preferred mode"

TRACKER_STEPS: list[tuple[str, str]] = [
    ("validate", "Validate project name"),
    ("template", "Select template"),
    ("git-check", "Check git installation"),
    ("fetch", "Fetch boilerplate template"),
    ("config", "Write mevn.json"),
    ("nuxt", "Configure Nuxt options"),
    ("history", "Remove template history"),
    ("commit", "Create initial commit"),
]


class InitWorkflow:
    """Bootstrap a new project from one of the fixed boilerplate repositories."""

    def __init__(
        self,
        prompts: PromptProvider,
        *,
        git: GitRunner | None = None,
        remover: DirectoryRemover | None = None,
        tracker: StepTracker | None = None,
        console: Console | None = None,
        base_dir: Path | None = None,
        sources: Mapping[str, str] | None = None,
    ) -> None:
        self.prompts = prompts
        self.git = git or GitRunner()
        self.remover = remover or get_directory_remover()
        self.tracker = tracker or StepTracker("Initialize MEVN Project")
        self.console = console
        self.base_dir = base_dir
        self.sources = dict(sources or BOILERPLATE_URLS)
        for key, label in TRACKER_STEPS:
            self.tracker.add(key, label)

    async def run(self, name: str, extra_args: Iterable[str] = ()) -> InitContext:
        """Run every stage for ``name`` and return the finished context."""
        base_dir = self.base_dir or Path.cwd()
        self.validate(name, extra_args, base_dir)
        context = await self.choose_template(name, base_dir)
        await self.fetch(context)
        await self.finalize(context)
        return context

    def validate(self, name: str, extra_args: Iterable[str], base_dir: Path) -> str:
        self.tracker.start("validate")
        try:
            validate_project_name(name, extra_args, base_dir)
        except MevnError as exc:
            self.tracker.error("validate", str(exc))
            raise
        self.tracker.complete("validate", name)
        return name

    async def choose_template(self, name: str, base_dir: Path) -> InitContext:
        self.tracker.start("template")
        label = await asyncio.to_thread(self.prompts.select, TEMPLATE_PROMPT, list(TEMPLATE_CHOICES))
        request = ProjectRequest.from_choice(name, label)
        self.tracker.complete("template", request.template)
        logger.info("Creating %s from the %s template", name, request.template)
        return InitContext(request=request, base_dir=base_dir)

    async def fetch(self, context: InitContext) -> None:
        """Clone the template, write ``mevn.json`` and apply Nuxt options."""
        self.tracker.start("git-check")
        try:
            await self.git.ensure_available()
        except MevnError:
            self.tracker.error("git-check", "git not found")
            raise
        self.tracker.complete("git-check", "available")

        url = self.sources[context.request.template]
        self.tracker.start("fetch", url)
        with self._spinner("Fetching the boilerplate template"):
            try:
                await self.git.clone(url, context.project_path)
            except MevnError:
                self.tracker.error("fetch", "Something went wrong")
                raise
        self.tracker.complete("fetch")

        self.tracker.start("config")
        write_project_config(context.config_path, context.config)
        self.tracker.complete("config", context.config_path.name)

        if context.request.template == "nuxt":
            await self.configure_nuxt(context)
        else:
            self.tracker.skip("nuxt", "not a Nuxt template")

    async def configure_nuxt(self, context: InitContext) -> None:
        self.tracker.start("nuxt")
        if await asyncio.to_thread(self.prompts.confirm, PWA_PROMPT, False):
            context.config = enable_pwa(context.config_path)

        mode = await asyncio.to_thread(self.prompts.select, MODE_PROMPT, RENDER_MODES)
        if mode == "Universal":
            try:
                set_universal_mode(context.project_path / NUXT_CONFIG_FILENAME)
            except MevnError as exc:
                self.tracker.error("nuxt", str(exc))
                raise
        detail = f"{mode.lower()}, pwa" if context.config.is_pwa else mode.lower()
        self.tracker.complete("nuxt", detail)

    async def finalize(self, context: InitContext) -> None:
        """Swap the template's history for a single fresh commit.

        Failures here are not handled; they propagate to the caller.
        """
        project_path = context.project_path
        self.tracker.start("history")
        self.remover.remove_tree(project_path / ".git")
        self.tracker.complete("history")

        self.tracker.start("commit")
        await self.git.init(project_path)
        await self.git.add_all(project_path)
        await self.git.commit(project_path, *INITIAL_COMMIT_MESSAGES)
        count = await self.git.commit_count(project_path)
        self.tracker.complete("commit", f"{count} commit")
        logger.info("Project %s initialized at %s", context.request.name, project_path)

    def _spinner(self, message: str) -> ContextManager[object]:
        if self.console is None:
            return contextlib.nullcontext()
        return self.console.status(f"[cyan]{message}[/cyan]", spinner="dots")
