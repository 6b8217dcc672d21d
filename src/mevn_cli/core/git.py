"""Async wrappers around the git executable."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import EnvironmentCheckError, FetchError, GitCommandError

logger = logging.getLogger(__name__)

__all__ = ["GitCommandResult", "GitRunner"]


@dataclass
class GitCommandResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class GitRunner:
    """Run git subcommands as awaited subprocesses."""

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    async def run(self, args: list[str], cwd: Path | None = None) -> GitCommandResult:
        """Run ``git <args>`` and capture its output. Never raises on exit code."""
        logger.debug("Running %s %s (cwd=%s)", self.executable, " ".join(args), cwd or ".")
        try:
            process = await asyncio.create_subprocess_exec(
                self.executable,
                *args,
                cwd=str(cwd) if cwd is not None else None,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError:
            return GitCommandResult(
                returncode=127,
                stdout="",
                stderr=f"{self.executable} executable not found on PATH",
            )
        except OSError as exc:
            return GitCommandResult(
                returncode=126,
                stdout="",
                stderr=f"{self.executable} could not be executed: {exc}",
            )
        stdout, stderr = await process.communicate()
        return GitCommandResult(
            returncode=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )

    async def check(self, args: list[str], cwd: Path | None = None) -> GitCommandResult:
        """Like :meth:`run` but raise :class:`GitCommandError` on failure."""
        result = await self.run(args, cwd=cwd)
        if not result.ok:
            raise GitCommandError(args, result.returncode, result.stderr)
        return result

    async def ensure_available(self) -> None:
        """Probe git with ``git help -g``; raise if it is missing or broken."""
        result = await self.run(["help", "-g"])
        if not result.ok:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            raise EnvironmentCheckError(
                f"git is required but does not seem to be installed ({detail}). "
                "Install it from https://git-scm.com/downloads"
            )

    async def clone(self, url: str, destination: Path) -> None:
        result = await self.run(["clone", url, str(destination)])
        if not result.ok:
            logger.error("Clone of %s failed with exit code %s", url, result.returncode)
            raise FetchError(url, result.returncode, result.stderr)

    async def init(self, path: Path) -> None:
        await self.check(["init"], cwd=path)

    async def add_all(self, path: Path) -> None:
        await self.check(["add", "."], cwd=path)

    async def commit(self, path: Path, *messages: str) -> None:
        args = ["commit"]
        for message in messages:
            args.extend(["-m", message])
        await self.check(args, cwd=path)

    async def commit_count(self, path: Path) -> int:
        result = await self.check(["rev-list", "--count", "HEAD"], cwd=path)
        return int(result.stdout.strip())
