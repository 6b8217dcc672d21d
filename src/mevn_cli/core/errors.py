"""Exception hierarchy for the mevn CLI.

Every error the init workflow raises on purpose derives from :class:`MevnError`.
The CLI layer turns these into a red panel and a non-zero exit; anything else
(including :class:`GitCommandError` raised while finalizing) propagates.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "MevnError",
    "ConfigError",
    "ValidationError",
    "StrayArgumentsError",
    "InvalidNameError",
    "DirectoryExistsError",
    "EnvironmentCheckError",
    "FetchError",
    "PatchError",
    "PromptError",
    "GitCommandError",
]


class MevnError(RuntimeError):
    """Base class for errors raised by the mevn CLI."""

    title = "Error"


class ConfigError(MevnError):
    """Raised when environment configuration is invalid."""

    title = "Configuration Error"


class ValidationError(MevnError):
    """Raised when the requested project cannot be created as asked."""

    title = "Invalid Project"


class StrayArgumentsError(ValidationError):
    def __init__(self, extra_args: list[str]) -> None:
        self.extra_args = list(extra_args)
        super().__init__(
            "Kindly provide only one argument as the directory name "
            f"(unexpected: {' '.join(self.extra_args)})"
        )


class InvalidNameError(ValidationError):
    def __init__(self, name: str, problems: list[str]) -> None:
        self.name = name
        self.problems = list(problems)
        super().__init__(
            f'Could not create a project called "{name}" because of npm naming restrictions: '
            + "; ".join(self.problems)
        )


class DirectoryExistsError(ValidationError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory {path.name} already exists in path!")


class EnvironmentCheckError(MevnError):
    """Raised when a required external tool is missing or broken."""

    title = "Environment Check Failed"


class FetchError(MevnError):
    """Raised when the boilerplate repository could not be cloned."""

    title = "Fetch Error"

    def __init__(self, url: str, returncode: int, stderr: str) -> None:
        self.url = url
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"git exited with status {returncode}"
        super().__init__(f"Could not clone {url}: {detail}")


class PatchError(MevnError):
    """Raised when a cloned file does not have the shape we need to patch."""

    title = "Patch Error"


class PromptError(MevnError):
    """Raised when a prompt cannot be answered."""

    title = "Prompt Error"


class GitCommandError(MevnError):
    """A git subprocess exited with a non-zero status."""

    title = "Git Error"

    def __init__(self, args: list[str], returncode: int, stderr: str) -> None:
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"git {' '.join(self.args_list)} failed with exit code {returncode}: {stderr.strip()}"
        )
