"""Project name validation.

Generated projects are npm packages, so the directory name has to be a valid
name for a *new* npm package. The rules mirror ``validate-npm-package-name``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from .errors import DirectoryExistsError, InvalidNameError, StrayArgumentsError

__all__ = [
    "package_name_problems",
    "is_valid_package_name",
    "find_stray_arguments",
    "validate_project_name",
]

MAX_NAME_LENGTH = 214

RESERVED_NAMES = frozenset({"node_modules", "favicon.ico"})

NODE_BUILTINS = frozenset(
    {
        "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
        "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
        "events", "fs", "http", "http2", "https", "inspector", "module", "net",
        "os", "path", "perf_hooks", "process", "punycode", "querystring",
        "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
        "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
        "worker_threads", "zlib",
    }
)

# Characters encodeURIComponent leaves alone.
_URL_SAFE = re.compile(r"^[A-Za-z0-9\-_.!~*'()]+$")
_SCOPED = re.compile(r"^@([^/]+)/(.+)$")
_SPECIAL_CHARS = re.compile(r"[~'!()*]")


def package_name_problems(name: str) -> list[str]:
    """Return every rule ``name`` breaks; an empty list means it is valid."""
    if not name:
        return ["name length must be greater than zero"]

    problems: list[str] = []
    if name.startswith("."):
        problems.append("name cannot start with a period")
    if name.startswith("_"):
        problems.append("name cannot start with an underscore")
    if name.strip() != name:
        problems.append("name cannot contain leading or trailing spaces")
    if name.lower() in RESERVED_NAMES:
        problems.append(f"{name} is a blacklisted name")
    if name.lower() in NODE_BUILTINS:
        problems.append(f"{name} is a core module name")
    if len(name) > MAX_NAME_LENGTH:
        problems.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")
    if name.lower() != name:
        problems.append("name can no longer contain capital letters")

    last_segment = name.split("/")[-1]
    if _SPECIAL_CHARS.search(last_segment):
        problems.append("name can no longer contain special characters (\"~'!()*\")")

    if not _URL_SAFE.match(name):
        scoped = _SCOPED.match(name)
        if not (scoped and _URL_SAFE.match(scoped.group(1)) and _URL_SAFE.match(scoped.group(2))):
            problems.append("name can only contain URL-friendly characters")

    return problems


def is_valid_package_name(name: str) -> bool:
    return not package_name_problems(name)


def find_stray_arguments(extra_args: Iterable[str]) -> list[str]:
    """Positional tokens left over after the project name, ignoring flags."""
    return [arg for arg in extra_args if arg and not arg.startswith("-")]


def validate_project_name(name: str, extra_args: Iterable[str] = (), cwd: Path | None = None) -> str:
    """Check ``name`` is usable as a new project directory under ``cwd``.

    Raises :class:`StrayArgumentsError`, :class:`InvalidNameError` or
    :class:`DirectoryExistsError`, in that order of precedence. Nothing is
    written to disk.
    """
    stray = find_stray_arguments(extra_args)
    if stray:
        raise StrayArgumentsError(stray)

    problems = package_name_problems(name)
    if problems:
        raise InvalidNameError(name, problems)

    base = cwd if cwd is not None else Path.cwd()
    target = base / name
    if target.exists() or target.is_symlink():
        raise DirectoryExistsError(target)

    return name
