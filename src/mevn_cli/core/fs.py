"""Platform-specific filesystem operations."""

from __future__ import annotations

import logging
import os
import shutil
import stat
import sys
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

__all__ = [
    "DirectoryRemover",
    "PosixDirectoryRemover",
    "WindowsDirectoryRemover",
    "get_directory_remover",
]


class DirectoryRemover(Protocol):
    def remove_tree(self, path: Path) -> None:
        """Delete ``path`` and everything under it. Missing paths are ignored."""


class PosixDirectoryRemover:
    def remove_tree(self, path: Path) -> None:
        if not path.exists():
            return
        logger.debug("Removing %s", path)
        shutil.rmtree(path)


class WindowsDirectoryRemover:
    """Removes trees on Windows, where git marks object files read-only."""

    @staticmethod
    def _clear_readonly(func, target, _exc) -> None:
        os.chmod(target, stat.S_IWRITE)
        func(target)

    def remove_tree(self, path: Path) -> None:
        if not path.exists():
            return
        logger.debug("Removing %s", path)
        if sys.version_info >= (3, 12):
            shutil.rmtree(path, onexc=self._clear_readonly)
        else:
            shutil.rmtree(path, onerror=self._clear_readonly)


def get_directory_remover(os_name: str | None = None) -> DirectoryRemover:
    """Pick the remover for the running platform (or ``os_name`` if given)."""
    name = os.name if os_name is None else os_name
    if name == "nt":
        return WindowsDirectoryRemover()
    return PosixDirectoryRemover()
