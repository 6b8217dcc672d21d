"""Patches applied to the Nuxt boilerplate after cloning."""

from __future__ import annotations

import logging
from pathlib import Path

from mevn_cli.core.config import UNIVERSAL_MODE_LINE
from mevn_cli.core.errors import PatchError

logger = logging.getLogger(__name__)

__all__ = ["find_mode_line", "set_universal_mode"]


def find_mode_line(lines: list[str]) -> int | None:
    """Index of the first line mentioning ``mode``, or ``None``."""
    for index, line in enumerate(lines):
        if "mode" in line:
            return index
    return None


def set_universal_mode(config_path: Path) -> int:
    """Replace the first ``mode`` line of ``config_path`` with universal mode.

    Every other line is written back unchanged and in order. Returns the
    zero-based index of the replaced line. Raises :class:`PatchError`, without
    touching the file, when no line mentions ``mode``.
    """
    if not config_path.is_file():
        raise PatchError(f"{config_path.name} not found in the cloned template")

    with config_path.open("r", encoding="utf-8", newline="") as handle:
        lines = handle.read().split("\n")

    index = find_mode_line(lines)
    if index is None:
        raise PatchError(f"No 'mode' setting found in {config_path.name}; cannot switch to universal mode")

    replacement = UNIVERSAL_MODE_LINE
    if lines[index].endswith("\r"):
        replacement += "\r"
    lines[index] = replacement

    with config_path.open("w", encoding="utf-8", newline="") as handle:
        handle.write("\n".join(lines))
    logger.info("Set universal mode on line %d of %s", index + 1, config_path)
    return index
