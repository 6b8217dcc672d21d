"""Reading and writing ``mevn.json``."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .models import ProjectConfig

logger = logging.getLogger(__name__)

__all__ = ["write_project_config", "read_project_config", "enable_pwa"]


def write_project_config(path: Path, config: ProjectConfig) -> None:
    path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")
    logger.debug("Wrote %s", path)


def read_project_config(path: Path) -> ProjectConfig:
    return ProjectConfig.from_dict(json.loads(path.read_text(encoding="utf-8")))


def enable_pwa(path: Path) -> ProjectConfig:
    """Read ``mevn.json`` back, flag PWA support and rewrite it."""
    config = read_project_config(path)
    config.is_pwa = True
    write_project_config(path, config)
    return config
