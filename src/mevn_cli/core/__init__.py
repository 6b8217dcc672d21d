"""Core utilities and configuration exports."""

from .config import (
    AVAILABLE_COMMANDS,
    BANNER,
    BOILERPLATE_URLS,
    CONFIG_FILENAME,
    TAGLINE,
    TEMPLATE_CHOICES,
    Settings,
    load_settings,
)
from .fs import get_directory_remover
from .git import GitRunner
from .naming import validate_project_name

__all__ = [
    "AVAILABLE_COMMANDS",
    "BANNER",
    "BOILERPLATE_URLS",
    "CONFIG_FILENAME",
    "TAGLINE",
    "TEMPLATE_CHOICES",
    "Settings",
    "load_settings",
    "get_directory_remover",
    "GitRunner",
    "validate_project_name",
]
