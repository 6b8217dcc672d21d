"""Static configuration and environment settings for the mevn CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigError

CLI_NAME = "Mevn-CLI"

BANNER = r"""
  __  __                        ____ _     ___
 |  \/  | _____   ___ __       / ___| |   |_ _|
 | |\/| |/ _ \ \ / / '_ \     | |   | |    | |
 | |  | |  __/\ V /| | | |    | |___| |___ | |
 |_|  |_|\___| \_/ |_| |_|     \____|_____|___|
"""

TAGLINE = "Light speed setup for MEVN stack based apps."

# Display label -> canonical template key, in prompt order.
TEMPLATE_CHOICES: dict[str, str] = {
    "basic": "basic",
    "pwa": "pwa",
    "graphql": "graphql",
    "Nuxt-js": "nuxt",
}

BOILERPLATE_URLS: dict[str, str] = {
    "basic": "https://github.com/madlabsinc/mevn-boilerplate.git",
    "pwa": "https://github.com/madlabsinc/mevn-pwa-boilerplate.git",
    "graphql": "https://github.com/madlabsinc/mevn-graphql-boilerplate.git",
    "nuxt": "https://github.com/madlabsinc/mevn-nuxt-boilerplate.git",
}

CHOICE_DESCRIPTIONS: dict[str, str] = {
    "basic": "Vue + Express + MongoDB starter",
    "pwa": "Progressive web app starter",
    "graphql": "GraphQL API starter",
    "Nuxt-js": "Nuxt.js starter",
    "Universal": "server side rendering",
    "SPA": "single page application",
}

CONFIG_FILENAME = "mevn.json"
NUXT_CONFIG_FILENAME = "nuxt.config.js"

RENDER_MODES = ["Universal", "SPA"]
UNIVERSAL_MODE_LINE = " mode: 'universal',"

INITIAL_COMMIT_MESSAGES = ("Initial commit", f"From {CLI_NAME}")

AVAILABLE_COMMANDS: dict[str, str] = {
    "mevn init": "To bootstrap a MEVN webapp",
    "mevn serve": "To launch client/server",
    "mevn add:package": "Add additional packages",
    "mevn generate": "To generate config files",
    "mevn codesplit <name>": "Lazy load components",
    "mevn dockerize": "Launch within docker containers",
    "mevn deploy": "Deploy the app to Heroku",
    "mevn info": "Prints local environment information",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime settings read from ``MEVN_*`` environment variables."""

    git_executable: str = "git"
    log_level: str = "WARNING"

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ

    git_executable = (env.get("MEVN_GIT_EXECUTABLE") or "").strip() or "git"
    log_level = (env.get("MEVN_LOG_LEVEL") or "").strip().upper() or "WARNING"
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            f"Invalid MEVN_LOG_LEVEL '{log_level}'. Choose from: {', '.join(_LOG_LEVELS)}"
        )
    return Settings(git_executable=git_executable, log_level=log_level)


__all__ = [
    "AVAILABLE_COMMANDS",
    "BANNER",
    "BOILERPLATE_URLS",
    "CHOICE_DESCRIPTIONS",
    "CLI_NAME",
    "CONFIG_FILENAME",
    "INITIAL_COMMIT_MESSAGES",
    "NUXT_CONFIG_FILENAME",
    "RENDER_MODES",
    "Settings",
    "TAGLINE",
    "TEMPLATE_CHOICES",
    "UNIVERSAL_MODE_LINE",
    "load_settings",
]
