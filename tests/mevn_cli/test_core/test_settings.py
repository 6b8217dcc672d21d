from __future__ import annotations

import logging

import pytest

from mevn_cli.core.config import (
    BOILERPLATE_URLS,
    TEMPLATE_CHOICES,
    Settings,
    load_settings,
)
from mevn_cli.core.errors import ConfigError
from mevn_cli.core.logging_setup import PACKAGE_LOGGER, configure_logging


def test_every_template_label_has_a_source():
    assert list(TEMPLATE_CHOICES) == ["basic", "pwa", "graphql", "Nuxt-js"]
    for key in TEMPLATE_CHOICES.values():
        assert BOILERPLATE_URLS[key].startswith("https://github.com/madlabsinc/")


def test_load_settings_defaults():
    settings = load_settings({})
    assert settings == Settings()
    assert settings.git_executable == "git"
    assert settings.numeric_log_level == logging.WARNING


def test_load_settings_reads_environment():
    settings = load_settings({"MEVN_GIT_EXECUTABLE": "/opt/git/bin/git", "MEVN_LOG_LEVEL": "debug"})
    assert settings.git_executable == "/opt/git/bin/git"
    assert settings.log_level == "DEBUG"
    assert settings.numeric_log_level == logging.DEBUG


def test_load_settings_rejects_unknown_level():
    with pytest.raises(ConfigError):
        load_settings({"MEVN_LOG_LEVEL": "chatty"})


def test_configure_logging_does_not_stack_handlers():
    configure_logging(logging.INFO)
    logger = configure_logging(logging.DEBUG)
    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG
    assert len([h for h in logger.handlers if getattr(h, "_mevn_handler", False)]) == 1
