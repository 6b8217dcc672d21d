from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable

import pytest

from mevn_cli.core.logging_setup import PACKAGE_LOGGER

from tests.mevn_cli.fakes import TEMPLATE_FILES, FakeGitRunner


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo configure_logging() so handlers and propagation do not leak between tests."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture()
def fake_git() -> FakeGitRunner:
    return FakeGitRunner()


@pytest.fixture()
def _git_identity(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> None:
    """Give real git commits an identity and ignore the user's global config."""
    global_config = tmp_path_factory.mktemp("gitconfig") / ".gitconfig"
    global_config.write_text("", encoding="utf-8")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Mevn Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "mevn@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Mevn Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "mevn@example.com")


def _git(cwd: Path, *args: str) -> str:
    completed = subprocess.run(
        ["git", *args], cwd=cwd, check=True, capture_output=True, text=True
    )
    return completed.stdout


@pytest.fixture()
def make_template_repo(tmp_path: Path, _git_identity: None) -> Callable[..., Path]:
    """Create a local git repository with some history to clone from."""

    def factory(name: str = "boilerplate", files: dict[str, str] | None = None) -> Path:
        repo = tmp_path / "sources" / name
        repo.mkdir(parents=True)
        _git(repo, "init")
        for relative, content in (TEMPLATE_FILES if files is None else files).items():
            target = repo / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        _git(repo, "add", ".")
        _git(repo, "commit", "-m", "Template scaffold")
        (repo / "CHANGELOG.md").write_text("v1\n", encoding="utf-8")
        _git(repo, "add", ".")
        _git(repo, "commit", "-m", "Add changelog")
        return repo

    return factory


@pytest.fixture()
def git_log() -> Callable[[Path], list[str]]:
    def read(path: Path) -> list[str]:
        return _git(path, "log", "--format=%s").splitlines()

    return read
