from __future__ import annotations

from pathlib import Path

import pytest

from mevn_cli.core.errors import (
    DirectoryExistsError,
    InvalidNameError,
    StrayArgumentsError,
    ValidationError,
)
from mevn_cli.core.naming import (
    find_stray_arguments,
    is_valid_package_name,
    package_name_problems,
    validate_project_name,
)


@pytest.mark.parametrize(
    "name",
    ["my-app", "app", "some.package", "under_score", "a1", "@scope/pkg", "x" * 214],
)
def test_valid_package_names(name):
    assert package_name_problems(name) == []
    assert is_valid_package_name(name)


@pytest.mark.parametrize(
    "name, fragment",
    [
        ("", "greater than zero"),
        (".hidden", "period"),
        ("_private", "underscore"),
        (" padded ", "leading or trailing spaces"),
        ("node_modules", "blacklisted"),
        ("favicon.ico", "blacklisted"),
        ("http", "core module"),
        ("fs", "core module"),
        ("MyApp", "capital letters"),
        ("x" * 215, "214 characters"),
        ("wow!", "special characters"),
        ("hello world", "URL-friendly"),
        ("a/b", "URL-friendly"),
        ("café", "URL-friendly"),
    ],
)
def test_invalid_package_names(name, fragment):
    problems = package_name_problems(name)
    assert problems
    assert any(fragment in problem for problem in problems)


def test_find_stray_arguments_ignores_flags():
    assert find_stray_arguments(["--verbose", "-x"]) == []
    assert find_stray_arguments(["other", "--flag", "third"]) == ["other", "third"]
    assert find_stray_arguments(["--x", "extra"]) == ["extra"]


def test_validate_project_name_returns_name_without_side_effects(tmp_path: Path):
    assert validate_project_name("my-app", [], tmp_path) == "my-app"
    assert list(tmp_path.iterdir()) == []


def test_stray_arguments_checked_first(tmp_path: Path):
    # Name is invalid and taken too, but stray args win.
    (tmp_path / "Bad").mkdir()
    with pytest.raises(StrayArgumentsError) as excinfo:
        validate_project_name("Bad", ["second"], tmp_path)
    assert excinfo.value.extra_args == ["second"]
    assert isinstance(excinfo.value, ValidationError)


def test_invalid_name_raises_with_problems(tmp_path: Path):
    with pytest.raises(InvalidNameError) as excinfo:
        validate_project_name("Bad Name", [], tmp_path)
    assert "npm naming restrictions" in str(excinfo.value)
    assert excinfo.value.problems
    assert not (tmp_path / "Bad Name").exists()


def test_existing_directory_rejected(tmp_path: Path):
    (tmp_path / "taken").mkdir()
    with pytest.raises(DirectoryExistsError) as excinfo:
        validate_project_name("taken", [], tmp_path)
    assert excinfo.value.path == tmp_path / "taken"
    assert "already exists" in str(excinfo.value)


def test_existing_file_also_rejected(tmp_path: Path):
    (tmp_path / "taken").write_text("", encoding="utf-8")
    with pytest.raises(DirectoryExistsError):
        validate_project_name("taken", [], tmp_path)
