from __future__ import annotations

import json
from pathlib import Path

import pytest

from mevn_cli.scaffold.metadata import enable_pwa, read_project_config, write_project_config
from mevn_cli.scaffold.models import InitContext, ProjectConfig, ProjectRequest, canonical_template


@pytest.mark.parametrize(
    "label, key",
    [("basic", "basic"), ("pwa", "pwa"), ("graphql", "graphql"), ("Nuxt-js", "nuxt"), ("nuxt", "nuxt")],
)
def test_canonical_template(label, key):
    assert canonical_template(label) == key


def test_canonical_template_rejects_unknown():
    with pytest.raises(ValueError):
        canonical_template("angular")


def test_request_from_choice_remaps_label():
    request = ProjectRequest.from_choice("demo", "Nuxt-js")
    assert request == ProjectRequest(name="demo", template="nuxt")


def test_context_paths(tmp_path: Path):
    context = InitContext(request=ProjectRequest("demo", "basic"), base_dir=tmp_path)
    assert context.project_path == tmp_path / "demo"
    assert context.config_path == tmp_path / "demo" / "mevn.json"
    assert context.config == ProjectConfig(name="demo", template="basic")


def test_write_basic_config_has_no_pwa_key(tmp_path: Path):
    path = tmp_path / "mevn.json"
    write_project_config(path, ProjectConfig(name="demo", template="basic"))

    assert json.loads(path.read_text(encoding="utf-8")) == {"name": "demo", "template": "basic"}
    assert list(json.loads(path.read_text(encoding="utf-8"))) == ["name", "template"]


def test_enable_pwa_rewrites_file(tmp_path: Path):
    path = tmp_path / "mevn.json"
    write_project_config(path, ProjectConfig(name="demo", template="nuxt"))

    config = enable_pwa(path)

    assert config.is_pwa is True
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "name": "demo",
        "template": "nuxt",
        "isPwa": True,
    }
    assert read_project_config(path) == config
