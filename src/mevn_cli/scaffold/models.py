"""Data passed between the init stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mevn_cli.core.config import BOILERPLATE_URLS, CONFIG_FILENAME, TEMPLATE_CHOICES

__all__ = ["ProjectRequest", "ProjectConfig", "InitContext", "canonical_template"]


def canonical_template(label: str) -> str:
    """Map a prompt label such as ``Nuxt-js`` to its canonical key."""
    try:
        return TEMPLATE_CHOICES[label]
    except KeyError:
        if label in BOILERPLATE_URLS:
            return label
        raise ValueError(
            f"Unknown template '{label}'. Choose from: {', '.join(TEMPLATE_CHOICES)}"
        ) from None


@dataclass(frozen=True, slots=True)
class ProjectRequest:
    """A validated project name plus the canonical template key."""

    name: str
    template: str

    @classmethod
    def from_choice(cls, name: str, label: str) -> "ProjectRequest":
        return cls(name=name, template=canonical_template(label))


@dataclass(slots=True)
class ProjectConfig:
    """Contents of ``mevn.json``."""

    name: str
    template: str
    is_pwa: bool = False

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"name": self.name, "template": self.template}
        if self.is_pwa:
            payload["isPwa"] = True
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "ProjectConfig":
        return cls(
            name=str(data["name"]),
            template=str(data["template"]),
            is_pwa=bool(data.get("isPwa", False)),
        )

    @classmethod
    def for_request(cls, request: ProjectRequest) -> "ProjectConfig":
        return cls(name=request.name, template=request.template)


@dataclass(slots=True)
class InitContext:
    """Everything the fetch and finalize stages need, built once per run."""

    request: ProjectRequest
    base_dir: Path
    config: ProjectConfig = field(init=False)

    def __post_init__(self) -> None:
        self.config = ProjectConfig.for_request(self.request)

    @property
    def project_path(self) -> Path:
        return self.base_dir / self.request.name

    @property
    def config_path(self) -> Path:
        return self.project_path / CONFIG_FILENAME
