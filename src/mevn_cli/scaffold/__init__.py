"""Project bootstrap pipeline behind ``mevn init``."""

from .models import InitContext, ProjectConfig, ProjectRequest
from .prompts import PromptProvider, ScriptedPromptProvider
from .workflow import InitWorkflow

__all__ = [
    "InitContext",
    "InitWorkflow",
    "ProjectConfig",
    "ProjectRequest",
    "PromptProvider",
    "ScriptedPromptProvider",
]
