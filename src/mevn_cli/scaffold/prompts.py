"""Prompt provider interface used by the init workflow."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Protocol, Sequence

from mevn_cli.core.errors import PromptError

__all__ = ["PromptProvider", "ScriptedPromptProvider"]


class PromptProvider(Protocol):
    def select(self, message: str, choices: Sequence[str]) -> str:
        """Ask the user to pick exactly one of ``choices``."""

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question."""


class ScriptedPromptProvider:
    """Answers prompts from a fixed script, in order.

    Each answer is either a choice label (for :meth:`select`) or a bool (for
    :meth:`confirm`). The questions asked are recorded in :attr:`asked`.
    """

    def __init__(self, answers: Iterable[str | bool]) -> None:
        self._answers: deque[str | bool] = deque(answers)
        self.asked: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def _next(self, message: str) -> str | bool:
        self.asked.append(message)
        if not self._answers:
            raise PromptError(f"No scripted answer left for prompt: {message}")
        return self._answers.popleft()

    def select(self, message: str, choices: Sequence[str]) -> str:
        answer = self._next(message)
        if not isinstance(answer, str) or answer not in choices:
            raise PromptError(
                f"Scripted answer {answer!r} is not one of: {', '.join(choices)}"
            )
        return answer

    def confirm(self, message: str, default: bool = False) -> bool:
        answer = self._next(message)
        if not isinstance(answer, bool):
            raise PromptError(f"Scripted answer {answer!r} is not a yes/no answer")
        return answer
