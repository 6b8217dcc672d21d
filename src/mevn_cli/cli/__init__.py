"""CLI helpers exposed for other modules."""

from .ui import InteractivePromptProvider, StepTracker, select_with_arrows

__all__ = ["InteractivePromptProvider", "StepTracker", "select_with_arrows"]
