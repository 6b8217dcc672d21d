"""CLI command modules for mevn."""

from .init import register_init_command

__all__ = ["register_init_command"]
