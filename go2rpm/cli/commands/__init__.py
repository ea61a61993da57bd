"""CLI command handlers."""

from .generate import run_generate

__all__ = ['run_generate']
