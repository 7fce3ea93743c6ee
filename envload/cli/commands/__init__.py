"""CLI command handlers."""

from .resolve import resolve_file
from .execute import exec_command

__all__ = ['resolve_file', 'exec_command']
