"""Load shell-style environment files with variable reference resolution."""

from .loader import load_vars, read_lines
from .registry import Registry

__all__ = ['Registry', 'load_vars', 'read_lines']
