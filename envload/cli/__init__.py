"""Command line interface for envload."""

from .main import main

__all__ = ['main']
