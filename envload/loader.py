"""
Public entry point: load an environment file into the process environment.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Union

from .registry import Registry


logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, Iterable[str]]
Setter = Callable[[str, str], None]


def read_lines(source: Source) -> List[str]:
    """
    Read lines from a path or an iterable of lines.

    Args:
        source: File path, open text file, or any iterable of strings

    Returns:
        Lines in order

    Raises:
        OSError: If a path cannot be opened or read
    """
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        logger.info(f"Reading environment file: {path}")
        with open(path, 'r', encoding='utf-8') as f:
            return f.readlines()
    return list(source)


def set_environ(key: str, value: str) -> None:
    """Set a variable in the live process environment."""
    os.environ[key] = value


def load_vars(
    source: Source,
    setter: Optional[Setter] = None,
    environ: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    Load, resolve and apply the variables declared in an environment file.

    Every known variable (inherited and newly loaded) is passed to the
    setter, overwriting existing values.

    Args:
        source: File path or iterable of lines
        setter: Receives each (key, value); defaults to writing os.environ
        environ: Initial variables; defaults to a snapshot of os.environ

    Returns:
        All variables known after loading
    """
    registry = Registry(environ)
    registry.load(read_lines(source))
    logger.debug(f"Loaded {len(registry.assigned)} variables: {registry.assigned}")

    if setter is None:
        setter = set_environ
    for key, value in registry.vars.items():
        setter(key, value)

    return dict(registry.vars)
