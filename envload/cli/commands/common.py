"""Shared helpers for CLI commands."""

import json
import logging
import os
import shlex
from argparse import Namespace
from pathlib import Path
from typing import Dict, Optional

import yaml

from envload.loader import read_lines
from envload.registry import Registry


logger = logging.getLogger(__name__)

FORMATS = ('shell', 'json', 'yaml')
DEFAULT_FORMAT = 'shell'


def default_format() -> str:
    """Output format from ENVLOAD_FORMAT, falling back to shell."""
    value = os.environ.get('ENVLOAD_FORMAT', DEFAULT_FORMAT)
    if value not in FORMATS:
        return DEFAULT_FORMAT
    return value


def configure_logging(args: Namespace) -> None:
    """Set up logging from the shared CLI flags."""
    log_level = getattr(logging, args.log_level.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    elif args.verbose:
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def load_registry(env_file: str, inherit: bool = True) -> Optional[Registry]:
    """
    Load an environment file into a fresh registry.

    Args:
        env_file: Path to the environment file
        inherit: Seed the registry from the current process environment

    Returns:
        Loaded registry, or None if the file could not be read (already logged)
    """
    path = Path(env_file).resolve()
    if not path.exists():
        logger.error(f"Environment file not found: {path}")
        return None

    registry = Registry(None if inherit else {})
    try:
        registry.load(read_lines(path))
    except OSError as e:
        logger.error(f"Failed to read environment file: {e}")
        return None

    logger.info(f"Loaded {len(registry.assigned)} variables from {path}")
    return registry


def format_vars(variables: Dict[str, str], output_format: str) -> str:
    """
    Render variables for output.

    Args:
        variables: Name to value mapping
        output_format: One of 'shell', 'json' or 'yaml'

    Returns:
        Rendered text without a trailing newline
    """
    if output_format == 'json':
        return json.dumps(variables, indent=2)
    if output_format == 'yaml':
        return yaml.safe_dump(variables, default_flow_style=False, sort_keys=False).rstrip('\n')
    if output_format == 'shell':
        return '\n'.join(f"export {key}={shlex.quote(value)}" for key, value in variables.items())
    raise ValueError(f"Unknown output format: {output_format}")
