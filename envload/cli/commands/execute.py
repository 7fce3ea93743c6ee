"""Exec command: run a program with a loaded environment."""

import logging
import subprocess
from argparse import Namespace

from .common import configure_logging, load_registry


logger = logging.getLogger(__name__)


def exec_command(args: Namespace) -> int:
    """
    Run a command with the variables from an environment file applied.

    Returns:
        The command's exit code, 127 if it cannot be found, 126 if it
        cannot be executed, 1 on load failure
    """
    configure_logging(args)

    command = list(args.command or [])
    if command and command[0] == '--':
        command = command[1:]
    if not command:
        logger.error("No command given to exec")
        return 1

    registry = load_registry(args.env_file, inherit=not args.no_inherit)
    if registry is None:
        return 1

    logger.debug(f"Executing command: {command}")
    try:
        result = subprocess.run(command, env=dict(registry.vars))
    except FileNotFoundError:
        logger.error(f"Command not found: {command[0]}")
        return 127
    except OSError as e:
        logger.error(f"Cannot execute {command[0]}: {e}")
        return 126
    return result.returncode
