"""Main CLI entry point for envload."""

import argparse
import sys
from typing import Optional

from .commands import exec_command, resolve_file
from .commands.common import FORMATS, default_format


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the file, inheritance and logging options shared by all commands."""
    parser.add_argument(
        'env_file',
        type=str,
        help='Path to environment file'
    )
    parser.add_argument(
        '--no-inherit',
        action='store_true',
        help='Do not seed variables from the current environment'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the envload CLI."""
    parser = argparse.ArgumentParser(
        prog='envload',
        description='Load shell-style environment files with variable references'
    )

    subparsers = parser.add_subparsers(dest='command_name', help='Commands')

    # Resolve command
    resolve_parser = subparsers.add_parser('resolve', help='Print resolved variables')
    add_common_arguments(resolve_parser)
    resolve_parser.add_argument(
        '--format',
        choices=FORMATS,
        default=default_format(),
        help='Output format (default: $ENVLOAD_FORMAT or shell)'
    )
    resolve_parser.add_argument(
        '--all',
        action='store_true',
        help='Print every known variable, not only those from the file'
    )

    # Exec command
    exec_parser = subparsers.add_parser('exec', help='Run a command with the loaded environment')
    add_common_arguments(exec_parser)
    exec_parser.add_argument(
        'command',
        nargs=argparse.REMAINDER,
        help='Command to run, after --'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command_name:
        parser.print_help()
        return 1

    if parsed_args.command_name == 'resolve':
        return resolve_file(parsed_args)
    elif parsed_args.command_name == 'exec':
        return exec_command(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
