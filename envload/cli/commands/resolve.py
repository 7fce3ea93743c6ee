"""Resolve command: print the variables an environment file defines."""

import logging
from argparse import Namespace

from .common import configure_logging, format_vars, load_registry


logger = logging.getLogger(__name__)


def resolve_file(args: Namespace) -> int:
    """
    Load an environment file and print the resolved variables.

    Only variables assigned by the file are printed unless --all is given.
    """
    configure_logging(args)

    registry = load_registry(args.env_file, inherit=not args.no_inherit)
    if registry is None:
        return 1

    names = list(registry.vars) if args.all else registry.assigned
    selected = {name: registry.vars[name] for name in names}
    output = format_vars(selected, args.format)
    if output:
        print(output)
    return 0
