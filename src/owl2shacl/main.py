#!/usr/bin/env python3
"""
OWL/RDFS to SHACL Converter

This is the main entry point of the command line interface.

Usage:
    owl2shacl convert <ontology> [-o target/shacl.ttl] [--config config.json]
                      [--odity KIND[:ROLE]=MODE ...]
    owl2shacl queries [--output-dir target/queries]

Architecture:
    This module only dispatches to the cli/ module:
    - cli/commands/: Command handlers (thin orchestration layer)
    - cli/parsers.py: Argument parsing configuration
    - cli/helpers.py: Shared utilities (logging, config loading)
"""

import sys
from typing import List, Optional

from .cli import (
    ConvertCommand,
    QueriesCommand,
    create_argument_parser,
)


# Command mapping from command name to Command class
COMMAND_MAP = {
    'convert': ConvertCommand,
    'queries': QueriesCommand,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse command-line arguments and dispatch to the command handler.

    Returns:
        The process exit code.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    command_class = COMMAND_MAP.get(args.command)
    if command_class is None:
        print(f"Error: Unknown command '{args.command}'")
        parser.print_help()
        return 1

    config_path = getattr(args, 'config', None)
    command = command_class(config_path=config_path)
    return command.execute(args)


if __name__ == '__main__':
    sys.exit(main())
