"""
CLI module for the OWL to SHACL converter.

- commands/: Command implementations
  - base.py: Base command class and exit codes
  - convert.py: convert and queries commands
- parsers.py: Argument parsing configuration
- helpers.py: Shared CLI utilities (logging, config loading)
"""

from .commands import (
    BaseCommand,
    ExitCode,
    print_conversion_summary,
    ConvertCommand,
    QueriesCommand,
)

from .parsers import create_argument_parser

from .helpers import (
    load_config,
    setup_logging,
)

__all__ = [
    'BaseCommand',
    'ExitCode',
    'print_conversion_summary',
    'ConvertCommand',
    'QueriesCommand',
    'create_argument_parser',
    'load_config',
    'setup_logging',
]
