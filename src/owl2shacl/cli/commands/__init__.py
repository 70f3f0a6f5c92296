"""
CLI command implementations.

- base.py: Base command class, exit codes and summary printing
- convert.py: convert and queries commands
"""

from .base import (
    BaseCommand,
    ExitCode,
    print_conversion_summary,
)

from .convert import (
    ConvertCommand,
    QueriesCommand,
)


__all__ = [
    'BaseCommand',
    'ExitCode',
    'print_conversion_summary',
    'ConvertCommand',
    'QueriesCommand',
]
