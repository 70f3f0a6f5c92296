"""
Base command class shared by all CLI commands.
"""

import argparse
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ...shared.models.conversion import ConversionResult
from ..helpers import load_config, setup_logging

logger = logging.getLogger(__name__)


class ExitCode:
    """Process exit codes."""
    SUCCESS = 0
    CONVERSION_ERROR = 1
    INPUT_ERROR = 2


class BaseCommand(ABC):
    """
    Base class for CLI commands.

    Holds the (optional) JSON configuration and sets up logging from it.
    Subclasses implement ``execute`` and return an exit code.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self._config: Optional[Dict[str, Any]] = None

    @property
    def config(self) -> Dict[str, Any]:
        """The loaded configuration (empty if no config file was given)."""
        if self._config is None:
            self._config = load_config(self.config_path) if self.config_path else {}
        return self._config

    def setup_logging_from_config(
        self,
        level: Optional[str] = None,
        log_file: Optional[str] = None,
    ) -> Optional[str]:
        """Configure logging; explicit arguments win over the config file."""
        log_config = self.config.get("logging", {}) or {}
        return setup_logging(
            level=level or log_config.get("level", "INFO"),
            log_file=log_file or log_config.get("file"),
        )

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> int:
        """Run the command and return the process exit code."""


def print_conversion_summary(result: ConversionResult) -> None:
    """Print the summary of a conversion result."""
    print(result.get_summary())
