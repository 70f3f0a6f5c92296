"""
CLI helper utilities.

This module provides shared utilities for CLI commands including:
- Configuration loading
- Logging setup
- Console output helpers
"""

import json
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

# Type alias for log levels
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOG_FILENAME = "owl2shacl.log"


def _open_log_file(log_file: str) -> Optional[logging.FileHandler]:
    """
    Open ``log_file``, falling back to the temp directory and then the home
    directory under the same file name. Returns None if all of them fail.
    """
    name = os.path.basename(log_file) or DEFAULT_LOG_FILENAME
    candidates = [log_file, os.path.join(tempfile.gettempdir(), name), os.path.join(Path.home(), name)]

    for candidate in candidates:
        try:
            parent = os.path.dirname(candidate)
            if parent:
                os.makedirs(parent, exist_ok=True)
            handler = logging.FileHandler(candidate, encoding='utf-8')
        except OSError as e:
            print(f"  Could not create log at {candidate}: {e}", file=sys.stderr)
            continue
        if candidate != log_file:
            print(f"Note: Using fallback log file: {candidate}", file=sys.stderr)
        return handler

    print(f"Warning: Could not write log file {log_file} anywhere, logging to console only",
          file=sys.stderr)
    return None


def setup_logging(level: LogLevel = "INFO", log_file: Optional[str] = None) -> Optional[str]:
    """
    Configure the root logger.

    Log records go to stderr. With ``log_file`` they are also written to
    that file (or a fallback location, see ``_open_log_file``).

    Args:
        level: Log level name.
        log_file: Optional log file path.

    Returns:
        The log file actually used, or None.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_handler = _open_log_file(log_file) if log_file else None
    if file_handler is not None:
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )

    if file_handler is None:
        return None
    logging.getLogger(__name__).info(f"Logging to: {file_handler.baseFilename}")
    return file_handler.baseFilename


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Expected structure::

        {
            "odity_handling": {"and_list": "error", "style_mix_ontology": {"domain": "ignore"}},
            "logging": {"level": "INFO", "file": "logs/owl2shacl.log"}
        }

    Args:
        config_path: Path to the configuration file.

    Returns:
        Dictionary containing the configuration.

    Raises:
        ValueError: If config_path is empty or the file holds invalid JSON.
        FileNotFoundError: If the configuration file doesn't exist.
        IOError: If there's an error reading the file.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    path = Path(config_path)
    if path.suffix.lower() != ".json":
        raise ValueError(f"Configuration file must be a .json file: {config_path}")
    if not path.is_file():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Please create a config.json file or specify one with --config"
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in configuration file {path} at line {e.lineno}, column {e.colno}: {e.msg}"
        )
    except UnicodeDecodeError as e:
        raise ValueError(f"File encoding error in {path}: {e}")
    except OSError as e:
        raise IOError(f"Error loading configuration file: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(config).__name__}")

    return config


def print_header(title: str, width: int = 60) -> None:
    """Print a formatted header with the given title."""
    print("\n" + "=" * width)
    print(title)
    print("=" * width)


def print_footer(width: int = 60) -> None:
    """Print a footer line."""
    print("=" * width + "\n")
