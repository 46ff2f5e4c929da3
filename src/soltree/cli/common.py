"""
Common utilities for CLI commands.

This module provides shared functionality used across multiple CLI commands
to reduce code duplication and ensure consistent behavior.
"""

import json
import sys
from typing import Any, Optional

from soltree.config import ViewerConfig
from soltree.parsers.tree_builder import ID_PREFIX
from soltree.session import TraceSession
from soltree.utils.colors import set_color_enabled, warning
from soltree.utils.exceptions import format_error, format_error_json
from soltree.utils.logging import logger

NO_TRACES_MESSAGE = "No valid traces found."


def load_config(args: Any) -> ViewerConfig:
    """
    Build the viewer configuration for a command.

    Args:
        args: Parsed command arguments

    Returns:
        ViewerConfig with command-line overrides applied

    Raises:
        ConfigError: If the configuration file or environment is invalid
    """
    config = ViewerConfig.load(getattr(args, 'config', None))
    if getattr(args, 'no_color', False) or getattr(args, 'json', False):
        config.use_colors = False
    set_color_enabled(config.use_colors)
    return config


def load_session(trace_file: str, config: ViewerConfig) -> TraceSession:
    """
    Create a session and load a trace file into it.

    Args:
        trace_file: Path of the trace dump
        config: Viewer configuration

    Returns:
        The loaded session (its forest is empty if loading failed)
    """
    session = TraceSession(config)
    logger.debug(f"Loading trace file: {trace_file}")
    session.load_file(trace_file)
    return session


def report_no_traces(json_mode: bool = False) -> int:
    """Print the empty-forest message and return the error exit code."""
    if json_mode:
        print(json.dumps(format_error_json(NO_TRACES_MESSAGE, "NoTracesFound"), indent=2))
    else:
        print(warning(NO_TRACES_MESSAGE), file=sys.stderr)
    return 1


def handle_command_error(
    e: Exception,
    json_mode: bool = False,
    exit_code: int = 1
) -> int:
    """
    Handle command errors uniformly.

    Args:
        e: The exception that occurred
        json_mode: If True, output as JSON
        exit_code: Exit code to return

    Returns:
        Exit code
    """
    error_output = format_error(e, json_mode)
    if json_mode:
        print(error_output)
    else:
        print(error_output, file=sys.stderr)
    return exit_code


def normalize_node_id(value: Optional[str]) -> str:
    """
    Accept either a full node id or its number.

    >>> normalize_node_id("7")
    'trace-7'
    """
    value = (value or '').strip()
    if value.isdigit():
        return f"{ID_PREFIX}{value}"
    return value
