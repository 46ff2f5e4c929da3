"""
Utilities module for soltree.

Provides exception handling, logging and colors.
"""

from .exceptions import (
    SoltreeError,
    DocumentReadError,
    NodeNotFoundError,
    ConfigError,
    format_error,
    format_error_json,
)
from .logging import setup_logging, get_logger, logger, TRACE
from .colors import (
    Colors,
    SUPPORTS_COLOR,
    set_color_enabled,
    colorize,
    cyan, bold, dim,
    error, success, warning, info, highlight,
    contract_name, function_name,
)

__all__ = [
    # Exceptions
    'SoltreeError',
    'DocumentReadError',
    'NodeNotFoundError',
    'ConfigError',
    # Formatting
    'format_error',
    'format_error_json',
    # Logging
    'setup_logging',
    'get_logger',
    'logger',
    'TRACE',
    # Colors
    'Colors',
    'SUPPORTS_COLOR',
    'set_color_enabled',
    'colorize',
    'cyan', 'bold', 'dim',
    'error', 'success', 'warning', 'info', 'highlight',
    'contract_name', 'function_name',
]
