"""
Terminal color utilities for soltree.

ANSI escape codes plus small helpers that wrap text in them. Every helper
returns the text unchanged when the output stream does not support color.
"""

import os
import sys


class Colors:
    """ANSI color codes."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    UNDERLINE = '\033[4m'
    REVERSE = '\033[7m'

    BLACK = '\033[30m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'
    GRAY = '\033[90m'

    BRIGHT_RED = '\033[91m'
    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'


def _detect_color_support() -> bool:
    if os.environ.get('NO_COLOR') or os.environ.get('SOLTREE_NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    return hasattr(sys.stdout, 'isatty') and sys.stdout.isatty()


SUPPORTS_COLOR = _detect_color_support()

_enabled = SUPPORTS_COLOR


def set_color_enabled(enabled: bool) -> None:
    """Turn colored output on or off for every helper in this module."""
    global _enabled
    _enabled = enabled


def colorize(text: str, *codes: str) -> str:
    """Wrap text in the given ANSI codes."""
    if not _enabled or not codes:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def cyan(text: str) -> str:
    return colorize(text, Colors.CYAN)


# Text styles
def bold(text: str) -> str:
    return colorize(text, Colors.BOLD)


def dim(text: str) -> str:
    return colorize(text, Colors.DIM)


# Semantic helpers
def error(text: str) -> str:
    return colorize(text, Colors.BRIGHT_RED)


def success(text: str) -> str:
    return colorize(text, Colors.BRIGHT_GREEN)


def warning(text: str) -> str:
    return colorize(text, Colors.BRIGHT_YELLOW)


def info(text: str) -> str:
    return colorize(text, Colors.BRIGHT_CYAN)


def highlight(text: str) -> str:
    return colorize(text, Colors.BOLD, Colors.BRIGHT_MAGENTA)


# Trace specific
def contract_name(text: str) -> str:
    return colorize(text, Colors.BRIGHT_BLUE)


def function_name(text: str) -> str:
    return colorize(text, Colors.BRIGHT_WHITE)

