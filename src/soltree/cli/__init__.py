"""
CLI module for soltree commands.

This module provides the command-line interface for soltree,
including the view and search commands.
"""

from .main import main
from .view import view_command
from .search import search_command

__all__ = [
    'main',
    'view_command',
    'search_command',
]
