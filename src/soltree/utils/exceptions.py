"""
Custom exceptions for soltree.

This module provides a hierarchy of exceptions for the error cases the
trace viewer surfaces, along with utilities for formatting errors consistently.
Parse-time anomalies (blank lines, depth jumps with no open ancestor) are not
errors: the parser skips or drops them.
"""

import json
from typing import Any, Dict, Optional


class SoltreeError(Exception):
    """
    Base exception for all soltree errors.

    Attributes:
        message: Human-readable error message
        details: Additional context as key-value pairs
        error_code: Optional error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "error": True,
            "type": self.error_code,
            "message": self.message,
            **self.details
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert exception to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


# ============================================================================
# Document Errors
# ============================================================================

class DocumentReadError(SoltreeError):
    """Raised when a trace document cannot be read or decoded."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        details = {"path": path} if path else {}
        details.update(kwargs)
        super().__init__(message, details, "DocumentReadError")


# ============================================================================
# Tree Errors
# ============================================================================

class NodeNotFoundError(SoltreeError):
    """Raised when a trace node id does not exist in the loaded forest."""

    def __init__(self, node_id: str, **kwargs):
        details = {"node_id": node_id}
        details.update(kwargs)
        super().__init__(f"No trace node with id: {node_id}", details, "NodeNotFoundError")


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigError(SoltreeError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str, config_file: Optional[str] = None, **kwargs):
        details = {"config_file": config_file} if config_file else {}
        details.update(kwargs)
        super().__init__(message, details, "ConfigError")


# ============================================================================
# Error Formatting Utilities
# ============================================================================

def format_error(e: Exception, json_mode: bool = False) -> str:
    """
    Format an exception for display.

    Args:
        e: The exception to format
        json_mode: If True, output as JSON; otherwise use colored text

    Returns:
        Formatted error string
    """
    from soltree.utils.colors import error

    if isinstance(e, SoltreeError):
        if json_mode:
            return e.to_json()
        return error(e.message)

    if json_mode:
        return json.dumps({
            "error": True,
            "type": type(e).__name__,
            "message": str(e)
        }, indent=2)
    return error(str(e))


def format_error_json(
    message: str,
    error_type: str = "Error",
    **kwargs
) -> Dict[str, Any]:
    """
    Create a standardized error JSON structure.

    Args:
        message: Error message
        error_type: Error type/code
        **kwargs: Additional fields to include

    Returns:
        Dictionary suitable for JSON output
    """
    return {
        "error": True,
        "type": error_type,
        "message": message,
        **kwargs
    }
