"""
SolTree - Call trace viewer for Ethereum test traces
"""

__version__ = "0.1.0"

# Core components
from .core import (
    TraceNode,
    CallType,
    TraceSerializer,
    flatten,
    collect_ids,
    search,
)

# Parsers
from .parsers import (
    classify_line,
    TreeBuilder,
    IdCounter,
    parse_document,
)

# Session and configuration
from .config import ViewerConfig
from .session import TraceSession
from .document_loader import read_document

# Utilities
from .utils import (
    Colors,
    SoltreeError,
    DocumentReadError,
    NodeNotFoundError,
    ConfigError,
)

# Main entry point
from .cli.main import main

__all__ = [
    # Version
    '__version__',
    # Main
    'main',
    # Core
    'TraceNode',
    'CallType',
    'TraceSerializer',
    'flatten',
    'collect_ids',
    'search',
    # Parsers
    'classify_line',
    'TreeBuilder',
    'IdCounter',
    'parse_document',
    # Session
    'ViewerConfig',
    'TraceSession',
    'read_document',
    # Utils
    'Colors',
    'SoltreeError',
    'DocumentReadError',
    'NodeNotFoundError',
    'ConfigError',
]
