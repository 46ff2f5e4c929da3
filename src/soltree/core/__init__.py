"""
Core module for soltree.

This module contains the trace tree model and everything that reads it:
- TraceNode / CallType: the call tree model
- Query functions: flatten, collect_ids, search
- Syntax highlighting and terminal rendering
- TraceSerializer: Serializes forests to JSON format
"""

from .node import TraceNode, CallType
from .query import (
    flatten,
    collect_ids,
    top_level_ids,
    find_node,
    search,
)
from .highlighting import Segment, highlight_content, split_args
from .renderer import render_forest, render_node, visible_nodes
from .serializer import TraceSerializer

__all__ = [
    'TraceNode',
    'CallType',
    'flatten',
    'collect_ids',
    'top_level_ids',
    'find_node',
    'search',
    'Segment',
    'highlight_content',
    'split_args',
    'render_forest',
    'render_node',
    'visible_nodes',
    'TraceSerializer',
]
