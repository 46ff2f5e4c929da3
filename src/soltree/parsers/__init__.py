"""
Parsers module for soltree.

This module turns call-trace dump text into a forest of TraceNode objects:
- Line classification (indent depth, content, call metadata)
- Per-section tree building
- Whole-document section aggregation
"""

from .line_classifier import (
    ClassifiedLine,
    classify_line,
    measure_indent,
    detect_call_type,
    is_return_line,
    FUNCTION_CALL_RE,
)
from .tree_builder import (
    IdCounter,
    TreeBuilder,
    build_tree,
)
from .sections import (
    split_sections,
    assign_stack_ids,
    parse_document,
)

__all__ = [
    # Line classifier
    'ClassifiedLine',
    'classify_line',
    'measure_indent',
    'detect_call_type',
    'is_return_line',
    'FUNCTION_CALL_RE',
    # Tree builder
    'IdCounter',
    'TreeBuilder',
    'build_tree',
    # Sections
    'split_sections',
    'assign_stack_ids',
    'parse_document',
]
