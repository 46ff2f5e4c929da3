"""
Line classifier for call-trace dumps.

Each line of a trace dump is drawn as an indentation prefix made of spaces and
box-drawing glyphs followed by the line content:

    ├─ [24367] Counter::increment()
    │   ├─ [2261] Token::balanceOf(0x7FA9...) [staticcall]
    │   │   └─ ← [Return] 100
    │   └─ ← [Stop]

The call depth is the number of ``│``, ``├`` and ``└`` glyphs in the prefix.
Whitespace never contributes to depth.
"""

import re
from dataclasses import dataclass
from typing import Optional

from soltree.core.node import CallType

INDENT_GLYPHS = '│├└'

# Maximal prefix of whitespace and glyph groups (a glyph, optional dash, whitespace)
INDENT_PREFIX_RE = re.compile(r'^(\s*(?:[│├└]─?\s*)*)')
INDENT_GLYPH_RE = re.compile(r'[│├└]')
FUNCTION_CALL_RE = re.compile(r'([A-Za-z0-9_]+)::([A-Za-z0-9_]+)\((.*?)\)')

# Checked in order; the first hit wins.
CALL_TYPE_MARKERS = (
    ('[staticcall]', CallType.STATICCALL),
    ('[call]', CallType.CALL),
    ('[delegatecall]', CallType.DELEGATECALL),
)
RETURN_MARKERS = ('← [Return]', '← [Stop]')


@dataclass
class ClassifiedLine:
    """Result of classifying one non-blank trace line."""
    depth: int
    content: str
    contract_name: Optional[str] = None
    function_name: Optional[str] = None
    call_type: Optional[CallType] = None
    is_return: bool = False


def measure_indent(line: str) -> Optional[tuple]:
    """
    Split a line into its indentation prefix and the rest.

    Returns:
        Tuple of (depth, remainder) or None if no prefix matches
    """
    match = INDENT_PREFIX_RE.match(line)
    if not match:
        return None
    prefix = match.group(1)
    depth = len(INDENT_GLYPH_RE.findall(prefix))
    return depth, line[len(prefix):]


def detect_call_type(content: str) -> Optional[CallType]:
    for marker, call_type in CALL_TYPE_MARKERS:
        if marker in content:
            return call_type
    return None


def is_return_line(content: str) -> bool:
    return any(marker in content for marker in RETURN_MARKERS)


def classify_line(line: str) -> Optional[ClassifiedLine]:
    """
    Classify a single raw trace line.

    Args:
        line: One line of the dump, with its indentation

    Returns:
        ClassifiedLine, or None for blank and unparseable lines
    """
    if not line.strip():
        return None

    measured = measure_indent(line)
    if measured is None:
        return None
    depth, remainder = measured

    content = remainder.strip()
    if not content:
        return None

    contract_name = None
    function_name = None
    function_match = FUNCTION_CALL_RE.search(content)
    if function_match:
        contract_name = function_match.group(1)
        function_name = function_match.group(2)

    return ClassifiedLine(
        depth=depth,
        content=content,
        contract_name=contract_name,
        function_name=function_name,
        call_type=detect_call_type(content),
        is_return=is_return_line(content),
    )
