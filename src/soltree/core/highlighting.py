"""
Syntax highlighting for trace line content.

Content is split into Segments tagged with a style name; renderers map the
style names to colors. Rules are tried in order and the first that applies
decides how the whole line is split:

1. return lines (``← [Return] ...``)
2. event emissions (``emit Transfer(...)``)
3. contract calls (``Token::transfer(0xabc, 100)``)
4. hex literals (addresses and other ``0x`` values)
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from eth_utils import is_address

RETURN_ARROW = '←'
EMIT_KEYWORD = 'emit '

# Greedy on purpose: arguments may contain nested parentheses.
CONTRACT_CALL_RE = re.compile(r'([A-Za-z0-9_]+)::([A-Za-z0-9_]+)\((.*)\)')
HEX_LITERAL_RE = re.compile(r'(0x[a-fA-F0-9]+)')

OPENING_BRACKETS = '([{'
CLOSING_BRACKETS = ')]}'

# Style names
PLAIN = 'plain'
MUTED = 'muted'
RETURN_VALUE = 'return_value'
EVENT = 'event'
CHILD_COUNT = 'child_count'
CONTRACT = 'contract'
FUNCTION = 'function'
ARGUMENT = 'argument'
ADDRESS = 'address'
HEX = 'hex'


@dataclass(frozen=True)
class Segment:
    """A run of text with one style."""
    text: str
    style: str = PLAIN
    index: Optional[int] = None  # argument position for ARGUMENT segments


def split_args(args: str) -> List[str]:
    """
    Split an argument list on commas that are not nested in brackets.

    >>> split_args("1, (2, 3), [4, 5]")
    ['1', '(2, 3)', '[4, 5]']
    """
    result = []
    current = []
    depth = 0

    for char in args:
        if char in OPENING_BRACKETS:
            depth += 1
            current.append(char)
        elif char in CLOSING_BRACKETS:
            depth -= 1
            current.append(char)
        elif char == ',' and depth == 0:
            result.append(''.join(current).strip())
            current = []
        else:
            current.append(char)

    last = ''.join(current).strip()
    if last:
        result.append(last)
    return result


def _highlight_return(content: str) -> List[Segment]:
    head, _, tail = content.partition(RETURN_ARROW)
    return [Segment(head + RETURN_ARROW, MUTED), Segment(tail, RETURN_VALUE)]


def _highlight_event(content: str) -> List[Segment]:
    head, _, tail = content.partition(EMIT_KEYWORD)
    return [Segment(head + EMIT_KEYWORD, MUTED), Segment(tail, EVENT)]


def _highlight_call(content: str, match: re.Match, child_count: Optional[int]) -> List[Segment]:
    contract, function, args = match.group(1), match.group(2), match.group(3)
    before = content[:match.start()]
    after = content[match.end():]

    segments = []
    if child_count is not None:
        segments.append(Segment(f"[{child_count}] ", CHILD_COUNT))
    if before:
        segments.append(Segment(before, PLAIN))
    segments.append(Segment(contract, CONTRACT))
    segments.append(Segment('::', MUTED))
    segments.append(Segment(function, FUNCTION))
    segments.append(Segment('(', MUTED))
    for index, arg in enumerate(split_args(args)):
        if index > 0:
            segments.append(Segment(', ', MUTED))
        segments.append(Segment(arg, ARGUMENT, index))
    segments.append(Segment(')', MUTED))
    if after:
        segments.append(Segment(after, PLAIN))
    return segments


def _highlight_hex(content: str) -> List[Segment]:
    segments = []
    for part in HEX_LITERAL_RE.split(content):
        if not part:
            continue
        if HEX_LITERAL_RE.fullmatch(part):
            segments.append(Segment(part, ADDRESS if is_address(part) else HEX))
        else:
            segments.append(Segment(part, PLAIN))
    return segments


def highlight_content(content: str, child_count: Optional[int] = None) -> List[Segment]:
    """
    Split trace content into styled segments.

    Args:
        content: Trimmed line content
        child_count: Number of children; shown before contract calls when given

    Returns:
        Segments whose texts concatenate back to the displayed line
    """
    if RETURN_ARROW in content:
        return _highlight_return(content)

    if EMIT_KEYWORD in content:
        return _highlight_event(content)

    match = CONTRACT_CALL_RE.search(content)
    if match:
        return _highlight_call(content, match, child_count)

    if '0x' in content:
        return _highlight_hex(content)

    return [Segment(content, PLAIN)]
