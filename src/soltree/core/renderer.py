"""
Terminal renderer for trace forests.

Renders the visible part of a forest (every node whose ancestors are all
expanded) as one text line per node.
"""

from typing import Iterator, List, Optional, Set, Tuple

from soltree.config import ViewerConfig
from soltree.core import highlighting as hl
from soltree.core.highlighting import Segment, highlight_content
from soltree.core.node import TraceNode
from soltree.utils.colors import Colors

EXPANDED_MARKER = '▼'
COLLAPSED_MARKER = '▶'
LEAF_MARKER = ' '
MATCH_MARKER = '*'

STYLE_CODES = {
    hl.PLAIN: (),
    hl.MUTED: (Colors.GRAY,),
    hl.RETURN_VALUE: (Colors.BOLD, Colors.BRIGHT_GREEN),
    hl.EVENT: (Colors.BRIGHT_YELLOW,),
    hl.CHILD_COUNT: (Colors.DIM,),
    hl.CONTRACT: (Colors.BRIGHT_BLUE,),
    hl.FUNCTION: (Colors.BRIGHT_WHITE,),
    hl.ADDRESS: (Colors.BRIGHT_CYAN,),
    hl.HEX: (Colors.CYAN,),
}


def visible_nodes(forest: List[TraceNode], expanded: Set[str]) -> Iterator[Tuple[TraceNode, bool]]:
    """Yield (node, is_expanded) for nodes whose ancestors are all expanded."""
    pending = list(reversed(forest))
    while pending:
        node = pending.pop()
        is_expanded = node.id in expanded
        yield node, is_expanded
        if is_expanded:
            pending.extend(reversed(node.children))


def _paint(text: str, codes, use_colors: bool) -> str:
    if not use_colors or not codes or not text:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def render_segments(segments: List[Segment], config: ViewerConfig, use_colors: bool) -> str:
    parts = []
    for segment in segments:
        if segment.style == hl.ARGUMENT:
            codes = (config.arg_color(segment.index or 0),)
        else:
            codes = STYLE_CODES.get(segment.style, ())
        parts.append(_paint(segment.text, codes, use_colors))
    return ''.join(parts)


def render_node(
    node: TraceNode,
    is_expanded: bool,
    is_highlighted: bool,
    config: ViewerConfig,
    use_colors: Optional[bool] = None,
) -> str:
    """Render a single node line."""
    use_colors = config.use_colors if use_colors is None else use_colors

    if node.children:
        marker = EXPANDED_MARKER if is_expanded else COLLAPSED_MARKER
    else:
        marker = LEAF_MARKER
    marker = _paint(marker, (config.depth_color(node.depth, node.row_index),), use_colors)

    child_count = len(node.children) if node.children else None
    body = render_segments(highlight_content(node.content, child_count), config, use_colors)
    if is_highlighted:
        body = _paint(body, (Colors.BOLD,), use_colors)

    flag = MATCH_MARKER if is_highlighted else ' '
    indent = ' ' * (node.depth * config.indent_width)
    node_id = _paint(node.id, (Colors.DIM,), use_colors)
    return f"{flag} {indent}{marker} {body}  {node_id}"


def render_forest(
    forest: List[TraceNode],
    expanded: Set[str],
    highlighted: Optional[Set[str]] = None,
    config: Optional[ViewerConfig] = None,
    use_colors: Optional[bool] = None,
) -> List[str]:
    """
    Render the visible nodes of a forest.

    Args:
        forest: Top-level nodes
        expanded: Ids of expanded nodes
        highlighted: Ids of search matches (and their ancestors)
        config: Viewer configuration for palettes and indentation
        use_colors: Override config.use_colors

    Returns:
        One string per visible node
    """
    config = config or ViewerConfig()
    highlighted = highlighted or set()
    return [
        render_node(node, is_expanded, node.id in highlighted, config, use_colors)
        for node, is_expanded in visible_nodes(forest, expanded)
    ]
