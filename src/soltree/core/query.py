"""
Read-only queries over a trace forest.

Every traversal walks an explicit work stack so that very deep call trees do
not hit the interpreter's recursion limit.
"""

from typing import Iterator, List, Optional, Set

from soltree.core.node import TraceNode
from soltree.utils.exceptions import NodeNotFoundError


def flatten(forest: List[TraceNode]) -> Iterator[TraceNode]:
    """Yield every node of the forest in pre-order."""
    pending = list(reversed(forest))
    while pending:
        node = pending.pop()
        yield node
        pending.extend(reversed(node.children))


def collect_ids(forest: List[TraceNode]) -> List[str]:
    """Pre-order list of every node id, used for expand-all."""
    return [node.id for node in flatten(forest)]


def top_level_ids(forest: List[TraceNode]) -> Set[str]:
    return {node.id for node in forest}


def find_node(forest: List[TraceNode], node_id: str) -> TraceNode:
    """
    Look up a node by id.

    Raises:
        NodeNotFoundError: If no node carries the id
    """
    for node in flatten(forest):
        if node.id == node_id:
            return node
    raise NodeNotFoundError(node_id)


def search(forest: List[TraceNode], query: Optional[str]) -> Set[str]:
    """
    Case-insensitive substring search over node content.

    Each matching node contributes its own id and the id of every ancestor,
    so the matches can be revealed by expanding the result set. While walking
    the forest every visited child is linked back to the node it was reached
    from. Content, children and tree shape are never modified.

    Args:
        forest: Top-level nodes
        query: Search text; blank or whitespace-only queries match nothing

    Returns:
        Set of matched and ancestor ids
    """
    if not query or not query.strip():
        return set()

    needle = query.lower()
    matches: Set[str] = set()

    pending = list(reversed(forest))
    while pending:
        node = pending.pop()
        if needle in node.content.lower():
            matches.add(node.id)
            for ancestor in node.ancestors():
                matches.add(ancestor.id)

        for child in reversed(node.children):
            child.parent = node
            pending.append(child)

    return matches
