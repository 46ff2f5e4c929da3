"""
Tree builder for one trace section.

Reconstructs call nesting from per-line depths using a stack of open
ancestors. Inconsistent indentation is repaired greedily instead of rejected:

- depth 0 starts a new root
- a depth at or above the open chain closes the chain back to that level
- a depth that skips levels attaches to the deepest open node (no
  placeholder nodes are synthesized)
- a non-zero depth with nothing open is dropped
"""

from typing import Iterable, List

from soltree.core.node import TraceNode
from soltree.parsers.line_classifier import ClassifiedLine, classify_line
from soltree.utils.logging import get_logger, log_trace

logger = get_logger('parsers.tree_builder')

ID_PREFIX = 'trace-'


class IdCounter:
    """Monotonic node id source owned by a single parse invocation."""

    def __init__(self, start: int = 0):
        self.value = start

    def next_id(self) -> str:
        node_id = f"{ID_PREFIX}{self.value}"
        self.value += 1
        return node_id

    def seek(self, value: int) -> None:
        if value < self.value:
            raise ValueError(f"Id counter cannot move backwards ({self.value} -> {value})")
        self.value = value

    def __repr__(self) -> str:
        return f"IdCounter({self.value})"


class TreeBuilder:
    """Builds the root list of one section from its raw lines."""

    def __init__(self, counter: IdCounter = None):
        self.counter = counter if counter is not None else IdCounter()
        self.dropped = 0

    def build(self, lines: Iterable[str]) -> List[TraceNode]:
        """
        Parse lines of one section into a forest.

        Args:
            lines: Raw lines of the section

        Returns:
            Root nodes of the section in document order
        """
        roots: List[TraceNode] = []
        stack: List[TraceNode] = []

        for line in lines:
            classified = classify_line(line)
            if classified is None:
                continue

            node = self._make_node(classified)
            depth = node.depth

            if depth == 0:
                roots.append(node)
                stack = [node]
            elif depth <= len(stack):
                del stack[depth:]
                stack[depth - 1].add_child(node)
                stack.append(node)
            elif stack:
                stack[-1].add_child(node)
                stack.append(node)
            else:
                self.dropped += 1
                log_trace(logger, f"Dropped {node.id} at depth {depth}: no open ancestor")

        return roots

    def _make_node(self, classified: ClassifiedLine) -> TraceNode:
        node_id = self.counter.next_id()
        return TraceNode(
            id=node_id,
            content=classified.content,
            raw=classified.content,
            depth=classified.depth,
            contract_name=classified.contract_name,
            function_name=classified.function_name,
            call_type=classified.call_type,
            is_return=classified.is_return,
            row_index=self.counter.value,
        )


def build_tree(lines: Iterable[str], start_id: int = 0) -> List[TraceNode]:
    """Build a section forest with ids starting at ``start_id``."""
    return TreeBuilder(IdCounter(start_id)).build(lines)
