"""
Section aggregator.

A dump may hold several independent trace sections, each introduced by a
``Traces:`` marker. Every section is built into its own forest; the forests
are concatenated and every node gets the index of its top-level root as
``stack_id``.
"""

from typing import List, Optional

from soltree.config import ViewerConfig
from soltree.core.node import TraceNode
from soltree.parsers.tree_builder import IdCounter, TreeBuilder
from soltree.utils.logging import get_logger

logger = get_logger('parsers.sections')


def split_sections(text: str, config: Optional[ViewerConfig] = None) -> List[str]:
    """Split a document on section markers, dropping empty segments."""
    pattern = (config or ViewerConfig()).section_pattern
    return [section for section in pattern.split(text) if section]


def assign_stack_ids(forest: List[TraceNode]) -> None:
    """Set ``stack_id`` on every node to the index of its top-level root."""
    for index, root in enumerate(forest):
        pending = [root]
        while pending:
            node = pending.pop()
            node.stack_id = index
            pending.extend(node.children)


def parse_document(text: str, config: Optional[ViewerConfig] = None) -> List[TraceNode]:
    """
    Parse a whole trace dump into one forest.

    Node ids are unique across sections: each section starts numbering at
    the running offset, and the offset then moves forward by the section's
    raw line count.

    Args:
        text: Full document text
        config: Optional viewer configuration

    Returns:
        Top-level nodes of all sections, in section order
    """
    counter = IdCounter()
    forest: List[TraceNode] = []
    sections = split_sections(text, config)

    for number, section in enumerate(sections):
        lines = section.split('\n')
        start = counter.value
        builder = TreeBuilder(counter)
        roots = builder.build(lines)
        counter.seek(start + len(lines))

        logger.debug(
            f"Section {number}: {len(lines)} lines, {len(roots)} roots"
            + (f", {builder.dropped} dropped" if builder.dropped else "")
        )
        forest.extend(roots)

    assign_stack_ids(forest)
    logger.debug(f"Parsed {len(sections)} sections into {len(forest)} call stacks")
    return forest
