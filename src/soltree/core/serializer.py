"""
JSON Serialization for SolTree trace forests

Provides serialization of parsed trace trees into the camelCase JSON shape
consumed by web front ends.
"""
import json
from typing import Any, Dict, List, Optional

from .node import TraceNode
from .query import collect_ids


class TraceSerializer:
    """Serializes trace forests to JSON format compatible with web app."""

    def serialize_node(self, node: TraceNode) -> Dict[str, Any]:
        """Convert a single node (without children) to a dictionary."""
        return {
            "id": node.id,
            "content": node.content,
            "raw": node.raw,
            "depth": node.depth,
            "contractName": node.contract_name,
            "functionName": node.function_name,
            "callType": node.call_type.value if node.call_type else None,
            "isReturn": node.is_return,
            "stackId": node.stack_id,
            "rowIndex": node.row_index,
            "children": [],
        }

    def serialize_forest(self, forest: List[TraceNode]) -> List[Dict[str, Any]]:
        """Convert a forest to nested dictionaries without recursion."""
        result: List[Dict[str, Any]] = []
        pending = [(node, result) for node in reversed(forest)]

        while pending:
            node, siblings = pending.pop()
            data = self.serialize_node(node)
            siblings.append(data)
            for child in reversed(node.children):
                pending.append((child, data["children"]))

        return result

    def serialize_session(self, session) -> Dict[str, Any]:
        """Convert a session's forest and view state to a dictionary."""
        order = collect_ids(session.traces)
        return {
            "source": session.source,
            "traces": self.serialize_forest(session.traces),
            "expanded": [node_id for node_id in order if node_id in session.expanded],
            "highlighted": [node_id for node_id in order if node_id in session.highlighted],
            "searchTerm": session.search_term,
        }

    def to_json(self, data: Any, indent: Optional[int] = 2) -> str:
        return json.dumps(data, indent=indent, ensure_ascii=False)
