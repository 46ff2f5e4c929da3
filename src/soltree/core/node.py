"""
Trace node model.

A TraceNode is one line of a call-trace dump placed in the call tree.
"""

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class CallType(str, Enum):
    """Kind of external call a trace line describes."""
    CALL = "call"
    STATICCALL = "staticcall"
    DELEGATECALL = "delegatecall"


@dataclass(eq=False)
class TraceNode:
    """
    Represents one node of the call tree.

    Nodes compare by identity. ``parent`` is a weak reference: the forest
    owns nodes through ``children`` only.
    """
    id: str
    content: str
    depth: int
    raw: str = ""
    contract_name: Optional[str] = None
    function_name: Optional[str] = None
    call_type: Optional[CallType] = None
    is_return: bool = False
    row_index: int = 0
    stack_id: Optional[int] = None
    children: List['TraceNode'] = field(default_factory=list, repr=False)
    _parent_ref: Optional[weakref.ReferenceType] = field(
        default=None, init=False, repr=False
    )

    def __post_init__(self):
        if not self.raw:
            self.raw = self.content

    @property
    def parent(self) -> Optional['TraceNode']:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, node: Optional['TraceNode']) -> None:
        self._parent_ref = weakref.ref(node) if node is not None else None

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def add_child(self, child: 'TraceNode') -> None:
        """Append a child and link it back to this node."""
        self.children.append(child)
        child.parent = self

    def ancestors(self):
        """Yield parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent
