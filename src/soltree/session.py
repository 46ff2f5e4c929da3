"""
Trace viewing session.

A TraceSession owns the forest of the currently loaded document together with
the view state derived from it: which nodes are expanded, which are
highlighted by the last search, and whether a load is in flight.

Loads replace the forest wholesale. When loads overlap, the last one started
wins: every load takes a generation number and a load that finishes after a
newer one has started is discarded.
"""

import threading
from pathlib import Path
from typing import Iterator, List, Optional, Set, Tuple, Union

from soltree.config import ViewerConfig
from soltree.core.node import TraceNode
from soltree.core.query import collect_ids, find_node, search, top_level_ids
from soltree.core.renderer import visible_nodes
from soltree.document_loader import read_document
from soltree.parsers.sections import parse_document
from soltree.utils.logging import get_logger

logger = get_logger('session')


class TraceSession:
    """
    In-memory state for one viewer.
    """

    def __init__(self, config: Optional[ViewerConfig] = None):
        self.config = config or ViewerConfig()
        self.traces: List[TraceNode] = []
        self.expanded: Set[str] = set()
        self.highlighted: Set[str] = set()
        self.search_term = ''
        self.source: Optional[str] = None
        self.loading = False
        self._generation = 0
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def begin_load(self) -> int:
        """Start a load and return its generation number."""
        with self._lock:
            self._generation += 1
            self.loading = True
            return self._generation

    @property
    def generation(self) -> int:
        return self._generation

    def _commit(self, generation: int, forest: List[TraceNode], source: Optional[str]) -> bool:
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Discarding stale load #{generation} (latest is #{self._generation})")
                return False
            self.traces = forest
            self.expanded = top_level_ids(forest)
            self.highlighted = set()
            self.search_term = ''
            self.source = source
            self.loading = False
            return True

    def _run_load(self, generation: int, reader, source: Optional[str]) -> bool:
        try:
            text = reader()
            forest = parse_document(text, self.config)
        except Exception as e:
            logger.error(f"Error parsing trace file: {e}")
            forest = []
        else:
            if forest:
                logger.info(f"Loaded {len(forest)} call stacks" + (f" from {source}" if source else ""))
            else:
                logger.info("Document contains no traces")
        return self._commit(generation, forest, source)

    def load_text(self, text: str, source: Optional[str] = None) -> bool:
        """
        Parse document text and make it the current forest.

        Returns:
            True if this load's result was kept
        """
        generation = self.begin_load()
        return self._run_load(generation, lambda: text, source)

    def load_file(
        self,
        path: Union[str, Path],
        background: bool = False,
    ) -> Union[bool, threading.Thread]:
        """
        Read and parse a trace file.

        Read or parse failures never raise: they are logged and leave an
        empty forest.

        Args:
            path: Trace file to load
            background: If True, read and parse on a daemon thread

        Returns:
            The started thread when background is True, otherwise whether
            this load's result was kept
        """
        source = str(path)
        generation = self.begin_load()
        reader = lambda: read_document(path, self.config)

        if background:
            thread = threading.Thread(
                target=self._run_load,
                args=(generation, reader, source),
                daemon=True,
            )
            thread.start()
            return thread
        return self._run_load(generation, reader, source)

    # ------------------------------------------------------------------
    # View state
    # ------------------------------------------------------------------

    def toggle(self, node_id: str) -> bool:
        """Flip a node between expanded and collapsed; returns the new state."""
        find_node(self.traces, node_id)
        if node_id in self.expanded:
            self.expanded.discard(node_id)
            return False
        self.expanded.add(node_id)
        return True

    def expand(self, node_id: str) -> None:
        find_node(self.traces, node_id)
        self.expanded.add(node_id)

    def collapse(self, node_id: str) -> None:
        find_node(self.traces, node_id)
        self.expanded.discard(node_id)

    def expand_all(self) -> None:
        self.expanded = set(collect_ids(self.traces))

    def collapse_all(self) -> None:
        """Collapse everything except the top-level call stacks."""
        self.expanded = top_level_ids(self.traces)

    def search(self, term: str) -> Set[str]:
        """
        Highlight nodes whose content contains ``term`` and reveal them.

        A blank term clears the highlight set and leaves expansion alone.
        """
        self.search_term = term
        if not term.strip():
            self.highlighted = set()
            return self.highlighted

        matches = search(self.traces, term)
        self.highlighted = matches
        self.expanded |= matches
        logger.debug(f"Search {term!r}: {len(matches)} highlighted")
        return matches

    def clear_search(self) -> None:
        self.search('')

    def get_node(self, node_id: str) -> TraceNode:
        return find_node(self.traces, node_id)

    def visible_nodes(self) -> Iterator[Tuple[TraceNode, bool]]:
        return visible_nodes(self.traces, self.expanded)

    @property
    def is_empty(self) -> bool:
        return not self.traces
