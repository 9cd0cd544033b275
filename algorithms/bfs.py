"""
bfs.py - Breadth-First Shortest Path
====================================
Unweighted single-pair shortest path, one frame per step:

  1. First step      →  start node enters the queue (initial frame)
  2. Each next step  →  dequeue ONE node, mark it VISITED and the edge it
                        came through USED, then probe its neighbours
  3. Target dequeued →  walk the back-pointers and mark the path

FIFO order is what makes the first discovery of a node come through a
shortest (hop-count) path, so the back-pointer tree IS the answer.

Pseudocode lines match the PSEUDOCODE constant exported alongside the
class so the web page can show them.
"""

import logging
from collections import deque
from typing import Deque, List

from graph import PathEdgeState, PathGraph, PathNodeState
from algorithms.base import GraphAlgorithm

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def BFS(graph, start, end):",
    "    queue ← [start]",
    "    while queue is not empty:",
    "        node ← queue.dequeue()",
    "        node.state ← VISITED",
    "        node.entered_by.state ← USED",
    "        if node == end: mark path back to start; return",
    "        for edge in node.edges:",
    "            if edge.to is UNVISITED:",
    "                edge.state ← PROBED",
    "                edge.to.entered_by ← edge",
    "                queue.enqueue(edge.to)",
    "    return NOT FOUND",
]


class ShortestPathAlgorithm(GraphAlgorithm):
    """
    Attributes:
        graph      : The PathGraph being searched.
        path_found : True once the end node has been reached.
    """

    key   = "BFS"
    label = "Breadth-First Search"

    def __init__(self, graph: PathGraph):
        super().__init__(graph)
        self._queue:     Deque[int] = deque()
        self._started:   bool       = False
        self.path_found: bool       = False

    # ------------------------------------------------------------------
    # Step
    # ------------------------------------------------------------------
    def _advance(self) -> bool:
        if not self._started:
            return self._seed()

        if self.path_found or not self._queue:
            if not self.path_found:
                logger.info("BFS: end node %d is unreachable", self.graph.end_node)
            return False

        index = self._queue.popleft()
        node = self.graph.nodes[index]
        node.state = PathNodeState.VISITED
        if node.entered_by is not None:
            self.graph.edges[node.entered_by].state = PathEdgeState.USED

        if node.is_end:
            self._mark_path()
            return True

        for edge in self.graph.out_edges(index):
            neighbour = self.graph.nodes[edge.to_node]
            if neighbour.state is PathNodeState.UNVISITED:
                edge.state = PathEdgeState.PROBED
                neighbour.state = PathNodeState.DISCOVERED
                neighbour.entered_by = edge.index
                self._queue.append(neighbour.index)

        logger.debug("BFS: expanded node %d, queue=%s", index, list(self._queue))
        return True

    def _seed(self) -> bool:
        self._started = True
        start = self.graph.nodes[self.graph.start_node]
        if start.is_end:
            # start == end: the trivial path, no edge involved
            start.state = PathNodeState.ON_SHORTEST_PATH
            self.path_found = True
            return True
        start.state = PathNodeState.DISCOVERED
        self._queue.append(start.index)
        return True

    def _mark_path(self) -> None:
        """Follow back-pointers from the end node to the start node."""
        nodes, edges = self.graph.nodes, self.graph.edges
        node = nodes[self.graph.end_node]
        node.state = PathNodeState.ON_SHORTEST_PATH
        while not node.is_start:
            edge = edges[node.entered_by]
            edge.state = PathEdgeState.ON_SHORTEST_PATH
            node = nodes[edge.from_node]
            node.state = PathNodeState.ON_SHORTEST_PATH
        self.path_found = True
        logger.info("BFS: shortest path has %d edge(s)", len(self.path_edges()))

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def path_edges(self) -> List[int]:
        """Edge indices of the found path, start → end.  Empty if none."""
        if not self.path_found:
            return []
        path = []
        node = self.graph.nodes[self.graph.end_node]
        while not node.is_start:
            path.append(node.entered_by)
            node = self.graph.nodes[self.graph.edges[node.entered_by].from_node]
        path.reverse()
        return path
