"""
edmonds_karp.py - Maximum Flow (Ford-Fulkerson with BFS)
========================================================
Edmonds-Karp split into three visible phases that cycle until no
augmenting path is left:

    CLEAN_GRAPH  →  wipe the previous path highlight; saturated edges
                    stay marked (the first one is the initial frame)
    PATH_FIND    →  BFS over edges with residual capacity; highlight the
                    augmenting path, or stop if there is none
    UPDATE_PATH  →  push the bottleneck amount along the path

BFS order decides WHICH augmenting path is chosen, never the final flow
value.  Only forward edges are used as residual edges.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

from graph import FlowEdge, FlowEdgeState, FlowGraph, FlowNodeState, GraphError
from algorithms.base import GraphAlgorithm

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def EdmondsKarp(graph, source, sink):",
    "    flow ← 0",
    "    loop:",
    "        clear path highlight",
    "        parent ← BFS(source, sink, residual > 0)",
    "        if sink not reached: return flow",
    "        bottleneck ← min(residual on path)",
    "        for edge on path: edge.flow += bottleneck",
    "        flow += bottleneck",
]


class Phase(Enum):
    CLEAN_GRAPH = "clean_graph"
    PATH_FIND   = "path_find"
    UPDATE_PATH = "update_path"


class MaxFlowAlgorithm(GraphAlgorithm):
    """
    Attributes:
        graph            : The FlowGraph being saturated.
        phase            : Phase the NEXT step() will run.
        max_flow         : Flow accumulated so far (final once finished).
        augmenting_paths : Number of paths pushed so far.
        last_bottleneck  : Amount pushed by the latest UPDATE_PATH.
    """

    key   = "FF-BFS"
    label = "Ford-Fulkerson (Edmonds-Karp)"

    def __init__(self, graph: FlowGraph):
        super().__init__(graph)
        self.phase:            Phase                    = Phase.CLEAN_GRAPH
        self.max_flow:         int                      = 0
        self.augmenting_paths: int                      = 0
        self.last_bottleneck:  Optional[int]            = None
        self._parent:          Dict[int, Optional[int]] = {}

    # ------------------------------------------------------------------
    # Step
    # ------------------------------------------------------------------
    def _advance(self) -> bool:
        if self.phase is Phase.CLEAN_GRAPH:
            self._clean_graph()
            self.phase = Phase.PATH_FIND
            return True

        if self.phase is Phase.PATH_FIND:
            if not self._find_path():
                logger.info("max flow: %d after %d augmenting path(s)",
                            self.max_flow, self.augmenting_paths)
                return False
            self._show_path()
            self.phase = Phase.UPDATE_PATH
            return True

        self.last_bottleneck = self._update_flow()
        self.max_flow += self.last_bottleneck
        self.augmenting_paths += 1
        logger.debug("pushed %d along path #%d (total %d)",
                     self.last_bottleneck, self.augmenting_paths, self.max_flow)
        self.phase = Phase.CLEAN_GRAPH
        return True

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def _clean_graph(self) -> None:
        for node in self.graph.nodes:
            node.state = FlowNodeState.DEFAULT
        for edge in self.graph.edges:
            edge.refresh_state()

    def _find_path(self) -> bool:
        """BFS over residual edges.  Fills self._parent; True if end reached."""
        start, end = self.graph.start_node, self.graph.end_node
        self._parent = {start: None}
        queue = [start]
        head = 0
        while head < len(queue):
            current = queue[head]
            head += 1
            for edge in self.graph.out_edges(current):
                target = edge.to_node
                if target in self._parent or edge.residual <= 0:
                    continue
                self._parent[target] = current
                if target == end:
                    return True
                queue.append(target)
        return False

    def _show_path(self) -> None:
        for edge in self._path():
            self.graph.nodes[edge.from_node].state = FlowNodeState.ON_UNSATURATED_PATH
            edge.state = FlowEdgeState.ON_UNSATURATED_PATH

    def _update_flow(self) -> int:
        path = self._path()
        bottleneck = min(edge.residual for edge in path)
        for edge in path:
            edge.add_flow(bottleneck)
        return bottleneck

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _path(self) -> List[FlowEdge]:
        """Edges of the last found augmenting path, end → start."""
        edges = []
        node = self.graph.end_node
        while node != self.graph.start_node:
            parent = self._parent[node]
            edges.append(self.find_edge(parent, node))
            node = parent
        return edges

    def find_edge(self, from_node: int, to_node: int) -> FlowEdge:
        """
        First edge from_node → to_node in adjacency order that still has
        residual capacity, falling back to the first matching edge at all.
        Raises GraphError when no such edge exists: a parent pointer
        without a matching forward edge is a broken invariant.
        """
        matches = [e for e in self.graph.out_edges(from_node) if e.to_node == to_node]
        if not matches:
            raise GraphError(f"no edge from node {from_node} to node {to_node}")
        for edge in matches:
            if edge.residual > 0:
                return edge
        return matches[0]
