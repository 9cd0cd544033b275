"""
graph.py - Graph Containers
===========================
Single source of truth for one algorithm run.  The algorithm mutates it,
the renderer reads it through a GraphView.

Responsibilities:
  1. Build fixed node / edge tuples from a validated config
  2. Compute per-entity geometry (pixel positions, edge orientation)
  3. Adjacency queries                    (out_edges)
  4. Drawing onto a frame                 (background, edges, nodes)
  5. Immutable snapshots                  (snapshot)

Design decisions:
  - Nodes and edges live in tuples indexed by position: the topology is
    fixed for the object's lifetime, only status fields mutate.
  - Every node keeps its outgoing edge indices in construction order, so
    neighbour iteration (and therefore BFS discovery order) is
    deterministic.
  - Structural problems are caught here, once, as GraphError.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Tuple

from graph.config import FlowGraphConfig, GridConfig, PathGraphConfig
from graph.edge import Edge, FlowEdge, PathEdge
from graph.errors import GraphError
from graph.node import FlowNode, Node, PathNode
from graph.snapshot import GraphSnapshot

logger = logging.getLogger(__name__)


class Graph(ABC):
    """
    Attributes:
        nodes      : Tuple of Node, index = node index.
        edges      : Tuple of Edge, index = edge index.
        start_node : Index of the start node.
        end_node   : Index of the end node.
        background : Colour painted under everything else.
    """

    kind = ""

    def __init__(self, config: GridConfig):
        endpoints = [(row[0], row[1]) for row in config.edges]
        self._validate(config, endpoints)

        self.start_node: int = config.start_node
        self.end_node:   int = config.end_node
        self.background      = config.background

        adjacency: List[List[int]] = [[] for _ in config.nodes]
        for edge_index, (source, _) in enumerate(endpoints):
            adjacency[source].append(edge_index)

        self.nodes: Tuple[Node, ...] = tuple(
            self._make_node(i, config, tuple(adjacency[i])) for i in range(len(config.nodes))
        )
        self.edges: Tuple[Edge, ...] = tuple(
            self._make_edge(i, row, config) for i, row in enumerate(config.edges)
        )
        logger.debug("built %r", self)

    # ==================================================================
    # CONSTRUCTION
    # ==================================================================
    @staticmethod
    def _validate(config: GridConfig, endpoints: List[Tuple[int, int]]) -> None:
        count = len(config.nodes)
        if count == 0:
            raise GraphError("graph has no nodes")
        for name, index in (("start", config.start_node), ("end", config.end_node)):
            if not 0 <= index < count:
                raise GraphError(f"{name} node {index} does not exist ({count} nodes)")
        for edge_index, (source, target) in enumerate(endpoints):
            if not (0 <= source < count and 0 <= target < count):
                raise GraphError(
                    f"edge {edge_index} ({source} → {target}) references a missing node"
                )

    @abstractmethod
    def _make_node(self, index: int, config: GridConfig, edges: Tuple[int, ...]) -> Node:
        """Build the node at `index` for this graph variant."""

    @abstractmethod
    def _make_edge(self, index: int, row: tuple, config: GridConfig) -> Edge:
        """Build the edge at `index` from its config row."""

    def _edge_geometry(self, source: int, target: int, node_size: int) -> dict:
        a, b = self.nodes[source], self.nodes[target]
        horizontal = a.pos_y == b.pos_y
        if horizontal:
            length = abs(a.pos_x - b.pos_x) - node_size
            forward = a.pos_x < b.pos_x
        else:
            length = abs(a.pos_y - b.pos_y) - node_size
            forward = a.pos_y < b.pos_y
        return {
            "pos_x":      (a.pos_x + b.pos_x) // 2,
            "pos_y":      (a.pos_y + b.pos_y) // 2,
            "length":     length,
            "horizontal": horizontal,
            "forward":    forward,
        }

    # ==================================================================
    # QUERIES
    # ==================================================================
    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def out_edges(self, node_index: int) -> Tuple[Edge, ...]:
        """Outgoing edges of a node, in adjacency order."""
        return tuple(self.edges[i] for i in self.nodes[node_index].edges)

    # ==================================================================
    # RENDERING
    # ==================================================================
    def draw(self, frame) -> None:
        """Background first, then edges, then nodes on top."""
        frame.draw_rectangle(0, 0, frame.width, frame.height, self.background)
        for edge in self.edges:
            edge.draw(frame)
        for node in self.nodes:
            node.draw(frame)

    def snapshot(self) -> GraphSnapshot:
        return GraphSnapshot(
            kind=self.kind,
            start_node=self.start_node,
            end_node=self.end_node,
            node_states=tuple(n.state.value for n in self.nodes),
            edge_states=tuple(e.state.value for e in self.edges),
            edge_endpoints=tuple((e.from_node, e.to_node) for e in self.edges),
        )

    def view(self) -> "GraphView":
        return GraphView(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.node_count}, edges={self.edge_count}, "
            f"start={self.start_node}, end={self.end_node})"
        )


# ---------------------------------------------------------------------------
# Shortest-path graph
# ---------------------------------------------------------------------------
class PathGraph(Graph):
    kind = "path"

    def __init__(self, config: PathGraphConfig):
        super().__init__(config)

    def _make_node(self, index, config, edges):
        x, y = config.node_position(index)
        return PathNode(
            index, x, y, config.node_size,
            is_start=index == config.start_node,
            is_end=index == config.end_node,
            edges=edges,
            palette=config.node_palette,
        )

    def _make_edge(self, index, row, config):
        source, target = row[0], row[1]
        return PathEdge(
            index, source, target,
            width=config.edge_width,
            palette=config.edge_palette,
            **self._edge_geometry(source, target, config.node_size),
        )


# ---------------------------------------------------------------------------
# Flow graph
# ---------------------------------------------------------------------------
class FlowGraph(Graph):
    kind = "flow"

    def __init__(self, config: FlowGraphConfig):
        super().__init__(config)

    def _make_node(self, index, config, edges):
        x, y = config.node_position(index)
        return FlowNode(
            index, x, y, config.node_size,
            is_start=index == config.start_node,
            is_end=index == config.end_node,
            edges=edges,
            palette=config.node_palette,
        )

    def _make_edge(self, index, row, config):
        source, target, capacity = row
        max_capacity = config.max_capacity
        # edges are drawn thinner in proportion to their capacity
        width = int(capacity / max_capacity * config.edge_width) if max_capacity else 0
        return FlowEdge(
            index, source, target,
            width=width,
            capacity=capacity,
            border_width=int(config.edge_width * 0.1),
            palette=config.edge_palette,
            **self._edge_geometry(source, target, config.node_size),
        )

    @property
    def total_outflow(self) -> int:
        """Flow leaving the start node (equals the max flow once done)."""
        return sum(e.current_flow for e in self.out_edges(self.start_node))

    def snapshot(self) -> GraphSnapshot:
        base = super().snapshot()
        return GraphSnapshot(
            kind=base.kind,
            start_node=base.start_node,
            end_node=base.end_node,
            node_states=base.node_states,
            edge_states=base.edge_states,
            edge_endpoints=base.edge_endpoints,
            edge_flows=tuple(e.current_flow for e in self.edges),
            edge_capacities=tuple(e.capacity for e in self.edges),
        )


# ---------------------------------------------------------------------------
# Read-only view handed to renderers
# ---------------------------------------------------------------------------
class GraphView:
    """
    Read-only window onto a live graph.  Exposes queries, drawing and
    snapshots but never the mutable Node / Edge objects themselves.
    """

    __slots__ = ("_graph",)

    def __init__(self, graph: Graph):
        self._graph = graph

    @property
    def kind(self) -> str:
        return self._graph.kind

    @property
    def start_node(self) -> int:
        return self._graph.start_node

    @property
    def end_node(self) -> int:
        return self._graph.end_node

    @property
    def node_count(self) -> int:
        return self._graph.node_count

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    def node_state(self, index: int):
        return self._graph.nodes[index].state

    def edge_state(self, index: int):
        return self._graph.edges[index].state

    def edge_endpoints(self, index: int) -> Tuple[int, int]:
        edge = self._graph.edges[index]
        return edge.from_node, edge.to_node

    def out_edges(self, node_index: int) -> Tuple[int, ...]:
        return self._graph.nodes[node_index].edges

    def edge_flow(self, index: int) -> int:
        return self._graph.edges[index].current_flow

    def edge_capacity(self, index: int) -> int:
        return self._graph.edges[index].capacity

    def draw(self, frame) -> None:
        self._graph.draw(frame)

    def snapshot(self) -> GraphSnapshot:
        return self._graph.snapshot()

    def __repr__(self) -> str:
        return f"GraphView({self._graph!r})"
