"""
snapshot.py - Immutable Graph Snapshot
======================================
A frozen picture of every status field in a graph at one moment.

The live graph belongs to the algorithm and keeps mutating.  Anything
that must outlive the current step (the recorder's history, a renderer
running on another thread) holds one of these instead.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class GraphSnapshot:
    """
    Attributes:
        kind           : "path" or "flow".
        start_node     : Start node index.
        end_node       : End node index.
        node_states    : State value per node index.
        edge_states    : State value per edge index.
        edge_endpoints : (from, to) per edge index.
        edge_flows     : current_flow per edge (flow graphs only).
        edge_capacities: capacity per edge (flow graphs only).
    """

    kind:            str
    start_node:      int
    end_node:        int
    node_states:     Tuple[str, ...]
    edge_states:     Tuple[str, ...]
    edge_endpoints:  Tuple[Tuple[int, int], ...]
    edge_flows:      Optional[Tuple[int, ...]] = None
    edge_capacities: Optional[Tuple[int, ...]] = None

    def nodes_in(self, state: str) -> Tuple[int, ...]:
        return tuple(i for i, s in enumerate(self.node_states) if s == state)

    def edges_in(self, state: str) -> Tuple[int, ...]:
        return tuple(i for i, s in enumerate(self.edge_states) if s == state)

    def to_dict(self) -> dict:
        data = {
            "kind":        self.kind,
            "start_node":  self.start_node,
            "end_node":    self.end_node,
            "node_states": list(self.node_states),
            "edge_states": list(self.edge_states),
        }
        if self.edge_flows is not None:
            data["edge_flows"] = list(self.edge_flows)
        return data
