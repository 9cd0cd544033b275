"""
algorithms/__init__.py - Algorithm Registry
===========================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, create_algorithm

REGISTRY maps the CLI name to an AlgoInfo card:
    {
        "BFS":    AlgoInfo(key, label, algorithm_cls, graph_cls, load_config, …),
        "FF-BFS": …,
    }

Adding an algorithm means: write the class, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Type, Union

from graph import FlowGraph, PathGraph, load_flow_config, load_path_config
from graph.config import GridConfig
from graph.graph import Graph

from algorithms.base         import GraphAlgorithm
from algorithms.bfs          import ShortestPathAlgorithm, PSEUDOCODE as _bfs_pc
from algorithms.edmonds_karp import MaxFlowAlgorithm, Phase, PSEUDOCODE as _ek_pc


# The closed set of runnable algorithm variants.
AlgorithmRun = Union[ShortestPathAlgorithm, MaxFlowAlgorithm]


# ---------------------------------------------------------------------------
# AlgoInfo - metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                                # registry / CLI key, e.g. "BFS"
    label:            str                                # human label
    algorithm_cls:    Type[GraphAlgorithm]
    graph_cls:        Type[Graph]
    load_config:      Callable[[str], GridConfig]        # config text → validated config
    config_kind:      str                                # "path" or "flow"
    pseudocode:       List[str]
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str = ""
    complexity_space: str = ""
    description:      str = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "BFS": AlgoInfo(
        key="BFS", label=ShortestPathAlgorithm.label,
        algorithm_cls=ShortestPathAlgorithm, graph_cls=PathGraph,
        load_config=load_path_config, config_kind="path",
        pseudocode=_bfs_pc,
        tags=["unweighted", "shortest-path"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer. Finds the shortest path by hop count.",
    ),

    "FF-BFS": AlgoInfo(
        key="FF-BFS", label=MaxFlowAlgorithm.label,
        algorithm_cls=MaxFlowAlgorithm, graph_cls=FlowGraph,
        load_config=load_flow_config, config_kind="flow",
        pseudocode=_ek_pc,
        tags=["max-flow", "augmenting-path"],
        complexity_time="O(V · E²)", complexity_space="O(V + E)",
        description="Repeatedly pushes flow along the shortest augmenting path.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def create_algorithm(key: str, config: GridConfig) -> GraphAlgorithm:
    """Build the graph for `config` and hand it to a fresh algorithm."""
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")
    return info.algorithm_cls(info.graph_cls(config))


__all__ = [
    "AlgoInfo",
    "AlgorithmRun",
    "GraphAlgorithm",
    "ShortestPathAlgorithm",
    "MaxFlowAlgorithm",
    "Phase",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "create_algorithm",
]
