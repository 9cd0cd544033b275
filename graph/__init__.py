"""
graph/
-----
Core data layer.  Public API:

    from graph import PathGraph, FlowGraph, GraphView, GraphSnapshot
    from graph import PathNodeState, PathEdgeState, FlowNodeState, FlowEdgeState
    from graph import load_path_config, load_flow_config
"""

from graph.errors   import VisualizerError, ConfigError, GraphError, FrameError
from graph.config   import (
    Color,
    PathGraphConfig,  FlowGraphConfig,
    PathNodePalette,  PathEdgePalette,
    FlowNodePalette,  FlowEdgePalette,
)
from graph.node     import Node, PathNode, FlowNode, PathNodeState, FlowNodeState
from graph.edge     import Edge, PathEdge, FlowEdge, PathEdgeState, FlowEdgeState
from graph.snapshot import GraphSnapshot
from graph.graph    import Graph, PathGraph, FlowGraph, GraphView
from graph.loader   import load_path_config, load_flow_config, load_config_file

__all__ = [
    "VisualizerError", "ConfigError", "GraphError", "FrameError",
    "Color",
    "PathGraphConfig", "FlowGraphConfig",
    "PathNodePalette", "PathEdgePalette",
    "FlowNodePalette", "FlowEdgePalette",
    "Node",  "PathNode",  "FlowNode",  "PathNodeState", "FlowNodeState",
    "Edge",  "PathEdge",  "FlowEdge",  "PathEdgeState", "FlowEdgeState",
    "GraphSnapshot",
    "Graph", "PathGraph", "FlowGraph", "GraphView",
    "load_path_config", "load_flow_config", "load_config_file",
]
