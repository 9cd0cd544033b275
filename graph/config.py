"""
config.py - Graph Configuration
================================
Validated input for graph construction.  The loader (graph/loader.py)
produces these; tests build them directly.

Node coordinates are GRID coordinates, not pixels.  The graph turns them
into pixel positions using node_size / edge_length:

    pixel = margin + index * (node_size + edge_length)
    margin = node_size + node_size // 2
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Tuple


class Color(NamedTuple):
    r: int
    g: int
    b: int

    def minus(self, offset: "Color") -> "Color":
        """Component-wise subtraction, floored at 0 (used for edge borders)."""
        return Color(
            max(self.r - offset.r, 0),
            max(self.g - offset.g, 0),
            max(self.b - offset.b, 0),
        )


# ---------------------------------------------------------------------------
# Palettes
# ---------------------------------------------------------------------------
@dataclass
class PathNodePalette:
    unvisited:        Color = Color(200, 200, 200)
    discovered:       Color = Color(120, 170, 230)
    visited:          Color = Color(60, 110, 200)
    on_shortest_path: Color = Color(240, 190, 40)
    start:            Color = Color(40, 170, 90)
    end:              Color = Color(200, 50, 60)


@dataclass
class PathEdgePalette:
    default:          Color = Color(170, 170, 170)
    probed:           Color = Color(120, 170, 230)
    used:             Color = Color(60, 110, 200)
    on_shortest_path: Color = Color(240, 190, 40)
    arrow:            Color = Color(30, 30, 30)


@dataclass
class FlowNodePalette:
    default:             Color = Color(200, 200, 200)
    on_unsaturated_path: Color = Color(240, 190, 40)
    start:               Color = Color(40, 170, 90)
    end:                 Color = Color(200, 50, 60)


@dataclass
class FlowEdgePalette:
    default:             Color = Color(120, 170, 230)
    on_unsaturated_path: Color = Color(240, 190, 40)
    saturated:           Color = Color(200, 50, 60)
    border_offset:       Color = Color(60, 60, 60)
    arrow:               Color = Color(30, 30, 30)


# ---------------------------------------------------------------------------
# Shared geometry / timing
# ---------------------------------------------------------------------------
@dataclass
class GridConfig:
    """
    Attributes:
        grid_width, grid_height : Grid size in cells.
        nodes       : [(x, y)] grid coordinates, index = node index.
        start_node  : Index of the start (source) node.
        end_node    : Index of the end (target / sink) node.
        background  : Frame background colour.
        node_size   : Side of a node square in pixels.
        edge_length : Gap between two neighbouring node squares in pixels.
        edge_width  : Thickness of an edge in pixels.
        frame_delay : Delay between frames in hundredths of a second.
    """

    grid_width:  int = 1
    grid_height: int = 1
    nodes:       List[Tuple[int, int]] = field(default_factory=list)
    start_node:  int = 0
    end_node:    int = 0
    background:  Color = Color(255, 255, 255)
    node_size:   int = 20
    edge_length: int = 20
    edge_width:  int = 10
    frame_delay: int = 50

    def node_position(self, index: int) -> Tuple[int, int]:
        """Pixel centre of node `index`."""
        margin = self.node_size + self.node_size // 2
        step = self.node_size + self.edge_length
        gx, gy = self.nodes[index]
        return margin + gx * step, margin + gy * step

    def frame_dimension(self, cells: int) -> int:
        return self.node_size * (cells + 2) + self.edge_length * (cells - 1)

    @property
    def frame_width(self) -> int:
        return self.frame_dimension(self.grid_width)

    @property
    def frame_height(self) -> int:
        return self.frame_dimension(self.grid_height)


@dataclass
class PathGraphConfig(GridConfig):
    edges:        List[Tuple[int, int]] = field(default_factory=list)
    node_palette: PathNodePalette = field(default_factory=PathNodePalette)
    edge_palette: PathEdgePalette = field(default_factory=PathEdgePalette)


@dataclass
class FlowGraphConfig(GridConfig):
    # (from, to, capacity)
    edges:        List[Tuple[int, int, int]] = field(default_factory=list)
    node_palette: FlowNodePalette = field(default_factory=FlowNodePalette)
    edge_palette: FlowEdgePalette = field(default_factory=FlowEdgePalette)

    @property
    def max_capacity(self) -> int:
        return max((cap for _, _, cap in self.edges), default=0)
