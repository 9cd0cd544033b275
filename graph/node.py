from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Tuple

from graph.config import Color, FlowNodePalette, PathNodePalette


# ---------------------------------------------------------------------------
# Node State Enums - one closed vocabulary per graph variant
# ---------------------------------------------------------------------------
class PathNodeState(Enum):
    UNVISITED        = "unvisited"          # not reached yet
    DISCOVERED       = "discovered"         # sitting in the BFS frontier
    VISITED          = "visited"            # dequeued and expanded
    ON_SHORTEST_PATH = "on_shortest_path"   # marked during backtrace


class FlowNodeState(Enum):
    DEFAULT             = "default"
    ON_UNSATURATED_PATH = "on_unsaturated_path"   # on the augmenting path being shown


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node(ABC):
    """
    Immutable identity and topology, mutable `state`.

    Attributes:
        index    : Position in the owning graph's node tuple.
        pos_x    : Pixel x of the node centre.
        pos_y    : Pixel y of the node centre.
        size     : Side length of the node square in pixels.
        is_start : True for the graph's start node.
        is_end   : True for the graph's end node.
        edges    : Outgoing edge indices, in construction order.
    """

    __slots__ = ("index", "pos_x", "pos_y", "size", "is_start", "is_end", "edges", "state")

    def __init__(
        self,
        index: int,
        pos_x: int,
        pos_y: int,
        size: int,
        is_start: bool = False,
        is_end: bool = False,
        edges: Tuple[int, ...] = (),
    ):
        self.index:    int             = index
        self.pos_x:    int             = pos_x
        self.pos_y:    int             = pos_y
        self.size:     int             = size
        self.is_start: bool            = is_start
        self.is_end:   bool            = is_end
        self.edges:    Tuple[int, ...] = tuple(edges)
        self.state = None

    @abstractmethod
    def color(self) -> Color:
        """Fill colour for the current state."""

    def draw(self, frame) -> None:
        half = self.size // 2
        frame.draw_rectangle(
            self.pos_x - half,
            self.pos_y - half,
            self.pos_x + half,
            self.pos_y + half,
            self.color(),
        )

    def __repr__(self) -> str:
        role = " start" if self.is_start else (" end" if self.is_end else "")
        return f"{type(self).__name__}({self.index}{role}, state={getattr(self.state, 'value', None)})"


class PathNode(Node):
    """Shortest-path node.  `entered_by` is the edge it was discovered through."""

    __slots__ = ("entered_by", "palette")

    def __init__(self, *args, palette: Optional[PathNodePalette] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.state:      PathNodeState   = PathNodeState.UNVISITED
        self.entered_by: Optional[int]   = None
        self.palette:    PathNodePalette = palette or PathNodePalette()

    def color(self) -> Color:
        if self.state is PathNodeState.ON_SHORTEST_PATH:
            return self.palette.on_shortest_path
        if self.is_start:
            return self.palette.start
        if self.is_end:
            return self.palette.end
        if self.state is PathNodeState.VISITED:
            return self.palette.visited
        if self.state is PathNodeState.DISCOVERED:
            return self.palette.discovered
        return self.palette.unvisited


class FlowNode(Node):
    __slots__ = ("palette",)

    def __init__(self, *args, palette: Optional[FlowNodePalette] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.state:   FlowNodeState   = FlowNodeState.DEFAULT
        self.palette: FlowNodePalette = palette or FlowNodePalette()

    def color(self) -> Color:
        if self.is_start:
            return self.palette.start
        if self.is_end:
            return self.palette.end
        if self.state is FlowNodeState.ON_UNSATURATED_PATH:
            return self.palette.on_unsaturated_path
        return self.palette.default
