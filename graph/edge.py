"""
edge.py - Graph Edges
=====================
Directed edges between two node indices.  Each edge carries its own
visual state so the renderer can colour it exactly as the algorithm
left it.

Design decisions:
  - `from_node` and `to_node` are integer indices into the graph's node
    tuple, NOT Node references.  Indices carry no ownership, so back
    pointers can never form reference cycles.
  - Geometry (centre, length, width, orientation) is computed once by the
    graph at construction; edges only read it when drawing.
  - Flow edges guard their own capacity invariant:
    0 <= current_flow <= capacity at all times.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from graph.config import Color, FlowEdgePalette, PathEdgePalette
from graph.errors import GraphError
from graph.shapes import draw_arrow


# ---------------------------------------------------------------------------
# Edge State Enums
# ---------------------------------------------------------------------------
class PathEdgeState(Enum):
    UNUSED           = "unused"             # never looked at
    PROBED           = "probed"             # led to a newly discovered node
    USED             = "used"               # its target has been expanded
    ON_SHORTEST_PATH = "on_shortest_path"


class FlowEdgeState(Enum):
    DEFAULT             = "default"
    SATURATED           = "saturated"             # current_flow == capacity
    ON_UNSATURATED_PATH = "on_unsaturated_path"   # on the augmenting path being shown


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge(ABC):
    """
    Attributes:
        index      : Position in the owning graph's edge tuple.
        from_node  : Index of the tail node.
        to_node    : Index of the head node.
        pos_x      : Pixel x of the edge centre.
        pos_y      : Pixel y of the edge centre.
        length     : Pixel length between the two node squares.
        width      : Pixel thickness.
        horizontal : True when both endpoints sit on the same row.
        forward    : True when the edge points right / down.
    """

    __slots__ = (
        "index", "from_node", "to_node", "pos_x", "pos_y",
        "length", "width", "horizontal", "forward", "state",
    )

    def __init__(
        self,
        index: int,
        from_node: int,
        to_node: int,
        pos_x: int = 0,
        pos_y: int = 0,
        length: int = 0,
        width: int = 0,
        horizontal: bool = True,
        forward: bool = True,
    ):
        self.index:      int  = index
        self.from_node:  int  = from_node
        self.to_node:    int  = to_node
        self.pos_x:      int  = pos_x
        self.pos_y:      int  = pos_y
        self.length:     int  = length
        self.width:      int  = width
        self.horizontal: bool = horizontal
        self.forward:    bool = forward
        self.state = None

    # ------------------------------------------------------------------
    # Geometry helpers
    # ------------------------------------------------------------------
    def bounds(self, width: int):
        """(x0, y0, x1, y1) of a `width`-thick strip centred on the edge."""
        half_x = self.length // 2 if self.horizontal else width // 2
        half_y = width // 2 if self.horizontal else self.length // 2
        return (
            self.pos_x - half_x,
            self.pos_y - half_y,
            self.pos_x + half_x,
            self.pos_y + half_y,
        )

    @abstractmethod
    def color(self) -> Color:
        """Fill colour for the current state."""

    @abstractmethod
    def draw(self, frame) -> None:
        """Paint the edge onto `frame`."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.from_node} → {self.to_node}, state={getattr(self.state, 'value', None)})"


class PathEdge(Edge):
    __slots__ = ("palette",)

    def __init__(self, *args, palette: Optional[PathEdgePalette] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.state:   PathEdgeState   = PathEdgeState.UNUSED
        self.palette: PathEdgePalette = palette or PathEdgePalette()

    def color(self) -> Color:
        return {
            PathEdgeState.UNUSED:           self.palette.default,
            PathEdgeState.PROBED:           self.palette.probed,
            PathEdgeState.USED:             self.palette.used,
            PathEdgeState.ON_SHORTEST_PATH: self.palette.on_shortest_path,
        }[self.state]

    def draw(self, frame) -> None:
        frame.draw_rectangle(*self.bounds(self.width), self.color())
        draw_arrow(
            frame, self.pos_x, self.pos_y,
            square=int(self.width * 0.2),
            horizontal=self.horizontal,
            forward=self.forward,
            color=self.palette.arrow,
        )


class FlowEdge(Edge):
    """
    Extra attributes:
        capacity     : Fixed at construction.
        current_flow : Starts at 0, only ever grows, never exceeds capacity.
        border_width : Thickness of the two border strips (and arrow squares).
    """

    __slots__ = ("capacity", "current_flow", "border_width", "palette")

    def __init__(
        self,
        *args,
        capacity: int = 0,
        border_width: int = 0,
        palette: Optional[FlowEdgePalette] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        if capacity < 0:
            raise GraphError(f"edge {self.index} has negative capacity {capacity}")
        self.capacity:     int             = capacity
        self.current_flow: int             = 0
        self.border_width: int             = border_width
        self.palette:      FlowEdgePalette = palette or FlowEdgePalette()
        self.state:        FlowEdgeState   = FlowEdgeState.DEFAULT
        self.refresh_state()

    # ------------------------------------------------------------------
    # Flow bookkeeping
    # ------------------------------------------------------------------
    @property
    def residual(self) -> int:
        return self.capacity - self.current_flow

    @property
    def saturated(self) -> bool:
        return self.current_flow == self.capacity

    def refresh_state(self) -> None:
        """Derive the display state from the current flow alone."""
        self.state = FlowEdgeState.SATURATED if self.saturated else FlowEdgeState.DEFAULT

    def add_flow(self, amount: int) -> None:
        if amount < 0 or amount > self.residual:
            raise GraphError(
                f"cannot push {amount} through edge {self.from_node} → {self.to_node} "
                f"(residual {self.residual})"
            )
        self.current_flow += amount
        if self.saturated:
            self.state = FlowEdgeState.SATURATED

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def color(self) -> Color:
        if self.state is FlowEdgeState.ON_UNSATURATED_PATH:
            return self.palette.on_unsaturated_path
        if self.state is FlowEdgeState.SATURATED:
            return self.palette.saturated
        return self.palette.default

    def flow_size(self) -> int:
        """Pixels of the edge width filled by the current flow."""
        if self.capacity == 0:
            return 0
        return int(self.width * self.current_flow / self.capacity)

    def draw(self, frame) -> None:
        x0, y0, x1, y1 = self.bounds(self.width)
        border = self.border_width
        fill = self.color()
        border_color = fill.minus(self.palette.border_offset)
        flow = self.flow_size()

        if self.horizontal:
            frame.draw_rectangle(x0, y0 - border, x1, y0, border_color)   # top
            frame.draw_rectangle(x0, y1, x1, y1 + border, border_color)   # bottom
            frame.draw_rectangle(x0, y1 - flow, x1, y1, fill)             # flow rises from the bottom
        else:
            frame.draw_rectangle(x0 - border, y0, x0, y1, border_color)   # left
            frame.draw_rectangle(x1, y0, x1 + border, y1, border_color)   # right
            frame.draw_rectangle(x0, y0, x0 + flow, y1, fill)             # flow grows from the left

        draw_arrow(
            frame, self.pos_x, self.pos_y,
            square=border,
            horizontal=self.horizontal,
            forward=self.forward,
            color=self.palette.arrow,
        )
