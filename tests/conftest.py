import os
from typing import List, Tuple

import pytest

from graph import FlowGraphConfig, PathGraphConfig
from ui.frame import Frame
from ui.renderer import Renderer


CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "configs")


# ---------------------------------------------------------------------------
# Config builders
# ---------------------------------------------------------------------------
def _grid_size(nodes):
    return max(x for x, _ in nodes) + 1, max(y for _, y in nodes) + 1


def build_path_config(nodes, edges, start=0, end=None) -> PathGraphConfig:
    width, height = _grid_size(nodes)
    return PathGraphConfig(
        grid_width=width,
        grid_height=height,
        nodes=list(nodes),
        start_node=start,
        end_node=len(nodes) - 1 if end is None else end,
        edges=list(edges),
    )


def build_flow_config(nodes, edges, start=0, end=None) -> FlowGraphConfig:
    width, height = _grid_size(nodes)
    return FlowGraphConfig(
        grid_width=width,
        grid_height=height,
        nodes=list(nodes),
        start_node=start,
        end_node=len(nodes) - 1 if end is None else end,
        edges=list(edges),
    )


# start (top-left) → A (top-right) / B (bottom-left) → end (bottom-right)
DIAMOND_NODES = [(0, 0), (1, 0), (0, 1), (1, 1)]
DIAMOND_EDGES = [(0, 1), (0, 2), (1, 3), (2, 3)]

# start → A → B → end in a row
CHAIN_NODES = [(0, 0), (1, 0), (2, 0), (3, 0)]


@pytest.fixture
def diamond_path_config():
    return build_path_config(DIAMOND_NODES, DIAMOND_EDGES)


@pytest.fixture
def diamond_flow_config():
    return build_flow_config(DIAMOND_NODES, [(a, b, 1) for a, b in DIAMOND_EDGES])


@pytest.fixture
def chain_flow_config():
    return build_flow_config(CHAIN_NODES, [(0, 1, 5), (1, 2, 3), (2, 3, 5)])


# ---------------------------------------------------------------------------
# Recording doubles
# ---------------------------------------------------------------------------
class RecordingFrame(Frame):
    """Frame that remembers every rectangle instead of drawing it."""

    def __init__(self, width: int = 400, height: int = 400):
        self._width = width
        self._height = height
        self.rectangles: List[Tuple[int, int, int, int, tuple]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def draw_rectangle(self, x0, y0, x1, y1, color) -> None:
        self._check_bounds(x0, y0, x1, y1)
        self.rectangles.append((x0, y0, x1, y1, tuple(color)))


class RecordingRenderer(Renderer):
    """Counts lifecycle calls; keeps the finished frames."""

    def __init__(self, width: int = 400, height: int = 400):
        self.width = width
        self.height = height
        self.begun = 0
        self.frames: List[RecordingFrame] = []
        self.finalized = 0

    def begin_frame(self) -> RecordingFrame:
        self.begun += 1
        return RecordingFrame(self.width, self.height)

    def end_frame(self, frame) -> None:
        self.frames.append(frame)

    def finalize(self) -> None:
        self.finalized += 1


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()
