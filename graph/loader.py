"""
loader.py - Sectioned Graph Config Parser
=========================================
Parse the line-oriented text format into a PathGraphConfig or
FlowGraphConfig.

    # comment
    [GRID DATA]
    4x3             ← grid width x height (cells)
    0               ← start node index
    5               ← end node index

    [NODES]
    0 0             ← one "x y" grid coordinate per node
    1 0

    [EDGES]
    0 1             ← "from to"            (shortest path)
    0 1 7           ← "from to capacity"   (max flow)

    [VISUALIZATION]
    20              ← node size (px)
    30              ← edge length (px)
    10              ← edge width (px)
    50              ← frame delay (1/100 s)
    255 255 255     ← background colour

    [NODE PALETTE]  ← one "r g b" per row, order in *_PALETTE_ROWS below
    [EDGE PALETTE]

Blank lines and lines starting with '#' are ignored.  Only [GRID DATA] is
mandatory; everything else falls back to the defaults in graph/config.py.
Every problem is reported as ConfigError with the offending line number.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Tuple, Union

from graph.config import Color, FlowGraphConfig, GridConfig, PathGraphConfig
from graph.errors import ConfigError

logger = logging.getLogger(__name__)


PATH_NODE_PALETTE_ROWS = ("unvisited", "discovered", "visited", "on_shortest_path", "start", "end")
PATH_EDGE_PALETTE_ROWS = ("default", "probed", "used", "on_shortest_path", "arrow")
FLOW_NODE_PALETTE_ROWS = ("default", "on_unsaturated_path", "start", "end")
FLOW_EDGE_PALETTE_ROWS = ("default", "on_unsaturated_path", "saturated", "border_offset", "arrow")

GRID_ROWS = ("grid size", "start node", "end node")
VISUALIZATION_ROWS = ("node size", "edge length", "edge width", "frame delay", "background")

# GIF stores the logical screen size as 16-bit values
MAX_FRAME_SIZE = 65535


# ---------------------------------------------------------------------------
# Token helpers
# ---------------------------------------------------------------------------
def _ints(line: str, count: int, what: str, line_no: int) -> List[int]:
    tokens = line.split()
    if len(tokens) < count:
        raise ConfigError(f"expected {count} value(s) for {what}, got {line!r}", line_no)
    try:
        values = [int(t) for t in tokens[:count]]
    except ValueError:
        raise ConfigError(f"non-integer value in {what}: {line!r}", line_no) from None
    if any(v < 0 for v in values):
        raise ConfigError(f"negative value in {what}: {line!r}", line_no)
    return values


def _color(line: str, what: str, line_no: int) -> Color:
    r, g, b = _ints(line, 3, what, line_no)
    if max(r, g, b) > 255:
        raise ConfigError(f"colour component above 255 in {what}: {line!r}", line_no)
    return Color(r, g, b)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------
class _ConfigParser:
    """
    Walks the text once, dispatching each data line to the handler of the
    current section.  `row` counts data lines inside fixed-shape sections.
    """

    def __init__(self, config: GridConfig, edge_fields: int,
                 node_palette_rows: Tuple[str, ...], edge_palette_rows: Tuple[str, ...]):
        self.config            = config
        self.edge_fields       = edge_fields
        self.node_palette_rows = node_palette_rows
        self.edge_palette_rows = edge_palette_rows
        self.grid_rows_seen    = 0
        self.handlers: Dict[str, Callable[[str, int, int], None]] = {
            "[GRID DATA]":     self._grid_data,
            "[NODES]":         self._node,
            "[EDGES]":         self._edge,
            "[VISUALIZATION]": self._visualization,
            "[NODE PALETTE]":  self._node_palette,
            "[EDGE PALETTE]":  self._edge_palette,
        }

    def parse(self, text: str) -> GridConfig:
        section = None
        row = 0
        for line_no, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            if line.startswith("[") and line.endswith("]"):
                if line not in self.handlers:
                    raise ConfigError(f"unknown section {line}", line_no)
                section, row = line, 0
                continue

            if section is None:
                raise ConfigError(f"data outside of any section: {line!r}", line_no)
            self.handlers[section](line, row, line_no)
            row += 1

        self._check()
        return self.config

    # ------------------------------------------------------------------
    # Section handlers
    # ------------------------------------------------------------------
    def _grid_data(self, line: str, row: int, line_no: int) -> None:
        if row >= len(GRID_ROWS):
            raise ConfigError("unexpected extra line in [GRID DATA]", line_no)
        if row == 0:
            width, sep, height = line.split()[0].lower().partition("x")
            if not sep:
                raise ConfigError(f"grid size must look like WxH, got {line!r}", line_no)
            try:
                self.config.grid_width, self.config.grid_height = int(width), int(height)
            except ValueError:
                raise ConfigError(f"grid size must look like WxH, got {line!r}", line_no) from None
            if self.config.grid_width < 1 or self.config.grid_height < 1:
                raise ConfigError("grid must be at least 1x1", line_no)
        elif row == 1:
            self.config.start_node = _ints(line, 1, "start node", line_no)[0]
        else:
            self.config.end_node = _ints(line, 1, "end node", line_no)[0]
        self.grid_rows_seen = row + 1

    def _node(self, line: str, row: int, line_no: int) -> None:
        x, y = _ints(line, 2, "node", line_no)
        self.config.nodes.append((x, y))

    def _edge(self, line: str, row: int, line_no: int) -> None:
        values = _ints(line, self.edge_fields, "edge", line_no)
        count = len(self.config.nodes)
        if values[0] >= count or values[1] >= count:
            raise ConfigError(f"edge references unknown node: {line!r}", line_no)
        self.config.edges.append(tuple(values))

    def _visualization(self, line: str, row: int, line_no: int) -> None:
        if row >= len(VISUALIZATION_ROWS):
            raise ConfigError("unexpected extra line in [VISUALIZATION]", line_no)
        what = VISUALIZATION_ROWS[row]
        if what == "background":
            self.config.background = _color(line, what, line_no)
            return
        value = _ints(line, 1, what, line_no)[0]
        if value <= 0:
            raise ConfigError(f"{what} must be bigger than 0", line_no)
        setattr(self.config, what.replace(" ", "_"), value)

    def _node_palette(self, line: str, row: int, line_no: int) -> None:
        self._palette_row(self.config.node_palette, self.node_palette_rows, "[NODE PALETTE]",
                          line, row, line_no)

    def _edge_palette(self, line: str, row: int, line_no: int) -> None:
        self._palette_row(self.config.edge_palette, self.edge_palette_rows, "[EDGE PALETTE]",
                          line, row, line_no)

    @staticmethod
    def _palette_row(palette, rows, section, line, row, line_no) -> None:
        if row >= len(rows):
            raise ConfigError(f"unexpected extra line in {section}", line_no)
        setattr(palette, rows[row], _color(line, f"{section} {rows[row]}", line_no))

    # ------------------------------------------------------------------
    # Whole-config checks
    # ------------------------------------------------------------------
    def _check(self) -> None:
        cfg = self.config
        if self.grid_rows_seen < len(GRID_ROWS):
            raise ConfigError(f"[GRID DATA] is missing the {GRID_ROWS[self.grid_rows_seen]}")
        if not cfg.nodes:
            raise ConfigError("[NODES] is empty")
        for name, index in (("start", cfg.start_node), ("end", cfg.end_node)):
            if index >= len(cfg.nodes):
                raise ConfigError(f"{name} node {index} does not exist ({len(cfg.nodes)} nodes)")
        for index, (x, y) in enumerate(cfg.nodes):
            if x >= cfg.grid_width or y >= cfg.grid_height:
                raise ConfigError(
                    f"node {index} at ({x}, {y}) lies outside the "
                    f"{cfg.grid_width}x{cfg.grid_height} grid"
                )
        if cfg.edge_width > cfg.node_size:
            raise ConfigError(
                f"edge width {cfg.edge_width} is wider than node size {cfg.node_size}"
            )
        if max(cfg.frame_width, cfg.frame_height) > MAX_FRAME_SIZE:
            raise ConfigError(
                f"frame of {cfg.frame_width}x{cfg.frame_height} pixels is too large "
                f"(at most {MAX_FRAME_SIZE} per side)"
            )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def load_path_config(text: str) -> PathGraphConfig:
    """Parse shortest-path graph config text (edges are 'from to')."""
    parser = _ConfigParser(PathGraphConfig(), 2, PATH_NODE_PALETTE_ROWS, PATH_EDGE_PALETTE_ROWS)
    config = parser.parse(text)
    logger.debug("loaded path config: %d nodes, %d edges", len(config.nodes), len(config.edges))
    return config


def load_flow_config(text: str) -> FlowGraphConfig:
    """Parse flow graph config text (edges are 'from to capacity')."""
    parser = _ConfigParser(FlowGraphConfig(), 3, FLOW_NODE_PALETTE_ROWS, FLOW_EDGE_PALETTE_ROWS)
    config = parser.parse(text)
    logger.debug("loaded flow config: %d nodes, %d edges, max capacity %d",
                 len(config.nodes), len(config.edges), config.max_capacity)
    return config


def load_config_file(path: Union[str, Path], kind: str) -> GridConfig:
    """Read a config file; `kind` is "path" or "flow"."""
    loaders = {"path": load_path_config, "flow": load_flow_config}
    if kind not in loaders:
        raise ValueError(f"Unknown config kind: {kind}")
    text = Path(path).read_text(encoding="utf-8")
    return loaders[kind](text)
