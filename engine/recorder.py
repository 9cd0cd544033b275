"""
recorder.py - Run Recorder & Analytics
======================================
Records a complete algorithm run as a list of immutable snapshots, then
computes the metrics the CLI log line and the web API report.

Usage:
    rec = Recorder()
    rec.start("FF-BFS", config)
    metrics = rec.run_to_completion()
    rec.export()                     # JSON-serialisable dict
"""

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from algorithms import AlgoInfo, create_algorithm, get_algorithm
from algorithms.base import GraphAlgorithm
from algorithms.bfs import ShortestPathAlgorithm
from algorithms.edmonds_karp import MaxFlowAlgorithm
from engine.stepper import Stepper
from graph import FlowEdgeState, GraphSnapshot, PathNodeState
from graph.config import GridConfig


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:         str   = ""
    algo_label:       str   = ""
    total_steps:      int   = 0       # number of step() calls that returned True
    wall_time_ms:     float = 0.0
    # shortest path
    path_found:       bool  = False
    path_length:      int   = 0       # edges on the path
    nodes_visited:    int   = 0
    # max flow
    max_flow:         int   = 0
    augmenting_paths: int   = 0
    saturated_edges:  int   = 0


@dataclass(frozen=True)
class RecordedStep:
    step_number: int
    snapshot:    GraphSnapshot


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps     : One RecordedStep per successful step.
        metrics   : RunMetrics (available after run_to_completion).
        algorithm : The algorithm being recorded.
    """

    def __init__(self):
        self.steps:     List[RecordedStep]       = []
        self.metrics:   Optional[RunMetrics]     = None
        self.algorithm: Optional[GraphAlgorithm] = None
        self._info:     Optional[AlgoInfo]       = None

    def start(self, algo_key: str, config: GridConfig) -> None:
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        self._info     = info
        self.algorithm = create_algorithm(algo_key, config)
        self.steps     = []
        self.metrics   = None

    def run_to_completion(self) -> RunMetrics:
        if self.algorithm is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        Stepper(self.algorithm, on_step=self._record).run_to_end()
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def _record(self, step_number: int, algorithm: GraphAlgorithm) -> None:
        self.steps.append(RecordedStep(step_number, algorithm.current_state().snapshot()))

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._info.key if self._info else "",
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps": [
                {"step_number": s.step_number, **s.snapshot.to_dict()}
                for s in self.steps
            ],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        algo = self.algorithm
        last = algo.current_state().snapshot()
        metrics = RunMetrics(
            algo_key=self._info.key,
            algo_label=self._info.label,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
        )

        if isinstance(algo, ShortestPathAlgorithm):
            metrics.path_found = algo.path_found
            metrics.path_length = len(algo.path_edges())
            metrics.nodes_visited = sum(
                1 for s in last.node_states
                if s in (PathNodeState.VISITED.value, PathNodeState.ON_SHORTEST_PATH.value)
            )
        elif isinstance(algo, MaxFlowAlgorithm):
            metrics.max_flow = algo.max_flow
            metrics.augmenting_paths = algo.augmenting_paths
            metrics.saturated_edges = len(last.edges_in(FlowEdgeState.SATURATED.value))

        return metrics
