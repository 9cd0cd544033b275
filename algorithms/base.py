"""
base.py - Step-Driven Algorithm Contract
========================================
Every algorithm is an object that owns exactly one graph and advances it
one visible step per call:

    algo = ShortestPathAlgorithm(PathGraph(config))
    while algo.step():
        render(algo.current_state())

Contract:
  - step() performs one unit of visible progress and returns True, or
    returns False once the algorithm is done.  The very first call only
    exists so the untouched graph gets rendered once.
  - After the first False every further call returns False and changes
    nothing.
  - current_state() is a read-only GraphView of the owned graph.  It never
    computes anything.
"""

from abc import ABC, abstractmethod

from graph import Graph, GraphView


class GraphAlgorithm(ABC):
    """
    Attributes:
        key      : Registry key (also the CLI name), e.g. "BFS".
        label    : Human label.
        graph    : The owned graph.  Nobody else mutates it.
        finished : True once step() has returned False.
    """

    key:   str = ""
    label: str = ""

    def __init__(self, graph: Graph):
        self.graph:     Graph     = graph
        self._view:     GraphView = graph.view()
        self._finished: bool      = False

    def step(self) -> bool:
        if self._finished:
            return False
        progressed = self._advance()
        if not progressed:
            self._finished = True
        return progressed

    @abstractmethod
    def _advance(self) -> bool:
        """One unit of work.  Only called while the run is not finished."""

    def current_state(self) -> GraphView:
        return self._view

    @property
    def finished(self) -> bool:
        return self._finished

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.graph!r}, finished={self._finished})"
