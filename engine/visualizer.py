"""
visualizer.py - Algorithm → Frames
==================================
Turns any step-driven algorithm into a sequence of rendered frames
without knowing which algorithm it is:

    for every step() that returns True:
        frame = renderer.begin_frame()
        algorithm.current_state().draw(frame)
        renderer.end_frame(frame)
    renderer.finalize()

Both algorithms define their first step as "show the untouched graph",
so at least one frame is always produced.
"""

import logging

from algorithms.base import GraphAlgorithm
from engine.stepper import Stepper
from ui.renderer import Renderer

logger = logging.getLogger(__name__)


class Visualizer:

    def __init__(self, algorithm: GraphAlgorithm, renderer: Renderer):
        self.algorithm = algorithm
        self.renderer  = renderer

    def visualize(self) -> int:
        """Run the algorithm to completion.  Returns the number of frames."""
        stepper = Stepper(self.algorithm, on_step=self._render)
        frames = stepper.run_to_end()
        self.renderer.finalize()
        logger.info("%s: rendered %d frame(s)", self.algorithm.key, frames)
        return frames

    def _render(self, step_number: int, algorithm: GraphAlgorithm) -> None:
        frame = self.renderer.begin_frame()
        algorithm.current_state().draw(frame)
        self.renderer.end_frame(frame)
