"""
stepper.py - Step Loop
======================
The Stepper owns the "call step() until it says no" loop so that the
visualizer and the recorder don't each reimplement it.

State machine:
    IDLE  →  next_step() → True   →  RUNNING
    any   →  next_step() → False  →  FINISHED

After every successful step the optional on_step(step_number, algorithm)
callback fires; the GIF visualizer renders a frame there, the recorder
takes a snapshot.

Thread safety:
  Not thread-safe, and it does not need to be: step and callback strictly
  alternate on the calling thread, so no callback ever sees a graph in
  the middle of a mutation.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from algorithms.base import GraphAlgorithm

logger = logging.getLogger(__name__)


class StepperState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    FINISHED = "finished"


StepCallback = Callable[[int, GraphAlgorithm], None]


class Stepper:
    """
    Attributes:
        algorithm   : The algorithm being driven.
        state       : Current StepperState.
        steps_taken : Number of step() calls that returned True.
        on_step     : Optional callback(step_number, algorithm), 0-based.
    """

    def __init__(self, algorithm: GraphAlgorithm, on_step: Optional[StepCallback] = None):
        self.algorithm:   GraphAlgorithm         = algorithm
        self.state:       StepperState           = StepperState.IDLE
        self.steps_taken: int                    = 0
        self.on_step:     Optional[StepCallback] = on_step

    def next_step(self) -> bool:
        """Advance once.  Returns False when the algorithm is done."""
        if self.state is StepperState.FINISHED:
            return False
        if not self.algorithm.step():
            self.state = StepperState.FINISHED
            logger.debug("%s finished after %d step(s)", self.algorithm.key, self.steps_taken)
            return False

        self.state = StepperState.RUNNING
        step_number = self.steps_taken
        self.steps_taken += 1
        if self.on_step is not None:
            self.on_step(step_number, self.algorithm)
        return True

    def run_to_end(self) -> int:
        """Exhaust the algorithm.  Returns the number of successful steps."""
        while self.next_step():
            pass
        return self.steps_taken

    @property
    def is_finished(self) -> bool:
        return self.state is StepperState.FINISHED
