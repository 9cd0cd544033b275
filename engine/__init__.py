"""
engine/
-------
Driving layer: step loop, frame rendering, run recording.

    from engine import Stepper, Visualizer, Recorder
"""

from engine.stepper    import Stepper, StepperState
from engine.visualizer import Visualizer
from engine.recorder   import Recorder, RecordedStep, RunMetrics

__all__ = [
    "Stepper",
    "StepperState",
    "Visualizer",
    "Recorder",
    "RecordedStep",
    "RunMetrics",
]
