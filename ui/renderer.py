"""
renderer.py - Frame Lifecycle & GIF Output
==========================================
A Renderer hands out blank frames and takes back finished ones:

    frame = renderer.begin_frame()
    graph_view.draw(frame)
    renderer.end_frame(frame)
    …
    renderer.finalize()          ← exactly once, after the last frame

GIFRenderer keeps the finished frames in memory and writes one looping
animated GIF on finalize(), using Pillow's GIF encoder (palette
quantisation and LZW compression included).
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, List, Union

from PIL import Image

from ui.frame import Frame, ImageFrame

logger = logging.getLogger(__name__)


class Renderer(ABC):

    @abstractmethod
    def begin_frame(self) -> Frame:
        """Return a fresh frame to draw on."""

    @abstractmethod
    def end_frame(self, frame: Frame) -> None:
        """Take a finished frame for output."""

    def finalize(self) -> None:
        """Close any multi-frame output.  Default: nothing to do."""


class GIFRenderer(Renderer):
    """
    Attributes:
        output      : File path or binary file object the GIF is written to.
        frame_delay : Delay between frames in hundredths of a second.
        width       : Frame width in pixels.
        height      : Frame height in pixels.
        frames      : Finished frames, in order.
    """

    def __init__(
        self,
        output: Union[str, Path, BinaryIO],
        frame_delay: int,
        width: int,
        height: int,
    ):
        self.output:      Union[str, Path, BinaryIO] = output
        self.frame_delay: int                        = frame_delay
        self.width:       int                        = width
        self.height:      int                        = height
        self.frames:      List[Image.Image]          = []
        self._finalized:  bool                       = False

    def begin_frame(self) -> ImageFrame:
        return ImageFrame(self.width, self.height)

    def end_frame(self, frame: ImageFrame) -> None:
        if self._finalized:
            raise RuntimeError("GIFRenderer already finalized")
        self.frames.append(frame.image)

    def finalize(self) -> None:
        """
        Write every frame as one looping GIF.  Safe to call twice.

        Pillow folds a frame that is pixel-identical to the one before it
        into that frame and adds the two delays, so the file can hold fewer
        images than were rendered while the playback time stays the same.
        """
        if self._finalized:
            return
        self._finalized = True
        if not self.frames:
            logger.warning("no frames were rendered; nothing written")
            return

        first, rest = self.frames[0], self.frames[1:]
        first.save(
            self.output,
            format="GIF",
            save_all=True,
            append_images=rest,
            duration=self.frame_delay * 10,   # Pillow wants milliseconds
            loop=0,
        )
        logger.info("wrote %d frame(s) of %dx%d to %s",
                    len(self.frames), self.width, self.height, _describe(self.output))


def _describe(output) -> str:
    if isinstance(output, (str, Path)):
        return str(output)
    return getattr(output, "name", type(output).__name__)
