"""
frame.py - Drawing Surfaces
===========================
A Frame is the only thing graph entities draw on.  It knows exactly one
primitive: fill an axis-aligned rectangle.

Coordinates are pixels; (x0, y0) is the top-left corner (inclusive) and
(x1, y1) the bottom-right corner (exclusive), so a rectangle covers
(x1 - x0) * (y1 - y0) pixels and (0, 0, width, height) is the whole frame.
"""

from abc import ABC, abstractmethod
from typing import Tuple

from PIL import Image, ImageDraw

from graph.errors import FrameError


class Frame(ABC):

    @abstractmethod
    def draw_rectangle(self, x0: int, y0: int, x1: int, y1: int, color: Tuple[int, int, int]) -> None:
        """Fill the rectangle [x0, x1) x [y0, y1) with `color`."""

    @property
    @abstractmethod
    def width(self) -> int:
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        ...

    def _check_bounds(self, x0: int, y0: int, x1: int, y1: int) -> None:
        for value, limit in ((x0, self.width), (x1, self.width), (y0, self.height), (y1, self.height)):
            if not 0 <= value <= limit:
                raise FrameError(
                    f"rectangle ({x0}, {y0}, {x1}, {y1}) lies outside the "
                    f"{self.width}x{self.height} frame"
                )


class ImageFrame(Frame):
    """RGB frame backed by a Pillow image."""

    def __init__(self, width: int, height: int, background: Tuple[int, int, int] = (0, 0, 0)):
        self._image = Image.new("RGB", (width, height), tuple(background))
        self._draw = ImageDraw.Draw(self._image)

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def image(self) -> Image.Image:
        return self._image

    def draw_rectangle(self, x0, y0, x1, y1, color) -> None:
        if x1 <= x0 or y1 <= y0:
            return
        self._check_bounds(x0, y0, x1, y1)
        # Pillow's rectangle includes its bottom-right corner
        self._draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=tuple(color))

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        return self._image.getpixel((x, y))
