"""
ui/
---
Presentation layer: drawing surfaces and frame output.

    from ui import ImageFrame, GIFRenderer
"""

from ui.frame    import Frame, ImageFrame
from ui.renderer import Renderer, GIFRenderer

__all__ = [
    "Frame",
    "ImageFrame",
    "Renderer",
    "GIFRenderer",
]
