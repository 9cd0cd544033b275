"""
shapes.py - Composite shapes built from rectangles
===================================================
The frame only knows how to fill axis-aligned rectangles, so anything
fancier (arrow heads) is assembled here from squares.
"""

from graph.config import Color


def draw_square(frame, x: int, y: int, size: int, color: Color) -> None:
    frame.draw_rectangle(x, y, x + size, y + size, color)


def draw_arrow(
    frame,
    center_x: int,
    center_y: int,
    square: int,
    horizontal: bool,
    forward: bool,
    color: Color,
) -> None:
    """
    Three-square arrow centred on (center_x, center_y):

        #            (two tail squares across the edge,
          #           one head square in the middle)
        #

    `forward` means the arrow points right (horizontal) or down (vertical),
    i.e. away from the top-left corner.
    """
    length = 2 * square      # along the edge
    spread = 3 * square      # across the edge

    along, across = (center_x, center_y) if horizontal else (center_y, center_x)

    tail = along - length // 2
    head = along + length // 2 - square + length % 2
    if not forward:
        tail, head = head, tail

    side_a = across - spread // 2
    side_b = across + spread // 2 - square + spread % 2
    middle = across - square // 2

    for a, c in ((tail, side_a), (tail, side_b), (head, middle)):
        x, y = (a, c) if horizontal else (c, a)
        draw_square(frame, x, y, square, color)
