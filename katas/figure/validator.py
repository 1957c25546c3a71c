"""
Rectangle Validator - Checks that a bounding box is a well-formed basic rectangle.
"""

import numpy as np

from .grid import Figure, CORNER, HORIZONTAL, VERTICAL


def is_rectangle(figure: Figure, left: int, top: int, right: int, bottom: int) -> bool:
    """
    Check whether the box (left, top)-(right, bottom) is a basic rectangle.

    Rules:
    - All four corners are '+'
    - Top and bottom edges between the corners are '-' or '+'
      (a '+' there is a junction with a neighbouring rectangle)
    - Left and right edges between the corners are '|'
    - No '+' anywhere strictly inside the box (that would subdivide it)

    Args:
        figure: Figure to inspect
        left, top: Top-left corner position
        right, bottom: Bottom-right corner position

    Returns:
        True if the box is a basic rectangle
    """
    if right <= left or bottom <= top:
        return False
    if left < 0 or top < 0 or right >= figure.cols or bottom >= figure.rows:
        return False

    box = figure.cells[top:bottom + 1, left:right + 1]

    # Corners
    if not (box[0, 0] == CORNER and box[0, -1] == CORNER
            and box[-1, 0] == CORNER and box[-1, -1] == CORNER):
        return False

    # Horizontal edges
    for edge in (box[0, 1:-1], box[-1, 1:-1]):
        if not np.all((edge == HORIZONTAL) | (edge == CORNER)):
            return False

    # Vertical edges
    if not (np.all(box[1:-1, 0] == VERTICAL) and np.all(box[1:-1, -1] == VERTICAL)):
        return False

    # Interior must not be subdivided
    return not np.any(box[1:-1, 1:-1] == CORNER)
