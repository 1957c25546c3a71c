"""
Rectangle Module - Rectangles found in a figure and their canonical drawing.
"""

from dataclasses import dataclass
from typing import Tuple

from .grid import CORNER, HORIZONTAL, VERTICAL, BLANK


@dataclass(frozen=True)
class Rectangle:
    """
    A basic rectangle discovered in a figure.

    Defined by top-left and bottom-right corner positions, both inclusive.

    Attributes:
        left: Left column index
        top: Top row index
        right: Right column index
        bottom: Bottom row index
    """
    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        """Width in characters, corners included."""
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        """Height in rows, corners included."""
        return self.bottom - self.top + 1

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple."""
        return (self.left, self.top, self.right, self.bottom)

    def render(self) -> str:
        """Draw this rectangle with a blank interior."""
        return draw_rectangle(self.width, self.height)


def draw_rectangle(width: int, height: int) -> str:
    """
    Produce the canonical drawing of a rectangle.

    Every row, including the last, is terminated by a newline.

    Args:
        width: Width in characters (>= 2)
        height: Height in rows (>= 2)

    Returns:
        Multi-line rectangle string

    Raises:
        ValueError: If width or height is below 2
    """
    if width < 2 or height < 2:
        raise ValueError(f"Rectangle must be at least 2x2, got {width}x{height}")

    border = CORNER + HORIZONTAL * (width - 2) + CORNER + "\n"
    middle = VERTICAL + BLANK * (width - 2) + VERTICAL + "\n"
    return border + middle * (height - 2) + border
