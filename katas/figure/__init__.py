"""
Figure Package - Rectangle decomposition of ASCII box figures.

A figure is a multi-line string drawn with '+', '-', '|' and spaces.
This package breaks it into the basic rectangles it is made of.

Public API:
    - Figure: Immutable character grid
    - Rectangle: Corner positions of a discovered rectangle
    - InvalidFigure: Raised for non-rectangular or foreign-character input
    - get_figure_rectangles(): Lazy sequence of rectangle drawings
    - iter_rectangles(): Lazy sequence of Rectangle objects
    - is_rectangle(): Bounding box validator
    - draw_rectangle(): Canonical rectangle drawing

Usage:
    from katas.figure import get_figure_rectangles

    figure = (
        '+------+-----+\\n'
        '|      |     |\\n'
        '+------+-----+\\n'
    )
    for drawing in get_figure_rectangles(figure):
        print(drawing)
"""

from .grid import Figure, InvalidFigure, FIGURE_ALPHABET
from .rectangle import Rectangle, draw_rectangle
from .validator import is_rectangle
from .scanner import iter_rectangles, get_figure_rectangles
from .debug import save_debug_image

__all__ = [
    "Figure",
    "InvalidFigure",
    "FIGURE_ALPHABET",
    "Rectangle",
    "draw_rectangle",
    "is_rectangle",
    "iter_rectangles",
    "get_figure_rectangles",
    "save_debug_image",
]
