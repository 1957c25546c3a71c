"""
Corner Scanner - Decomposes a figure into its basic rectangles.

Every '+' is tried as a top-left anchor. For each anchor the scanner walks
down the anchor's column for bottom-left candidates and along the anchor's
row for top-right candidates, both nearest first, and emits the first box
that validates. An anchor yields at most one rectangle.
"""

import logging
from typing import Iterator, Optional, Union

from .grid import Figure, CORNER
from .rectangle import Rectangle
from .validator import is_rectangle

logger = logging.getLogger(__name__)


def _find_anchor_rectangle(figure: Figure, x: int, y: int) -> Optional[Rectangle]:
    """
    Find the rectangle anchored at top-left corner (x, y).

    Bottom rows are tried in ascending order, and for each bottom row the
    right columns in ascending order.

    Returns:
        First valid Rectangle, or None if the anchor closes no rectangle
    """
    cells = figure.cells

    for bottom_y in range(y + 1, figure.rows):
        if cells[bottom_y, x] != CORNER:
            continue
        for right_x in range(x + 1, figure.cols):
            if cells[y, right_x] != CORNER or cells[bottom_y, right_x] != CORNER:
                continue
            if is_rectangle(figure, x, y, right_x, bottom_y):
                return Rectangle(left=x, top=y, right=right_x, bottom=bottom_y)

    return None


def iter_rectangles(figure: Figure) -> Iterator[Rectangle]:
    """
    Lazily yield the basic rectangles of a figure.

    Anchors are visited in row-major order. Stopping iteration early
    is safe; the only state is the scan position.

    Args:
        figure: Parsed figure

    Yields:
        Rectangle for each anchor that closes a valid box
    """
    found = 0
    for x, y in figure.corners():
        rectangle = _find_anchor_rectangle(figure, x, y)
        if rectangle is None:
            continue
        found += 1
        logger.debug(
            f"Rectangle {found}: ({rectangle.left},{rectangle.top})->"
            f"({rectangle.right},{rectangle.bottom}) "
            f"{rectangle.width}x{rectangle.height}"
        )
        yield rectangle


def get_figure_rectangles(figure: Union[str, Figure]) -> Iterator[str]:
    """
    Break a figure into the rectangles it is made of.

    The figure text is parsed immediately, so malformed input raises here
    rather than on the first iteration. Rectangles are then produced lazily
    as drawings with blank interiors. Their order is not significant.

    Args:
        figure: Figure text ('\\n' separated rows) or a parsed Figure

    Returns:
        Iterator of rectangle drawings, each row newline-terminated

    Raises:
        InvalidFigure: If the text is not a rectangular box figure

    Example:
        >>> list(get_figure_rectangles("++\\n++\\n"))
        ['++\\n++\\n']
    """
    if not isinstance(figure, Figure):
        figure = Figure.from_text(figure)
    return (rectangle.render() for rectangle in iter_rectangles(figure))
