"""
Figure Debug Utilities

Saves an annotated image of a figure with its discovered rectangles outlined.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from PIL import Image, ImageDraw, ImageFont

from .grid import Figure, BLANK
from .rectangle import Rectangle

logger = logging.getLogger(__name__)

# Pixels per figure character
CELL_SIZE = 12
MARGIN = 8

# Outline colors, cycled per rectangle
RECTANGLE_COLORS = (
    "#d32f2f",
    "#1976d2",
    "#388e3c",
    "#fbc02d",
    "#7b1fa2",
    "#f57c00",
)


def save_debug_image(
    figure: Figure,
    rectangles: Iterable[Rectangle],
    path: Union[str, Path],
    cell_size: int = CELL_SIZE
) -> int:
    """
    Save a PNG showing the figure characters and each rectangle's outline.

    Args:
        figure: Decomposed figure
        rectangles: Rectangles found in the figure
        path: Output file path (parent directories are created)
        cell_size: Pixels per character cell

    Returns:
        Number of rectangles drawn
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    width = figure.cols * cell_size + 2 * MARGIN
    height = figure.rows * cell_size + 2 * MARGIN
    image = Image.new("RGB", (max(width, 1), max(height, 1)), "white")
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    # Figure characters in grey
    for y, line in enumerate(figure.to_lines()):
        for x, char in enumerate(line):
            if char != BLANK:
                draw.text(
                    (MARGIN + x * cell_size + cell_size // 4, MARGIN + y * cell_size),
                    char, fill="#9e9e9e", font=font
                )

    count = 0
    for index, rectangle in enumerate(rectangles):
        color = RECTANGLE_COLORS[index % len(RECTANGLE_COLORS)]
        # Inset by index so shared borders stay visible
        inset = 1 + index % 3
        draw.rectangle(
            [
                MARGIN + rectangle.left * cell_size + inset,
                MARGIN + rectangle.top * cell_size + inset,
                MARGIN + (rectangle.right + 1) * cell_size - inset,
                MARGIN + (rectangle.bottom + 1) * cell_size - inset,
            ],
            outline=color,
            width=1
        )
        count += 1

    image.save(path, "PNG")
    logger.debug(f"Debug image saved: {path} ({count} rectangles)")
    return count
