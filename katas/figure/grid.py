"""
Figure Module - Immutable character grid for ASCII box figures.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

logger = logging.getLogger(__name__)

CORNER = "+"
HORIZONTAL = "-"
VERTICAL = "|"
BLANK = " "

# Characters a figure may be drawn with
FIGURE_ALPHABET = frozenset((CORNER, HORIZONTAL, VERTICAL, BLANK))


class InvalidFigure(ValueError):
    """Raised when figure text is not a rectangular grid of box characters."""


@dataclass(frozen=True)
class Figure:
    """
    Immutable figure representation.

    Cells are stored in a numpy character array indexed [row][column].
    The array is marked read-only so the figure cannot change under a
    running scan.

    Attributes:
        cells: 2D array of single characters (dtype '<U1')
    """
    cells: np.ndarray

    @classmethod
    def from_text(cls, text: str) -> 'Figure':
        """
        Create Figure from newline separated text.

        A single trailing empty row (from a final newline) is ignored.

        Args:
            text: Figure rows separated by '\\n'

        Returns:
            Figure instance

        Raises:
            InvalidFigure: If rows differ in length or contain
                characters outside the box alphabet
        """
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return cls.from_lines(lines)

    @classmethod
    def from_lines(cls, lines: List[str]) -> 'Figure':
        """
        Create Figure from a list of rows.

        Args:
            lines: Figure rows, all of equal length

        Returns:
            Figure instance

        Raises:
            InvalidFigure: If the rows are not a valid figure
        """
        if not lines:
            return cls(cells=np.empty((0, 0), dtype="<U1"))

        width = len(lines[0])
        for row, line in enumerate(lines):
            if len(line) != width:
                raise InvalidFigure(
                    f"Row {row} has length {len(line)}, expected {width}"
                )
            unexpected = set(line) - FIGURE_ALPHABET
            if unexpected:
                raise InvalidFigure(
                    f"Row {row} contains unexpected characters: "
                    f"{''.join(sorted(unexpected))!r}"
                )

        cells = np.array([list(line) for line in lines], dtype="<U1").reshape(len(lines), width)
        cells.setflags(write=False)
        logger.debug(f"Figure parsed: {len(lines)}x{width}")
        return cls(cells=cells)

    @property
    def rows(self) -> int:
        """Get number of rows in figure."""
        return self.cells.shape[0]

    @property
    def cols(self) -> int:
        """Get number of columns in figure."""
        return self.cells.shape[1]

    def corners(self) -> List[Tuple[int, int]]:
        """
        Find all corner markers in row-major order.

        Returns:
            List of (x, y) positions holding '+'
        """
        ys, xs = np.nonzero(self.cells == CORNER)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def to_lines(self) -> List[str]:
        """Convert back to a list of row strings."""
        return ["".join(row) for row in self.cells]

    def __eq__(self, other):
        if not isinstance(other, Figure):
            return False
        return np.array_equal(self.cells, other.cells)

    def __hash__(self):
        return hash(tuple(self.to_lines()))
