"""
Glyph Table OCR Engine

Reads account numbers drawn as 3x3 glyphs of pipes and underscores:

     _  _     _  _  _  _  _
   | _| _||_||_ |_   ||_||_|
   ||_  _|  | _||_|  ||_| _|

Each digit occupies three columns of three rows. The nine characters of a
glyph (top row, middle row, bottom row) are looked up in a fixed table.
"""

import logging
from types import MappingProxyType
from typing import List, Optional

import numpy as np

from .base import OCREngine
from .result import AccountResult, DigitResult

logger = logging.getLogger(__name__)

# Glyph geometry
GLYPH_WIDTH = 3
GLYPH_HEIGHT = 3
ACCOUNT_DIGITS = 9

UNKNOWN_DIGIT = "?"

DIGIT_GLYPHS = MappingProxyType({
    " _ | ||_|": 0,
    "     |  |": 1,
    " _  _||_ ": 2,
    " _  _| _|": 3,
    "   |_|  |": 4,
    " _ |_  _|": 5,
    " _ |_ |_|": 6,
    " _   |  |": 7,
    " _ |_||_|": 8,
    " _ |_| _|": 9,
})


class GlyphTableEngine(OCREngine):
    """
    OCR engine using exact glyph table lookup.

    Rows are padded with spaces to the full account width, so scans with
    trimmed trailing whitespace still read correctly.
    """

    def __init__(self, account_digits: int = ACCOUNT_DIGITS):
        """
        Initialize the glyph table engine.

        Args:
            account_digits: Number of digits in an account
        """
        self._account_digits = account_digits

    @property
    def name(self) -> str:
        return "glyph"

    @property
    def account_digits(self) -> int:
        return self._account_digits

    def configure(self, **kwargs) -> None:
        """
        Configure engine parameters.

        Args:
            account_digits: Number of digits in an account
        """
        if 'account_digits' in kwargs:
            account_digits = int(kwargs['account_digits'])
            if account_digits < 1:
                raise ValueError(f"account_digits must be positive, got {account_digits}")
            self._account_digits = account_digits

    def process(self, text: str) -> AccountResult:
        lines = text.split("\n")
        if len(lines) < GLYPH_HEIGHT:
            logger.debug(f"Account text has {len(lines)} rows, need {GLYPH_HEIGHT}")
            return AccountResult(digits="")

        grid = self._to_grid(lines[:GLYPH_HEIGHT])

        cell_results: List[DigitResult] = []
        for index in range(self._account_digits):
            start = index * GLYPH_WIDTH
            glyph = "".join(grid[:, start:start + GLYPH_WIDTH].ravel())
            cell_results.append(DigitResult(
                index=index,
                glyph=glyph,
                value=DIGIT_GLYPHS.get(glyph)
            ))

        digits = "".join(
            UNKNOWN_DIGIT if cell.value is None else str(cell.value)
            for cell in cell_results
        )
        uncertain_count = sum(1 for cell in cell_results if cell.value is None)

        if uncertain_count:
            logger.debug(f"Account read with {uncertain_count} unknown glyph(s): {digits}")

        return AccountResult(
            digits=digits,
            cell_results=cell_results,
            uncertain_count=uncertain_count
        )

    def _to_grid(self, lines: List[str]) -> np.ndarray:
        """Build a (3, width) character array, padding or trimming each row."""
        width = self._account_digits * GLYPH_WIDTH
        rows = [list(line[:width].ljust(width)) for line in lines]
        return np.array(rows, dtype="<U1").reshape(GLYPH_HEIGHT, width)


_default_engine = GlyphTableEngine()


def read_account(text: str) -> AccountResult:
    """
    Read an account with per-digit details.

    Args:
        text: Three rows of glyph text

    Returns:
        AccountResult for the account
    """
    return _default_engine.process(text)


def parse_bank_account(text: str) -> Optional[int]:
    """
    Return the bank account number parsed from glyph text.

    Args:
        text: Three '\\n' separated rows of glyphs (a trailing newline is fine)

    Returns:
        Account number as int (leading zeros dropped), or None if fewer
        than three rows are given or any glyph is unknown

    Example:
        '    _  _     _  _  _  _  _ \\n'
        '  | _| _||_||_ |_   ||_||_|\\n'   =>  123456789
        '  ||_  _|  | _||_|  ||_| _|\\n'
    """
    return read_account(text).value
