"""
Text Wrapping - Greedy word wrap at a fixed column width.
"""

import logging
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

# Widths at or above this never wrap
MAX_COLUMNS = 2 ** 53 - 1

WORD_SEPARATOR = " "


def _wrap_lines(text: str, columns: Optional[int]) -> Iterator[str]:
    """Greedily pack words into lines of at most `columns` characters."""
    if columns is None or columns >= MAX_COLUMNS:
        if text:
            yield text
        return

    line = ""
    for word in text.split(WORD_SEPARATOR):
        if not line:
            line = word
        elif len(line) + len(WORD_SEPARATOR) + len(word) > columns:
            yield line
            line = word
        else:
            line += WORD_SEPARATOR + word

    if line:
        yield line


def wrap_text(text: str, columns: Optional[int]) -> Iterator[str]:
    """
    Break the text into lines no longer than the given column count.

    Lines are broken at word boundaries only. A word longer than the
    column count is put on a line of its own rather than split. The
    column count is checked immediately; lines are then produced lazily.

    Args:
        text: Text to wrap
        columns: Maximum line length, or None to disable wrapping

    Returns:
        Iterator of wrapped lines without trailing newlines

    Raises:
        ValueError: If columns is less than 1

    Example:
        'The String global object is a constructor for strings, or a sequence of characters.', 26 =>
            'The String global object'
            'is a constructor for'
            'strings, or a sequence of'
            'characters.'
    """
    if columns is not None and columns < 1:
        raise ValueError(f"columns must be positive, got {columns}")
    return _wrap_lines(text, columns)
