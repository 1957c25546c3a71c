"""
Text Package - Greedy word wrapping.

Usage:
    from katas.text import wrap_text

    for line in wrap_text(paragraph, 26):
        print(line)
"""

from .wrap import wrap_text, MAX_COLUMNS

__all__ = [
    "wrap_text",
    "MAX_COLUMNS",
]
