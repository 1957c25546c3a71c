"""
Text Katas - independent text-processing routines.

Packages:
    - katas.figure: Rectangle decomposition of ASCII box figures
    - katas.ocr: Bank account parsing from pipe/underscore glyphs
    - katas.text: Greedy word wrapping
    - katas.poker: Poker hand ranking

Usage:
    from katas.figure import get_figure_rectangles

    for rectangle in get_figure_rectangles(figure_text):
        print(rectangle)
"""

__version__ = "0.1.0"
