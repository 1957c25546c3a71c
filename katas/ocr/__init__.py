"""
OCR Module - Bank account numbers from pipe/underscore glyphs.

Pluggable OCR architecture for reading scanned account numbers.

Usage:
    from katas.ocr import parse_bank_account

    account = parse_bank_account(text)  # int, or None if unreadable

Example with per-digit details:
    engine = create_engine("glyph")
    result = engine.process(text)
    for cell in result.cell_results:
        print(cell.index, cell.value)
"""

# Public API - Result types
from .result import (
    DigitResult,
    AccountResult,
)

# Public API - Base class for custom engines
from .base import OCREngine

# Public API - Glyph engine and helpers
from .glyph_engine import (
    GlyphTableEngine,
    DIGIT_GLYPHS,
    ACCOUNT_DIGITS,
    UNKNOWN_DIGIT,
    read_account,
    parse_bank_account,
)

# Public API - Factory functions
from .factory import (
    create_engine,
    register_engine,
    available_engines,
)

__all__ = [
    # Result types
    "DigitResult",
    "AccountResult",
    # Base class
    "OCREngine",
    # Engines
    "GlyphTableEngine",
    # Constants
    "DIGIT_GLYPHS",
    "ACCOUNT_DIGITS",
    "UNKNOWN_DIGIT",
    # Functions
    "read_account",
    "parse_bank_account",
    # Factory
    "create_engine",
    "register_engine",
    "available_engines",
]
