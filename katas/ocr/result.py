"""
OCR Result Dataclasses

Shared data structures for account reading results.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class DigitResult:
    """Per-digit OCR result."""
    index: int            # Position in the account, 0-based from the left
    glyph: str            # 9-character glyph (top, middle, bottom rows)
    value: Optional[int]  # 0-9 or None if the glyph is unknown


@dataclass
class AccountResult:
    """Complete OCR result for one account."""
    digits: str                                  # Recognized digits, '?' for unknown
    cell_results: List[DigitResult] = field(default_factory=list)
    uncertain_count: int = 0                     # Digits with unknown glyphs

    @property
    def is_valid(self) -> bool:
        """True if every glyph was recognized."""
        return self.uncertain_count == 0 and len(self.digits) > 0

    @property
    def value(self) -> Optional[int]:
        """Numeric account (leading zeros dropped), or None if any digit is unknown."""
        if not self.is_valid:
            return None
        return int(self.digits)
