"""
Card Module - Playing card parsing for poker hands.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class InvalidCard(ValueError):
    """Raised when a card or hand cannot be parsed."""


class Suit(str, Enum):
    """The four suits, keyed by their symbol."""
    SPADES = "♠"
    CLUBS = "♣"
    HEARTS = "♥"
    DIAMONDS = "♦"


# Face cards and their numeric ranks (ace high)
FACE_RANKS = MappingProxyType({
    "J": 11,
    "Q": 12,
    "K": 13,
    "A": 14,
})

ACE_HIGH = 14
ACE_LOW = 1


@dataclass(frozen=True)
class Card:
    """
    A single playing card.

    Attributes:
        rank: Numeric rank 2-14 (ace is 14)
        suit: Card suit
    """
    rank: int
    suit: Suit

    @classmethod
    def parse(cls, text: str) -> 'Card':
        """
        Parse a card such as '4♥', '10♠' or 'A♦'.

        Args:
            text: Rank followed by a suit symbol

        Returns:
            Card instance

        Raises:
            InvalidCard: If rank or suit is not recognized
        """
        if len(text) < 2:
            raise InvalidCard(f"Card too short: {text!r}")

        rank_text, suit_text = text[:-1], text[-1]

        try:
            suit = Suit(suit_text)
        except ValueError:
            raise InvalidCard(f"Unknown suit in card {text!r}") from None

        if rank_text in FACE_RANKS:
            rank = FACE_RANKS[rank_text]
        elif rank_text.isdigit() and 2 <= int(rank_text) <= 10:
            rank = int(rank_text)
        else:
            raise InvalidCard(f"Unknown rank in card {text!r}")

        return cls(rank=rank, suit=suit)

    @property
    def is_ace(self) -> bool:
        return self.rank == ACE_HIGH
