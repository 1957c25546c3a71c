"""
Poker Package - Five-card hand ranking.

Usage:
    from katas.poker import get_poker_hand_rank, PokerRank

    rank = get_poker_hand_rank(['4♥', '5♥', '6♥', '7♥', '8♥'])
    assert rank == PokerRank.STRAIGHT_FLUSH
"""

from .card import Card, Suit, InvalidCard
from .rank import PokerRank, get_poker_hand_rank, is_straight, is_flush

__all__ = [
    "Card",
    "Suit",
    "InvalidCard",
    "PokerRank",
    "get_poker_hand_rank",
    "is_straight",
    "is_flush",
]
