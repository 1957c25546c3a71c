"""
Hand Ranking - Classify a five-card poker hand.

See https://en.wikipedia.org/wiki/List_of_poker_hands for the ranking rules.
"""

import logging
from collections import Counter
from enum import IntEnum
from typing import List, Sequence

from .card import Card, InvalidCard, ACE_LOW

logger = logging.getLogger(__name__)

HAND_SIZE = 5


class PokerRank(IntEnum):
    """Poker hand categories, higher is better."""
    STRAIGHT_FLUSH = 8
    FOUR_OF_KIND = 7
    FULL_HOUSE = 6
    FLUSH = 5
    STRAIGHT = 4
    THREE_OF_KIND = 3
    TWO_PAIRS = 2
    ONE_PAIR = 1
    HIGH_CARD = 0


def _is_consecutive(ranks: List[int]) -> bool:
    """True if the sorted ranks form an unbroken run."""
    ranks = sorted(ranks)
    return all(rank - ranks[0] == index for index, rank in enumerate(ranks))


def is_straight(cards: Sequence[Card]) -> bool:
    """
    Check for five consecutive ranks.

    The ace counts high (10-J-Q-K-A) or low (A-2-3-4-5).
    """
    ranks = [card.rank for card in cards]
    if _is_consecutive(ranks):
        return True
    return _is_consecutive([ACE_LOW if card.is_ace else card.rank for card in cards])


def is_flush(cards: Sequence[Card]) -> bool:
    """Check that all cards share one suit."""
    return len({card.suit for card in cards}) == 1


def get_poker_hand_rank(hand: Sequence[str]) -> PokerRank:
    """
    Return the rank of the specified poker hand.

    Args:
        hand: Five cards such as ['4♥', '5♥', '6♥', '7♥', '8♥']

    Returns:
        PokerRank of the hand

    Raises:
        InvalidCard: If the hand does not hold exactly five valid cards

    Example:
        [ '4♥','5♥','6♥','7♥','8♥' ] => PokerRank.STRAIGHT_FLUSH
        [ '4♣','4♦','5♦','5♠','5♥' ] => PokerRank.FULL_HOUSE
        [ '2♥','4♦','5♥','A♦','3♠' ] => PokerRank.STRAIGHT
    """
    if len(hand) != HAND_SIZE:
        raise InvalidCard(f"A hand has {HAND_SIZE} cards, got {len(hand)}")

    cards = [Card.parse(card) for card in hand]

    # Rank multiplicities, largest first: (4, 1), (3, 2), (2, 2, 1), ...
    counts = sorted(Counter(card.rank for card in cards).values(), reverse=True)

    straight = counts[0] == 1 and is_straight(cards)
    flush = is_flush(cards)

    if straight and flush:
        rank = PokerRank.STRAIGHT_FLUSH
    elif counts[0] == 4:
        rank = PokerRank.FOUR_OF_KIND
    elif counts[:2] == [3, 2]:
        rank = PokerRank.FULL_HOUSE
    elif flush:
        rank = PokerRank.FLUSH
    elif straight:
        rank = PokerRank.STRAIGHT
    elif counts[0] == 3:
        rank = PokerRank.THREE_OF_KIND
    elif counts[:2] == [2, 2]:
        rank = PokerRank.TWO_PAIRS
    elif counts[0] == 2:
        rank = PokerRank.ONE_PAIR
    else:
        rank = PokerRank.HIGH_CARD

    logger.debug(f"Hand {' '.join(hand)} ranked {rank.name}")
    return rank
