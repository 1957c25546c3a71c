"""
Test script for poker hand ranking.

Usage:
    python test_poker.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from katas.poker import (
    Card,
    Suit,
    InvalidCard,
    PokerRank,
    get_poker_hand_rank,
)


REFERENCE_HANDS = [
    (['4♥', '5♥', '6♥', '7♥', '8♥'], PokerRank.STRAIGHT_FLUSH),
    (['A♠', '4♠', '3♠', '5♠', '2♠'], PokerRank.STRAIGHT_FLUSH),
    (['4♣', '4♦', '4♥', '4♠', '10♥'], PokerRank.FOUR_OF_KIND),
    (['4♣', '4♦', '5♦', '5♠', '5♥'], PokerRank.FULL_HOUSE),
    (['4♣', '5♣', '6♣', '7♣', 'Q♣'], PokerRank.FLUSH),
    (['2♠', '3♥', '4♥', '5♥', '6♥'], PokerRank.STRAIGHT),
    (['2♥', '4♦', '5♥', 'A♦', '3♠'], PokerRank.STRAIGHT),
    (['2♥', '2♠', '2♦', '7♥', 'A♥'], PokerRank.THREE_OF_KIND),
    (['2♥', '4♦', '4♥', 'A♦', 'A♠'], PokerRank.TWO_PAIRS),
    (['3♥', '4♥', '10♥', '3♦', 'A♠'], PokerRank.ONE_PAIR),
    (['A♥', 'K♥', 'Q♥', '2♦', '3♠'], PokerRank.HIGH_CARD),
]


def test_reference_hands():
    """Test ranking of the reference hands."""
    print("\n" + "="*60)
    print("TEST: Reference hands")
    print("="*60)

    for hand, expected in REFERENCE_HANDS:
        rank = get_poker_hand_rank(hand)
        print(f"  {' '.join(hand)} => {rank.name}")
        assert rank == expected, f"{hand}: {rank.name} != {expected.name}"

    print("  [PASS] Reference hand tests")


def test_ace_high_straight():
    assert get_poker_hand_rank(['10♦', 'J♠', 'Q♥', 'K♣', 'A♦']) == PokerRank.STRAIGHT
    assert get_poker_hand_rank(['10♦', 'J♦', 'Q♦', 'K♦', 'A♦']) == PokerRank.STRAIGHT_FLUSH
    # No wrap-around
    assert get_poker_hand_rank(['Q♦', 'K♠', 'A♥', '2♣', '3♦']) == PokerRank.HIGH_CARD


def test_rank_order():
    assert PokerRank.STRAIGHT_FLUSH > PokerRank.FOUR_OF_KIND > PokerRank.FULL_HOUSE
    assert PokerRank.FLUSH > PokerRank.STRAIGHT > PokerRank.THREE_OF_KIND
    assert PokerRank.TWO_PAIRS > PokerRank.ONE_PAIR > PokerRank.HIGH_CARD
    assert int(PokerRank.STRAIGHT_FLUSH) == 8
    assert int(PokerRank.HIGH_CARD) == 0


def test_card_parsing():
    assert Card.parse('10♥') == Card(rank=10, suit=Suit.HEARTS)
    assert Card.parse('A♠') == Card(rank=14, suit=Suit.SPADES)
    assert Card.parse('J♣').rank == 11
    assert Card.parse('A♦').is_ace
    assert not Card.parse('2♦').is_ace


def test_invalid_cards():
    for text in ('1♥', '11♥', 'X♠', '4x', '', '♥', 'AA'):
        try:
            Card.parse(text)
            raise AssertionError(f"Expected InvalidCard for {text!r}")
        except InvalidCard:
            pass

    for hand in (['4♥', '5♥'], ['4♥', '5♥', '6♥', '7♥', '8♥', '9♥']):
        try:
            get_poker_hand_rank(hand)
            raise AssertionError(f"Expected InvalidCard for {hand}")
        except InvalidCard:
            pass

    assert issubclass(InvalidCard, ValueError)


def main():
    """Run all tests."""
    tests = [
        test_reference_hands,
        test_ace_high_straight,
        test_rank_order,
        test_card_parsing,
        test_invalid_cards,
    ]
    failed = 0
    for test in tests:
        try:
            test()
        except AssertionError as e:
            failed += 1
            print(f"  [FAIL] {test.__name__}: {e}")
    print("All tests PASSED!" if not failed else f"{failed} test(s) FAILED!")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
