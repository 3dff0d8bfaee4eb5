"""Tests for special card effect resolution."""

from pazaak.cards import Card, SpecialType
from pazaak.effects import has_tie_breaker, resolve_contributions, resolve_total


def test_standard_cards_sum():
    cards = [Card(3), Card(7), Card(10)]
    assert resolve_contributions(cards) == [3, 7, 10]
    assert resolve_total(cards) == 20


def test_empty():
    assert resolve_contributions([]) == []
    assert resolve_total([]) == 0


def test_flip_negates_own_value():
    cards = [Card(10), Card(9), Card(3, SpecialType.FLIP)]
    assert resolve_contributions(cards) == [10, 9, -3]
    assert resolve_total(cards) == 16


def test_double_doubles_previous():
    cards = [Card(5), Card(4), Card(1, SpecialType.DOUBLE)]
    assert resolve_contributions(cards) == [5, 8, 0]
    assert resolve_total(cards) == 13


def test_double_first_on_board():
    """A double with nothing before it adds nothing."""
    assert resolve_contributions([Card(2, SpecialType.DOUBLE)]) == [0]


def test_swap_negates_previous_and_adds_value():
    cards = [Card(10), Card(6), Card(2, SpecialType.SWAP)]
    assert resolve_contributions(cards) == [10, -6, 2]
    assert resolve_total(cards) == 6


def test_swap_first_on_board():
    assert resolve_contributions([Card(4, SpecialType.SWAP)]) == [4]


def test_effects_chain_in_order():
    cards = [
        Card(6),
        Card(2, SpecialType.FLIP),
        Card(1, SpecialType.DOUBLE),
        Card(3, SpecialType.SWAP),
    ]
    # 6, -2 -> doubled to -4, then the 0 from DOUBLE is negated, +3
    assert resolve_contributions(cards) == [6, -4, 0, 3]
    assert resolve_total(cards) == 5


def test_tie_breaker_counts_value():
    cards = [Card(10), Card(4, SpecialType.TIE_BREAKER)]
    assert resolve_total(cards) == 14
    assert has_tie_breaker(cards)
    assert not has_tie_breaker([Card(10)])
