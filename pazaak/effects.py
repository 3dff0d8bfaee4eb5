"""Board total resolution for special cards.

Every card on a board contributes a signed amount to the total. Standard
cards contribute their face value. Special cards are resolved in board order:

    FLIP         contributes -value
    DOUBLE       doubles the previous contribution, contributes 0 itself
    SWAP         negates the previous contribution, then contributes value
    TIE_BREAKER  contributes value, and wins equal-distance ties

The base ruleset never puts special cards into play.
"""

from typing import Iterable

from pazaak.cards import Card, SpecialType


def resolve_contributions(cards: Iterable[Card]) -> list[int]:
    """
    Resolve each card's contribution to a board total.

    Args:
        cards: Board cards in the order they were committed

    Returns:
        One contribution per card, index-aligned with the input
    """
    contributions: list[int] = []

    for card in cards:
        if card.special is None or card.special == SpecialType.TIE_BREAKER:
            contributions.append(card.value)
        elif card.special == SpecialType.FLIP:
            contributions.append(-card.value)
        elif card.special == SpecialType.DOUBLE:
            if contributions:
                contributions[-1] *= 2
            contributions.append(0)
        elif card.special == SpecialType.SWAP:
            if contributions:
                contributions[-1] = -contributions[-1]
            contributions.append(card.value)

    return contributions


def resolve_total(cards: Iterable[Card]) -> int:
    """Return the resolved board total."""
    return sum(resolve_contributions(cards))


def has_tie_breaker(cards: Iterable[Card]) -> bool:
    """Check whether any card wins equal-distance ties."""
    return any(card.special == SpecialType.TIE_BREAKER for card in cards)
