"""Core Pazaak engine - 100% UI-agnostic."""

from pazaak.cards import Card, Deck, SpecialType
from pazaak.hand import Board, Hand
from pazaak.player import Player, Status
from pazaak.rules import RuleSet

__all__ = [
    "Card",
    "Deck",
    "SpecialType",
    "Board",
    "Hand",
    "Player",
    "Status",
    "RuleSet",
]
