"""Pytest fixtures for Pazaak tests."""

import pytest
from random import Random

from pazaak.cards import Card, Deck
from pazaak.game import Match, PazaakGame
from pazaak.hand import Board


class ScriptedActions:
    """Action provider that replays a fixed list of actions per player."""

    def __init__(self, player0=(), player1=()):
        self.scripts = [list(player0), list(player1)]
        self.calls: list[int] = []

    def __call__(self, game, player_index):
        self.calls.append(player_index)
        return self.scripts[player_index].pop(0)


def rig_shared_deck(game: PazaakGame, values: list[int]) -> None:
    """Replace the shared deck. The first value is drawn first."""
    game.deck = Deck([Card(v) for v in reversed(values)])
    game.initial_card_count = game.card_count


def set_boards(game: PazaakGame, first: list[Card], second: list[Card]) -> None:
    """Put fixed boards in place and stand both players."""
    game.boards = [Board(list(first)), Board(list(second))]
    for player in game.players:
        player.stand()


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def player_deck(rng):
    """A ten-card private deck."""
    return Deck.from_values([1, 2, 3, 4, 5, 6, 1, 2, 3, 4], rng=rng)


@pytest.fixture
def opponent_deck(rng):
    """Another ten-card private deck."""
    return Deck.from_values([2, 3, 4, 5, 6, 1, 2, 3, 4, 5], rng=rng)


@pytest.fixture
def game(player_deck, opponent_deck, rng):
    """A new game instance."""
    return PazaakGame(player_deck, opponent_deck, rng=rng)


@pytest.fixture
def match(rng):
    """A new match."""
    return Match(rng=rng)


@pytest.fixture
def scripted():
    """Factory for scripted action providers."""
    return ScriptedActions


@pytest.fixture
def rig():
    """Helper that replaces a game's shared deck."""
    return rig_shared_deck


@pytest.fixture
def boards():
    """Helper that fixes both boards and stands both players."""
    return set_boards
