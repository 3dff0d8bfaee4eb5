"""Exceptions raised by the Pazaak engine.

These signal broken invariants or driver misuse. They are meant to stop the
game, not to be recovered from with default values.
"""


class PazaakError(Exception):
    """Base class for all engine errors."""


class EmptyDeckError(PazaakError, IndexError):
    """A card was drawn from a deck with no cards left."""


class InvalidRoundError(PazaakError, IndexError):
    """A game was requested for a round that has not been started."""


class InvalidCardValueError(PazaakError, ValueError):
    """A card was created with a value outside the allowed range."""


class InvalidCardIndexError(PazaakError, IndexError):
    """A card was played from a hand position that does not exist."""


class InvalidStatusTransitionError(PazaakError, ValueError):
    """A player status was moved out of a terminal state."""


class GameNotOverError(PazaakError, RuntimeError):
    """A winner was requested while a player is still playing."""


class GameAlreadyResolvedError(PazaakError, RuntimeError):
    """A game was resolved more than once."""


class MatchOverError(PazaakError, RuntimeError):
    """A score was awarded after the match already has a winner."""
