"""Best-of-N match orchestration."""

import logging
from random import Random

from pazaak.cards import Deck
from pazaak.errors import InvalidRoundError, MatchOverError
from pazaak.game.engine import NUM_PLAYERS, PazaakGame
from pazaak.game.events import EventEmitter, EventType, GameEvent, EventHandler
from pazaak.rules import RuleSet

logger = logging.getLogger(__name__)


class Match:
    """
    A sequence of games played until one player reaches the winning score.

    The match owns every game it starts. Games are append-only and indexed by
    round - 1. Updating the score after a game is the caller's job, through
    award().
    """

    def __init__(
        self,
        rules: RuleSet | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a match.

        Args:
            rules: Rules shared by every game in the match
            rng: Random number generator for shared-deck shuffles
        """
        self.rules = rules or RuleSet()
        self._rng = rng or Random()
        self.events = EventEmitter()
        self.games: list[PazaakGame] = []
        self.round = 0
        self.score = [0] * NUM_PLAYERS

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to match and game events."""
        self.events.subscribe(handler, event_type)

    def new_game(self, player_deck: Deck, opponent_deck: Deck) -> PazaakGame:
        """
        Start the next round.

        Both decks are copied, so the same original decks can start every
        round.

        Returns:
            The new game, which is now the current game

        Raises:
            EmptyDeckError: if a private deck cannot fill a hand. The round
                counter and the game list are left unchanged.
        """
        PazaakGame.check_decks(self.rules, player_deck, opponent_deck)
        self.events.emit_new(EventType.ROUND_STARTED, round=self.round + 1)
        game = PazaakGame(
            player_deck.copy(),
            opponent_deck.copy(),
            rules=self.rules,
            rng=self._rng,
            events=self.events,
        )
        self.games.append(game)
        self.round = len(self.games)
        logger.info("Round %d started", self.round)
        return game

    def current_game(self) -> PazaakGame:
        """
        Return the game for the current round.

        Raises:
            InvalidRoundError: if no game has been started
        """
        if self.round == 0:
            raise InvalidRoundError("No game has been started in this match")
        return self.games[self.round - 1]

    def check_win(self) -> int | None:
        """Return the index of the player who reached the winning score, if any."""
        for index, points in enumerate(self.score):
            if points >= self.rules.points_to_win:
                return index
        return None

    @property
    def is_over(self) -> bool:
        """Check if the match has a winner."""
        return self.check_win() is not None

    def award(self, winner: int | None) -> None:
        """
        Record the result of a concluded game.

        Args:
            winner: Winning player index, or None for a drawn game

        Raises:
            MatchOverError: if the match already has a winner
        """
        if self.is_over:
            raise MatchOverError("Match is already decided")
        if winner is not None and not 0 <= winner < NUM_PLAYERS:
            raise ValueError(f"Invalid player index: {winner}")

        if winner is not None:
            self.score[winner] += 1

        self.events.emit_new(
            EventType.SCORE_UPDATED,
            winner=winner,
            score=list(self.score),
        )
        logger.info("Round %d result: winner=%s, score=%s", self.round, winner, self.score)

        match_winner = self.check_win()
        if match_winner is not None:
            self.events.emit_new(
                EventType.MATCH_WON,
                winner=match_winner,
                score=list(self.score),
                rounds=self.round,
            )

    @property
    def history(self) -> list[GameEvent]:
        """Return every event emitted during the match."""
        return self.events.history
