"""Pazaak game engine with state machine."""

import logging
from random import Random

from transitions import Machine

from pazaak.cards import Card, Deck
from pazaak.errors import (
    EmptyDeckError,
    GameAlreadyResolvedError,
    GameNotOverError,
    InvalidCardIndexError,
)
from pazaak.game.actions import ActionProvider, ActionType
from pazaak.game.events import EventEmitter, EventType
from pazaak.game.state import GameState
from pazaak.hand import Board
from pazaak.player import Player
from pazaak.rules import RuleSet

logger = logging.getLogger(__name__)

NUM_PLAYERS = 2


class PazaakGame:
    """
    One round of Pazaak between two players.

    This is the core game logic, completely UI-agnostic. The driver supplies
    player decisions through an action provider and learns about everything
    that happened through events and return values.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "begin_cycle", "source": "waiting_for_turn", "dest": "player_turn"},
        {"trigger": "next_player", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "end_cycle", "source": "player_turn", "dest": "waiting_for_turn"},
        {"trigger": "conclude", "source": "waiting_for_turn", "dest": "resolved"},
    ]

    def __init__(
        self,
        player_deck: Deck,
        opponent_deck: Deck,
        rules: RuleSet | None = None,
        rng: Random | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Set up a game: build the shared deck, shuffle, and deal hands.

        Args:
            player_deck: Private deck for player 0, owned by the game from now on
            opponent_deck: Private deck for player 1, owned by the game from now on
            rules: Game rules (uses defaults if not provided)
            rng: Random number generator for the shared deck
            events: Emitter to publish on (a fresh one if not provided)

        Raises:
            EmptyDeckError: if a private deck cannot fill a starting hand
        """
        self.rules = rules or RuleSet()
        self.events = events or EventEmitter()

        self.check_decks(self.rules, player_deck, opponent_deck)

        self.players: list[Player] = [
            Player(deck=player_deck),
            Player(deck=opponent_deck),
        ]
        self.boards: list[Board] = [Board(), Board()]

        self.deck = Deck(rng=rng)
        self.deck.fill_standard(
            copies=self.rules.copies_per_value,
            max_value=self.rules.max_card_value,
        )
        self.deck.shuffle()

        self.turn = 1
        self.winner: int | None = None
        self.current_player: int | None = None
        self.exhausted = False
        self._resolved = False

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting_for_turn",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        for index, player in enumerate(self.players):
            player.deck.shuffle()
            self.events.emit_new(EventType.DECK_SHUFFLED, player=index)
            player.deal(self.rules.hand_size)
            self.events.emit_new(
                EventType.CARD_DEALT,
                player=index,
                count=self.rules.hand_size,
            )

        self.initial_card_count = self.card_count
        self.events.emit_new(
            EventType.GAME_STARTED,
            shared_deck=len(self.deck),
            hand_size=self.rules.hand_size,
        )
        logger.debug(
            "Game started: shared deck %d, private decks %d/%d",
            len(self.deck),
            len(player_deck),
            len(opponent_deck),
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def is_over(self) -> bool:
        """Check if no player is still playing."""
        return all(player.is_done for player in self.players)

    @property
    def is_resolved(self) -> bool:
        """Check if the winner has been decided."""
        return self._resolved

    @property
    def card_count(self) -> int:
        """Return the number of cards across every container in the game."""
        return (
            len(self.deck)
            + sum(player.card_count for player in self.players)
            + sum(len(board) for board in self.boards)
        )

    def total(self, player_index: int) -> int:
        """Return a player's board total."""
        return self.boards[player_index].total

    def play_turn(self, choose_action: ActionProvider) -> bool:
        """
        Run one full turn-cycle: player 0 draws and acts, then player 1.

        Args:
            choose_action: Called as choose_action(game, player_index) each
                time a player must act; must return a validated Action

        Returns:
            True if the turn-cycle ran, False if the game was already over
        """
        if self.state != GameState.WAITING_FOR_TURN or self.is_over:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Game is over",
                state=self.state.name,
            )
            return False

        self.begin_cycle()
        for index in range(NUM_PLAYERS):
            if index > 0:
                self.next_player()
            self.current_player = index
            self._take_turn(index, choose_action)
            if self.exhausted:
                break

        self.current_player = None
        completed = self.turn
        self.turn += 1
        self.end_cycle()
        self.events.emit_new(EventType.TURN_CYCLE_COMPLETED, turn=completed)
        return True

    def _take_turn(self, index: int, choose_action: ActionProvider) -> None:
        """Process one player's part of a turn-cycle."""
        player = self.players[index]
        board = self.boards[index]

        if player.is_done:
            self.events.emit_new(
                EventType.TURN_SKIPPED,
                player=index,
                status=player.status.name,
            )
            return

        if not self.deck:
            self._exhaust()
            return

        card = self.deck.draw()
        board.add_card(card)
        self.events.emit_new(
            EventType.CARD_DRAWN,
            player=index,
            card=card.value,
            total=board.total,
        )
        logger.debug("Player %d drew %s (total %d)", index, card, board.total)

        if self._check_bust(index):
            return

        played = False
        while True:
            action = choose_action(self, index)

            if action.kind == ActionType.STAND:
                player.stand()
                self.events.emit_new(
                    EventType.PLAYER_STOOD,
                    player=index,
                    total=board.total,
                )
                return

            if action.kind == ActionType.END:
                self.events.emit_new(EventType.TURN_ENDED, player=index)
                return

            if played:
                logger.warning("Player %d already played a card this turn", index)
                self.events.emit_new(
                    EventType.PLAY_REJECTED,
                    player=index,
                    message="You have already played a card this turn",
                )
                continue

            card = self._play_card(index, action.card_index)
            played = True
            self.events.emit_new(
                EventType.CARD_PLAYED,
                player=index,
                card=card.value,
                total=board.total,
            )

            if self._check_bust(index):
                return

    @staticmethod
    def check_decks(rules: RuleSet, *decks: Deck) -> None:
        """Raise EmptyDeckError if any private deck cannot fill a starting hand."""
        for index, deck in enumerate(decks):
            if len(deck) < rules.hand_size:
                raise EmptyDeckError(
                    f"Player {index} deck has {len(deck)} cards, "
                    f"needs at least {rules.hand_size}"
                )

    def _play_card(self, index: int, card_index: int | None) -> Card:
        """Move a card from a player's hand onto their board."""
        if card_index is None:
            raise InvalidCardIndexError(f"Player {index} played without a card index")
        card = self.players[index].hand.play_card(card_index)
        self.boards[index].add_card(card)
        logger.debug("Player %d played %s", index, card)
        return card

    def _check_bust(self, index: int) -> bool:
        """Apply the optional bust rule. Returns True if the player busted."""
        if not self.rules.bust_ends_turn:
            return False
        total = self.boards[index].total
        if total <= self.rules.target:
            return False
        self.players[index].bust()
        self.events.emit_new(EventType.PLAYER_BUSTED, player=index, total=total)
        return True

    def _exhaust(self) -> None:
        """End the game as a draw because the shared deck ran out."""
        self.exhausted = True
        for player in self.players:
            if player.is_playing:
                player.stand()
        self.events.emit_new(EventType.DECK_EXHAUSTED, turn=self.turn)
        logger.warning("Shared deck exhausted on turn %d; game is a draw", self.turn)

    def check_win(self) -> int | None:
        """
        Determine the winner by distance to the target.

        Read-only. A bust (negative distance) loses to any non-bust; two busts
        draw; otherwise the strictly smaller distance wins. Equal distances
        draw unless exactly one board holds a tie-breaker.

        Returns:
            Winning player index, or None for a draw

        Raises:
            GameNotOverError: if a player is still playing
        """
        if not self.is_over:
            raise GameNotOverError("Both players must be done before checking the winner")

        if self.exhausted:
            return None

        first, second = (self.rules.target - board.total for board in self.boards)

        if first < 0 and second < 0:
            # Both players busted
            return None
        if first < 0:
            return 1
        if second < 0:
            return 0
        if first < second:
            return 0
        if second < first:
            return 1

        # Equal distance
        first_tb, second_tb = (board.has_tie_breaker for board in self.boards)
        if first_tb and not second_tb:
            return 0
        if second_tb and not first_tb:
            return 1
        return None

    def resolve(self) -> int | None:
        """
        Conclude the game and record its winner.

        Returns:
            Winning player index, or None for a draw

        Raises:
            GameAlreadyResolvedError: if the game was already resolved
            GameNotOverError: if a player is still playing
        """
        if self._resolved:
            raise GameAlreadyResolvedError("Game has already been resolved")

        winner = self.check_win()
        self.winner = winner
        self._resolved = True
        self.conclude()

        self.events.emit_new(
            EventType.GAME_RESOLVED,
            winner=winner,
            totals=[board.total for board in self.boards],
            exhausted=self.exhausted,
        )
        logger.debug("Game resolved: winner=%s", winner)
        return winner
