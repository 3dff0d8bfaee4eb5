"""Terminal rendering of cards, boards and match banners."""

from typing import Iterable

from termcolor import colored

from pazaak.cards import Card, Deck
from pazaak.effects import resolve_contributions
from pazaak.game.engine import PazaakGame
from pazaak.game.events import EventType, GameEvent
from pazaak.game.match import Match
from pazaak.hand import Board, Hand

PLAYER_NAMES = ("You", "Opponent")


def player_label(index: int) -> str:
    return f"P{index}"


class Renderer:
    """Formats engine state for a terminal. Color can be turned off."""

    def __init__(self, color: bool = True) -> None:
        self.color = color

    def _paint(self, text: str, color: str, attrs: list[str] | None = None) -> str:
        if not self.color:
            return text
        return colored(text, color, attrs=attrs)

    def _empty(self, label: str) -> str:
        return self._paint(f"<Empty {label}>", "yellow", attrs=["dark"])

    def card(self, card: Card) -> str:
        """Green for positive cards, red for zero or negative."""
        contribution = resolve_contributions([card])[0]
        return self._paint(str(card), "green" if contribution > 0 else "red")

    def _join(self, cards: Iterable[Card]) -> str:
        return ", ".join(self.card(card) for card in cards)

    def hand(self, hand: Hand, hidden: bool = False) -> str:
        """Render a hand, or one `?` per card when hidden."""
        if not hand:
            return self._empty("Hand")
        if hidden:
            return ", ".join("?" for _ in hand)
        return self._join(hand)

    def board(self, board: Board) -> str:
        """Render board cards followed by the total."""
        if not board:
            return self._empty("Board")
        return f"{self._join(board)} ({board.total})"

    def deck(self, deck: Deck) -> str:
        if not deck:
            return self._empty("Deck")
        return ", ".join(str(value) for value in deck.values)

    def banner(self, match: Match) -> str:
        """Round, turn and score lines."""
        turn = match.current_game().turn if match.round else 0
        details = self._paint(f"Round: {match.round} | Turn: {turn}", "blue")
        you = self._paint(f"{PLAYER_NAMES[0]}: {match.score[0]}", "green")
        opponent = self._paint(f"{PLAYER_NAMES[1]}: {match.score[1]}", "red")
        return f"{details}\n{you}{self._paint('   | ', 'blue')}{opponent}"

    def table(self, game: PazaakGame, viewer: int) -> str:
        """
        Render both boards and hands from one player's point of view.

        The viewer's hand is revealed; the other hand is shown as `?`.
        """
        lines = []
        for index, (player, board) in enumerate(zip(game.players, game.boards)):
            lines.append(
                f"{player_label(index)} Board: {self.board(board)} [{player.status}]"
            )
        for index, player in enumerate(game.players):
            hidden = index != viewer
            lines.append(
                f"{player_label(index)} Hand: {self.hand(player.hand, hidden=hidden)}"
            )
        return "\n".join(lines)

    def describe(self, event: GameEvent) -> str | None:
        """Human-readable message for an event, or None for quiet events."""
        data = event.data
        who = player_label(data["player"]) if "player" in data else ""

        if event.event_type == EventType.ROUND_STARTED:
            return self._paint(f"=== Round {data['round']} ===", "blue")
        if event.event_type == EventType.CARD_DRAWN:
            return f"{who} drew {data['card']} (total {data['total']})"
        if event.event_type == EventType.CARD_PLAYED:
            return f"{who} played {data['card']} (total {data['total']})"
        if event.event_type == EventType.PLAY_REJECTED:
            return self._paint(data["message"], "yellow")
        if event.event_type == EventType.PLAYER_STOOD:
            return f"{who} stands on {data['total']}"
        if event.event_type == EventType.PLAYER_BUSTED:
            return self._paint(f"{who} busts with {data['total']}", "red")
        if event.event_type == EventType.DECK_EXHAUSTED:
            return self._paint("The shared deck is empty. This game is a draw.", "yellow")
        if event.event_type == EventType.GAME_RESOLVED:
            totals = " vs ".join(str(total) for total in data["totals"])
            if data["winner"] is None:
                return f"Draw ({totals})"
            return f"{player_label(data['winner'])} wins the round ({totals})"
        if event.event_type == EventType.MATCH_WON:
            return self._paint(
                f"{PLAYER_NAMES[data['winner']]} won the match "
                f"{data['score'][0]}-{data['score'][1]}",
                "green" if data["winner"] == 0 else "red",
            )
        return None
