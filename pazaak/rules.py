"""Pazaak rule configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleSet:
    """
    Pazaak table rules.

    The defaults are the standard ruleset: race to 20, five-card hands,
    a shared deck of four runs of 1-10, first to three games wins.
    """

    # Board total players try to reach without exceeding
    target: int = 20

    # Cards dealt from each private deck at the start of a game
    hand_size: int = 5

    # Shared deck composition
    copies_per_value: int = 4
    max_card_value: int = 10

    # Games needed to win the match
    points_to_win: int = 3

    # Mark a player busted as soon as their total passes the target
    bust_ends_turn: bool = False

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.target < 1:
            raise ValueError("target must be at least 1")
        if self.hand_size < 0:
            raise ValueError("hand_size cannot be negative")
        if self.copies_per_value < 1:
            raise ValueError("copies_per_value must be at least 1")
        if not 1 <= self.max_card_value <= 10:
            raise ValueError("max_card_value must be between 1 and 10")
        if self.points_to_win < 1:
            raise ValueError("points_to_win must be at least 1")

    @property
    def shared_deck_size(self) -> int:
        """Return the number of cards in a freshly filled shared deck."""
        return self.copies_per_value * self.max_card_value

    @classmethod
    def standard(cls) -> "RuleSet":
        """Standard rules."""
        return cls()

    @classmethod
    def sudden_death(cls) -> "RuleSet":
        """Single game match where passing 20 ends your turns immediately."""
        return cls(points_to_win=1, bust_ends_turn=True)
