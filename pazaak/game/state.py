"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: WAITING_FOR_TURN → PLAYER_TURN → WAITING_FOR_TURN ... → RESOLVED
    """

    # Between turn-cycles, ready for the driver to start the next one
    WAITING_FOR_TURN = auto()

    # A turn-cycle is running; players act in order
    PLAYER_TURN = auto()

    # Winner decided, nothing more happens in this game
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.WAITING_FOR_TURN: [GameState.PLAYER_TURN, GameState.RESOLVED],
    GameState.PLAYER_TURN: [GameState.PLAYER_TURN, GameState.WAITING_FOR_TURN],
    GameState.RESOLVED: [],  # Terminal state
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
