"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from pazaak.rules import RuleSet


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def _parse_seed() -> int | None:
    """Parse PAZAAK_SEED environment variable."""
    seed = os.getenv("PAZAAK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    target: int = field(default_factory=lambda: int(os.getenv("PAZAAK_TARGET", "20")))
    hand_size: int = field(
        default_factory=lambda: int(os.getenv("PAZAAK_HAND_SIZE", "5"))
    )
    copies_per_value: int = 4
    max_card_value: int = 10
    points_to_win: int = field(
        default_factory=lambda: int(os.getenv("PAZAAK_POINTS_TO_WIN", "3"))
    )
    bust_ends_turn: bool = field(
        default_factory=lambda: _env_bool("PAZAAK_BUST_ENDS_TURN")
    )

    def ruleset(self) -> RuleSet:
        """Build the engine rules from this configuration."""
        return RuleSet(
            target=self.target,
            hand_size=self.hand_size,
            copies_per_value=self.copies_per_value,
            max_card_value=self.max_card_value,
            points_to_win=self.points_to_win,
            bust_ends_turn=self.bust_ends_turn,
        )


@dataclass(frozen=True)
class PromptConfig:
    """Console input configuration."""

    max_attempts: int = field(
        default_factory=lambda: int(os.getenv("PAZAAK_MAX_INPUT_ATTEMPTS", "5"))
    )


@dataclass(frozen=True)
class DisplayConfig:
    """Terminal output configuration."""

    color: bool = field(default_factory=lambda: "NO_COLOR" not in os.environ)
    turn_delay: float = field(
        default_factory=lambda: float(os.getenv("PAZAAK_TURN_DELAY", "0"))
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper()
    )
    format: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    seed: int | None = field(default_factory=_parse_seed)

    game: GameConfig = field(default_factory=GameConfig)
    prompt: PromptConfig = field(default_factory=PromptConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
