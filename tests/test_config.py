"""Tests for configuration classes."""

import os
import pytest
from unittest.mock import patch

from config import AppConfig, DisplayConfig, GameConfig, LoggingConfig, PromptConfig
from pazaak.rules import RuleSet


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = GameConfig()

        assert config.target == 20
        assert config.hand_size == 5
        assert config.points_to_win == 3
        assert config.bust_ends_turn is False

    def test_env_overrides(self):
        env = {
            "PAZAAK_TARGET": "15",
            "PAZAAK_HAND_SIZE": "4",
            "PAZAAK_POINTS_TO_WIN": "2",
            "PAZAAK_BUST_ENDS_TURN": "TRUE",
        }
        with patch.dict(os.environ, env, clear=True):
            config = GameConfig()

        assert config.target == 15
        assert config.hand_size == 4
        assert config.points_to_win == 2
        assert config.bust_ends_turn is True

    def test_ruleset(self):
        with patch.dict(os.environ, {}, clear=True):
            rules = GameConfig().ruleset()

        assert rules == RuleSet()

    def test_invalid_ruleset(self):
        with patch.dict(os.environ, {"PAZAAK_POINTS_TO_WIN": "0"}, clear=True):
            config = GameConfig()

        with pytest.raises(ValueError):
            config.ruleset()

    def test_frozen(self):
        config = GameConfig()
        with pytest.raises(AttributeError):
            config.target = 21


class TestPromptConfig:
    """Tests for PromptConfig class."""

    def test_default_attempts(self):
        with patch.dict(os.environ, {}, clear=True):
            assert PromptConfig().max_attempts == 5

    def test_env_attempts(self):
        with patch.dict(os.environ, {"PAZAAK_MAX_INPUT_ATTEMPTS": "2"}):
            assert PromptConfig().max_attempts == 2


class TestDisplayConfig:
    """Tests for DisplayConfig class."""

    def test_color_by_default(self):
        with patch.dict(os.environ, {}, clear=True):
            config = DisplayConfig()

        assert config.color is True
        assert config.turn_delay == 0.0

    def test_no_color(self):
        with patch.dict(os.environ, {"NO_COLOR": "1"}):
            assert DisplayConfig().color is False

    def test_turn_delay(self):
        with patch.dict(os.environ, {"PAZAAK_TURN_DELAY": "0.5"}):
            assert DisplayConfig().turn_delay == 0.5


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig()

        assert config.debug is False
        assert config.seed is None
        assert config.logging.level == "WARNING"
        assert isinstance(config.game, GameConfig)

    def test_seed_from_env(self):
        with patch.dict(os.environ, {"PAZAAK_SEED": "99"}):
            assert AppConfig().seed == 99

    def test_log_level_upper(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert LoggingConfig().level == "DEBUG"

    def test_global_config_exists(self):
        from config import config

        assert isinstance(config, AppConfig)


class TestRuleSet:
    """Tests for RuleSet validation and presets."""

    def test_shared_deck_size(self):
        assert RuleSet().shared_deck_size == 40

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"target": 0},
            {"hand_size": -1},
            {"copies_per_value": 0},
            {"max_card_value": 11},
            {"points_to_win": 0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            RuleSet(**kwargs)

    def test_presets(self):
        assert RuleSet.standard() == RuleSet()
        sudden = RuleSet.sudden_death()
        assert sudden.points_to_win == 1
        assert sudden.bust_ends_turn
