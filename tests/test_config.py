"""
Unit Tests for Game Configuration
"""

import pytest
from pathlib import Path
from simtic.console.config import GameConfig, DIFFICULTY_DEPTHS, depth_for, resolve_difficulty


class TestDifficulty:
    """Tests for difficulty name resolution."""

    def test_depths(self):
        assert DIFFICULTY_DEPTHS == {"hard": 9, "medium": 3, "easy": 1}

    @pytest.mark.parametrize("text,depth", [
        ("hard", 9), ("h", 9), ("Medium", 3), (" m ", 3), ("easy", 1), ("E", 1),
    ])
    def test_depth_for(self, text, depth):
        assert depth_for(text) == depth

    @pytest.mark.parametrize("text", ["", "x", "harder", "impossible"])
    def test_unknown_difficulty(self, text):
        with pytest.raises(ValueError):
            resolve_difficulty(text)


class TestGameConfig:
    """Tests for GameConfig validation."""

    def test_defaults(self):
        config = GameConfig()

        assert config.human_first is None
        assert config.difficulty is None
        assert config.depth is None
        assert not config.self_play
        assert config.log_dir == Path.home() / ".simtic"

    def test_difficulty_is_normalised(self):
        config = GameConfig(difficulty="M")

        assert config.difficulty == "medium"
        assert config.depth == 3

    def test_invalid_difficulty_raises(self):
        with pytest.raises(ValueError):
            GameConfig(difficulty="brutal")

    def test_log_dir_converted_to_path(self, tmp_path):
        config = GameConfig(log_dir=str(tmp_path))
        assert config.log_dir == tmp_path
