"""
Unit tests for pydantic maze configuration.
"""

import pytest
from pydantic import ValidationError

from maze_routes.config import (
    DEFAULT_MAX_CELLS,
    LoggingConfig,
    MazeConfig,
    create_default_config,
    create_small_config,
)


class TestMazeConfig:
    """Test MazeConfig defaults and validation."""

    def test_defaults(self):
        config = MazeConfig()

        assert config.width == 10
        assert config.length == 10
        assert config.wall_bias == 50.0
        assert config.seed is None
        assert config.group_tracking == "rescan"
        assert config.max_cells == DEFAULT_MAX_CELLS
        assert config.logging.level == "INFO"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"width": 0},
            {"length": -2},
            {"wall_bias": -1},
            {"wall_bias": 101},
            {"seed": -5},
            {"group_tracking": "quick_union"},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            MazeConfig(**overrides)

    def test_too_many_cells(self):
        """The diameter sweep is quadratic, so large grids are rejected up front."""
        with pytest.raises(ValidationError, match="max_cells"):
            MazeConfig(width=200, length=200)

    def test_raised_cell_limit(self):
        config = MazeConfig(width=200, length=200, max_cells=40_000)

        assert config.num_cells == 40_000

    def test_logging_level_validated(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="TRACE")


class TestPresets:
    """Test configuration presets."""

    def test_default_config(self):
        assert create_default_config() == MazeConfig()

    def test_small_config(self):
        config = create_small_config()

        assert (config.width, config.length) == (5, 5)
        assert config.seed == 42
        assert config.logging.level == "DEBUG"

    def test_small_config_seed(self):
        assert create_small_config(seed=3).seed == 3
