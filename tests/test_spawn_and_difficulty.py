"""
Tests for the fruit spawner and the difficulty ramp.
"""

import pytest

from fruit_catch.catch_core.config_loader import load_config
from fruit_catch.catch_core.difficulty import DifficultyController
from fruit_catch.catch_core.spawner import FruitSpawner


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def difficulty(config):
    return DifficultyController(config)


class TestFruitSpawner:
    """Test randomized fruit creation."""

    def test_spawn_ranges(self, config):
        spawner = FruitSpawner(config, seed=42)
        size = config.fruit.size
        width = config.playfield.width

        for _ in range(500):
            fruit = spawner.spawn(width, max_speed=2.0)
            assert 0 <= fruit.x <= width - size
            assert fruit.y == -size
            assert fruit.width == size
            assert fruit.height == size
            assert 1.0 <= fruit.speed < 3.0
            assert fruit.fruit_type in spawner.catalog.all_types

    def test_every_type_appears(self, config):
        spawner = FruitSpawner(config, seed=7)
        names = {spawner.spawn(800, 2.0).fruit_type.name for _ in range(300)}
        assert names == set(spawner.catalog.names)

    def test_deterministic_with_seed(self, config):
        s1 = FruitSpawner(config, seed=42)
        s2 = FruitSpawner(config, seed=42)

        seq1 = [(f.x, f.speed, f.fruit_type.name) for f in (s1.spawn(800, 2) for _ in range(20))]
        seq2 = [(f.x, f.speed, f.fruit_type.name) for f in (s2.spawn(800, 2) for _ in range(20))]

        assert seq1 == seq2

    def test_reset_restores_sequence(self, config):
        spawner = FruitSpawner(config, seed=3)
        first = [spawner.spawn(800, 2).x for _ in range(5)]

        spawner.reset(seed=3)
        again = [spawner.spawn(800, 2).x for _ in range(5)]

        assert first == again

    def test_speed_band_follows_max_speed(self, config):
        spawner = FruitSpawner(config, seed=1)
        speeds = [spawner.spawn(800, max_speed=6.0).speed for _ in range(500)]
        assert min(speeds) >= 1.0
        assert max(speeds) < 7.0
        assert max(speeds) > 3.0


class TestDifficultyController:
    """Test the time-driven difficulty step function."""

    def test_initial_state(self, difficulty):
        assert difficulty.level == 1
        assert difficulty.max_speed == 2.0
        assert difficulty.spawn_interval_ms == 2000

    def test_level_boundary(self, difficulty):
        """level = floor(T / interval) + 1."""
        assert difficulty.level_for(0) == 1
        assert difficulty.level_for(9999) == 1
        assert difficulty.level_for(10000) == 2
        assert difficulty.level_for(25000) == 3

    def test_no_change_within_level(self, difficulty):
        assert difficulty.update(9999) is None
        assert difficulty.level == 1

    def test_change_on_level_up(self, difficulty):
        change = difficulty.update(10000)

        assert change is not None
        assert change.level == 2
        assert change.max_speed == 2.5
        assert change.spawn_interval_ms == 1850
        assert difficulty.level == 2

    def test_skipping_levels(self, difficulty):
        """A long tick jumps straight to the right level."""
        change = difficulty.update(35000)
        assert change.level == 4
        assert change.max_speed == 3.5
        assert change.spawn_interval_ms == 1550

    def test_caps_and_floors(self, difficulty):
        difficulty.update(1_000_000)
        assert difficulty.max_speed == 8.0
        assert difficulty.spawn_interval_ms == 500

    def test_speed_cap_reached_at_level_13(self, difficulty):
        assert difficulty.max_speed_for(12) == 7.5
        assert difficulty.max_speed_for(13) == 8.0
        assert difficulty.max_speed_for(14) == 8.0

    def test_never_decreases(self, difficulty):
        difficulty.update(30000)
        assert difficulty.update(5000) is None
        assert difficulty.level == 4

    def test_reset(self, difficulty):
        difficulty.update(50000)
        difficulty.reset()
        assert difficulty.level == 1
        assert difficulty.max_speed == 2.0
        assert difficulty.spawn_interval_ms == 2000

    def test_describe(self, difficulty):
        change = difficulty.update(10000)
        assert change.describe() == "Difficulty increased to level 2. Speed: 2.5, Interval: 1850ms"
