"""
Tests for configuration loading and the fruit catalog.
"""

import pytest
import yaml

from fruit_catch.catch_core.config_loader import load_config, get_config
from fruit_catch.catch_core.fruit_catalog import FruitCatalog


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def raw_config():
    cfg = load_config()
    return {
        "playfield": {"width": cfg.playfield.width, "height": cfg.playfield.height},
        "basket": {"width": 100, "height": 80, "speed": 15},
        "fruit": {"size": 50},
        "fruit_types": [
            {"name": "apple", "points": 10, "color": [255, 0, 0]},
            {"name": "lemon", "points": 30, "color": [255, 255, 0]},
        ],
        "difficulty": {
            "interval_ms": 10000,
            "base_max_speed": 2,
            "speed_step": 0.5,
            "max_speed_cap": 8,
            "base_spawn_interval_ms": 2000,
            "spawn_interval_step_ms": 150,
            "min_spawn_interval_ms": 500,
        },
    }


def write_config(tmp_path, raw):
    path = tmp_path / "game_config.yaml"
    path.write_text(yaml.safe_dump(raw))
    return str(path)


class TestLoadConfig:
    """Test the default configuration file."""

    def test_default_values(self, config):
        """Shipped defaults."""
        assert config.playfield.width == 800
        assert config.playfield.height == 500
        assert config.basket.width == 100
        assert config.basket.height == 80
        assert config.basket.speed == 15
        assert config.fruit.size == 50
        assert config.session.lives == 3
        assert config.session.frame_unit_ms == 16

    def test_difficulty_values(self, config):
        diff = config.difficulty
        assert diff.interval_ms == 10000
        assert diff.base_max_speed == 2
        assert diff.speed_step == 0.5
        assert diff.max_speed_cap == 8
        assert diff.base_spawn_interval_ms == 2000
        assert diff.spawn_interval_step_ms == 150
        assert diff.min_spawn_interval_ms == 500

    def test_fruit_types(self, config):
        names = [t.name for t in config.fruit_types]
        points = [t.points for t in config.fruit_types]
        assert names == ["apple", "orange", "pear", "grapes", "lemon"]
        assert points == [10, 15, 20, 25, 30]

    def test_config_is_frozen(self, config):
        with pytest.raises(AttributeError):
            config.playfield.width = 10

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_optional_sections_default(self, tmp_path, raw_config):
        """Session section and basket extras fall back to defaults."""
        config = load_config(write_config(tmp_path, raw_config))
        assert config.session.lives == 3
        assert config.session.frame_unit_ms == 16
        assert config.basket.bottom_margin == 10
        assert config.fruit.min_speed == 1.0


class TestConfigValidation:
    """Test that bad configuration fails at load time."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_empty_catalog(self, tmp_path, raw_config):
        raw_config["fruit_types"] = []
        with pytest.raises(ValueError, match="fruit_types"):
            load_config(write_config(tmp_path, raw_config))

    def test_negative_points(self, tmp_path, raw_config):
        raw_config["fruit_types"][0]["points"] = -5
        with pytest.raises(ValueError, match="negative points"):
            load_config(write_config(tmp_path, raw_config))

    def test_duplicate_names(self, tmp_path, raw_config):
        raw_config["fruit_types"][1]["name"] = "Apple"
        with pytest.raises(ValueError, match="unique"):
            load_config(write_config(tmp_path, raw_config))

    def test_basket_wider_than_playfield(self, tmp_path, raw_config):
        raw_config["basket"]["width"] = 900
        with pytest.raises(ValueError, match="basket.width"):
            load_config(write_config(tmp_path, raw_config))

    def test_cap_below_base_speed(self, tmp_path, raw_config):
        raw_config["difficulty"]["max_speed_cap"] = 1
        with pytest.raises(ValueError, match="max_speed_cap"):
            load_config(write_config(tmp_path, raw_config))

    def test_floor_above_base_interval(self, tmp_path, raw_config):
        raw_config["difficulty"]["min_spawn_interval_ms"] = 3000
        with pytest.raises(ValueError, match="min_spawn_interval_ms"):
            load_config(write_config(tmp_path, raw_config))

    def test_non_positive_lives(self, tmp_path, raw_config):
        raw_config["session"] = {"lives": 0}
        with pytest.raises(ValueError, match="lives"):
            load_config(write_config(tmp_path, raw_config))

    def test_bad_color(self, tmp_path, raw_config):
        raw_config["fruit_types"][0]["color"] = [1, 2]
        with pytest.raises(ValueError, match="Color"):
            load_config(write_config(tmp_path, raw_config))


class TestFruitCatalog:
    """Test catalog lookups."""

    def test_length_and_order(self, config):
        catalog = FruitCatalog(config)
        assert len(catalog) == 5
        assert [t.id for t in catalog] == [0, 1, 2, 3, 4]

    def test_index_out_of_range(self, config):
        catalog = FruitCatalog(config)
        with pytest.raises(IndexError):
            catalog[5]
        with pytest.raises(IndexError):
            catalog[-1]

    def test_get_by_name_case_insensitive(self, config):
        catalog = FruitCatalog(config)
        assert catalog.get_by_name("LEMON").points == 30
        assert catalog.get_by_name("banana") is None

    def test_types_are_immutable(self, config):
        apple = FruitCatalog(config)[0]
        with pytest.raises(AttributeError):
            apple.config = None
