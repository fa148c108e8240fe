"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Optional

import yaml


Color = Tuple[int, int, int]


@dataclass(frozen=True)
class PlayfieldConfig:
    """Visible simulation area."""
    width: int
    height: int


@dataclass(frozen=True)
class BasketConfig:
    """Player basket geometry and movement."""
    width: float
    height: float
    speed: float             # Pixels per frame unit
    bottom_margin: float     # Gap between basket and playfield bottom
    color: Color
    handle_color: Color


@dataclass(frozen=True)
class FruitSpawnConfig:
    """Geometry and speed band shared by every spawned fruit."""
    size: float
    min_speed: float


@dataclass(frozen=True)
class FruitTypeConfig:
    """Configuration for a single fruit type."""
    id: int
    name: str
    points: int
    color: Color


@dataclass(frozen=True)
class DifficultyConfig:
    """Time-driven difficulty ramp."""
    interval_ms: float
    base_max_speed: float
    speed_step: float
    max_speed_cap: float
    base_spawn_interval_ms: float
    spawn_interval_step_ms: float
    min_spawn_interval_ms: float


@dataclass(frozen=True)
class SessionConfig:
    """Per-session parameters."""
    lives: int
    frame_unit_ms: float
    background: Color


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    playfield: PlayfieldConfig
    basket: BasketConfig
    fruit: FruitSpawnConfig
    fruit_types: Tuple[FruitTypeConfig, ...]
    difficulty: DifficultyConfig
    session: SessionConfig


def _parse_color(color_data: List) -> Color:
    """Parse RGB color from YAML."""
    if len(color_data) != 3:
        raise ValueError(f"Color must have 3 values [R, G, B], got {color_data}")
    return (int(color_data[0]), int(color_data[1]), int(color_data[2]))


def _parse_fruit_type(type_id: int, type_data: dict) -> FruitTypeConfig:
    """Parse a single fruit type entry from YAML."""
    return FruitTypeConfig(
        id=type_id,
        name=str(type_data["name"]),
        points=int(type_data["points"]),
        color=_parse_color(type_data.get("color", [200, 200, 200]))
    )


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if config.playfield.width <= 0 or config.playfield.height <= 0:
        raise ValueError(
            f"playfield must have positive size, got "
            f"{config.playfield.width}x{config.playfield.height}"
        )

    if config.basket.width <= 0 or config.basket.height <= 0:
        raise ValueError("basket must have positive width and height")

    if config.basket.width > config.playfield.width:
        raise ValueError(
            f"basket.width ({config.basket.width}) exceeds "
            f"playfield.width ({config.playfield.width})"
        )

    if config.fruit.size <= 0:
        raise ValueError(f"fruit.size must be positive, got {config.fruit.size}")

    if config.fruit.size > config.playfield.width:
        raise ValueError(
            f"fruit.size ({config.fruit.size}) exceeds "
            f"playfield.width ({config.playfield.width})"
        )

    if config.fruit.min_speed <= 0:
        raise ValueError(f"fruit.min_speed must be positive, got {config.fruit.min_speed}")

    if not config.fruit_types:
        raise ValueError("fruit_types must contain at least one entry")

    for fruit_type in config.fruit_types:
        if fruit_type.points < 0:
            raise ValueError(
                f"fruit type '{fruit_type.name}' has negative points ({fruit_type.points})"
            )

    names = [t.name.lower() for t in config.fruit_types]
    if len(set(names)) != len(names):
        raise ValueError(f"fruit type names must be unique, got {names}")

    diff = config.difficulty
    if diff.interval_ms <= 0:
        raise ValueError(f"difficulty.interval_ms must be positive, got {diff.interval_ms}")

    if diff.max_speed_cap < diff.base_max_speed:
        raise ValueError(
            f"difficulty.max_speed_cap ({diff.max_speed_cap}) is below "
            f"base_max_speed ({diff.base_max_speed})"
        )

    if diff.min_spawn_interval_ms <= 0:
        raise ValueError(
            f"difficulty.min_spawn_interval_ms must be positive, got {diff.min_spawn_interval_ms}"
        )

    if diff.min_spawn_interval_ms > diff.base_spawn_interval_ms:
        raise ValueError(
            f"difficulty.min_spawn_interval_ms ({diff.min_spawn_interval_ms}) exceeds "
            f"base_spawn_interval_ms ({diff.base_spawn_interval_ms})"
        )

    if diff.speed_step < 0 or diff.spawn_interval_step_ms < 0:
        raise ValueError("difficulty steps must not be negative")

    if config.session.lives <= 0:
        raise ValueError(f"session.lives must be positive, got {config.session.lives}")

    if config.session.frame_unit_ms <= 0:
        raise ValueError(
            f"session.frame_unit_ms must be positive, got {config.session.frame_unit_ms}"
        )


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    playfield_data = raw["playfield"]
    playfield = PlayfieldConfig(
        width=int(playfield_data["width"]),
        height=int(playfield_data["height"])
    )

    basket_data = raw["basket"]
    basket = BasketConfig(
        width=float(basket_data["width"]),
        height=float(basket_data["height"]),
        speed=float(basket_data["speed"]),
        bottom_margin=float(basket_data.get("bottom_margin", 10)),
        color=_parse_color(basket_data.get("color", [139, 69, 19])),
        handle_color=_parse_color(basket_data.get("handle_color", [139, 90, 43]))
    )

    fruit_data = raw["fruit"]
    fruit = FruitSpawnConfig(
        size=float(fruit_data["size"]),
        min_speed=float(fruit_data.get("min_speed", 1.0))
    )

    fruit_types = tuple(
        _parse_fruit_type(i, t) for i, t in enumerate(raw["fruit_types"] or [])
    )

    diff_data = raw["difficulty"]
    difficulty = DifficultyConfig(
        interval_ms=float(diff_data["interval_ms"]),
        base_max_speed=float(diff_data["base_max_speed"]),
        speed_step=float(diff_data["speed_step"]),
        max_speed_cap=float(diff_data["max_speed_cap"]),
        base_spawn_interval_ms=float(diff_data["base_spawn_interval_ms"]),
        spawn_interval_step_ms=float(diff_data["spawn_interval_step_ms"]),
        min_spawn_interval_ms=float(diff_data["min_spawn_interval_ms"])
    )

    session_data = raw.get("session", {})
    session = SessionConfig(
        lives=int(session_data.get("lives", 3)),
        frame_unit_ms=float(session_data.get("frame_unit_ms", 16)),
        background=_parse_color(session_data.get("background", [245, 235, 220]))
    )

    config = GameConfig(
        playfield=playfield,
        basket=basket,
        fruit=fruit,
        fruit_types=fruit_types,
        difficulty=difficulty,
        session=session
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
