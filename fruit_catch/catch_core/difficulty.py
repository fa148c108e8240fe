"""
Difficulty Controller
=====================

Turns accumulated session time into a difficulty level and the speed band
and spawn period that go with it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from fruit_catch.catch_core.config_loader import GameConfig, DifficultyConfig, get_config


@dataclass(frozen=True)
class DifficultyChange:
    """Emitted when the level goes up."""
    level: int
    max_speed: float
    spawn_interval_ms: float

    def describe(self) -> str:
        return (
            f"Difficulty increased to level {self.level}. "
            f"Speed: {self.max_speed:g}, Interval: {self.spawn_interval_ms:g}ms"
        )


class DifficultyController:
    """
    Step function of elapsed time.

    level = floor(T / interval) + 1, never decreasing within a session.
    On each increase:
        max_speed = min(base + (level - 1) * speed_step, cap)
        spawn_interval = max(base_interval - (level - 1) * interval_step, floor)
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize controller at level 1.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._cfg: DifficultyConfig = config.difficulty
        self.reset()

    def reset(self) -> None:
        """Back to level 1 with base speed and spawn period."""
        self._level = 1
        self._max_speed = self._cfg.base_max_speed
        self._spawn_interval_ms = self._cfg.base_spawn_interval_ms

    def level_for(self, elapsed_ms: float) -> int:
        return int(math.floor(elapsed_ms / self._cfg.interval_ms)) + 1

    def max_speed_for(self, level: int) -> float:
        return min(
            self._cfg.base_max_speed + (level - 1) * self._cfg.speed_step,
            self._cfg.max_speed_cap
        )

    def spawn_interval_for(self, level: int) -> float:
        return max(
            self._cfg.base_spawn_interval_ms - (level - 1) * self._cfg.spawn_interval_step_ms,
            self._cfg.min_spawn_interval_ms
        )

    def update(self, elapsed_ms: float) -> Optional[DifficultyChange]:
        """
        Recompute the level for the total elapsed session time.

        Args:
            elapsed_ms: Accumulated session time.

        Returns:
            DifficultyChange if the level went up, else None.
        """
        new_level = self.level_for(elapsed_ms)
        if new_level <= self._level:
            return None

        self._level = new_level
        self._max_speed = self.max_speed_for(new_level)
        self._spawn_interval_ms = self.spawn_interval_for(new_level)

        return DifficultyChange(
            level=self._level,
            max_speed=self._max_speed,
            spawn_interval_ms=self._spawn_interval_ms
        )

    @property
    def level(self) -> int:
        return self._level

    @property
    def max_speed(self) -> float:
        """Current width of the fruit speed band."""
        return self._max_speed

    @property
    def spawn_interval_ms(self) -> float:
        return self._spawn_interval_ms
