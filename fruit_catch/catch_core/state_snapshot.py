"""
State Snapshot
==============

Immutable, read-only view of a game at one instant.

Snapshots are what front ends, tools and tests look at; they never hold
references to the live entities, so mutating the game afterwards does not
change a snapshot already taken.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class BasketView:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class FruitView:
    uid: int
    name: str
    points: int
    x: float
    y: float
    width: float
    height: float
    speed: float


@dataclass(frozen=True)
class GameSnapshot:
    """
    Complete session state.

    Attributes:
        state: "idle", "active" or "over".
        score: Points collected this session.
        lives: Lives remaining.
        level: Current difficulty level (1-based).
        max_fruit_speed: Width of the current spawn speed band.
        spawn_interval_ms: Current spawn period.
        game_time_ms: Accumulated active time.
        playfield_width / playfield_height: Current playfield bounds.
        basket: Basket geometry.
        fruits: Active fruit in spawn order.
    """
    state: str
    score: int
    lives: int
    level: int
    max_fruit_speed: float
    spawn_interval_ms: float
    game_time_ms: float
    playfield_width: float
    playfield_height: float
    basket: BasketView
    fruits: Tuple[FruitView, ...]

    @property
    def fruit_count(self) -> int:
        return len(self.fruits)

    def fruit_positions(self) -> np.ndarray:
        """
        Top-left corners of all active fruit.

        Returns:
            (N, 2) float32 array of (x, y); shape (0, 2) when empty.
        """
        if not self.fruits:
            return np.zeros((0, 2), dtype=np.float32)
        return np.array([(f.x, f.y) for f in self.fruits], dtype=np.float32)

    def lowest_fruit(self) -> Optional[FruitView]:
        """The fruit closest to the bottom, or None."""
        if not self.fruits:
            return None
        idx = int(np.argmax(self.fruit_positions()[:, 1]))
        return self.fruits[idx]
