"""
Scoring System
==============

Tracks score and lives, and records what each catch or miss did.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fruit_catch.catch_core.config_loader import GameConfig, get_config


@dataclass(frozen=True)
class ScoreEvent:
    """Record of a catch or a miss."""
    fruit_uid: int
    fruit_name: str
    points: int          # Points awarded (0 for a miss)
    lives_lost: int      # 1 for a miss, 0 for a catch

    @property
    def is_catch(self) -> bool:
        return self.lives_lost == 0

    def __repr__(self) -> str:
        if self.is_catch:
            return f"ScoreEvent(caught {self.fruit_name} +{self.points})"
        return f"ScoreEvent(missed {self.fruit_name} -{self.lives_lost} life)"


class ScoreTracker:
    """
    Score and lives for one session.

    Score never decreases during play. Lives only go down, one per miss,
    and stop at zero.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize score tracker.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._starting_lives = config.session.lives
        self._score: int = 0
        self._lives: int = self._starting_lives
        self._caught: int = 0
        self._missed: int = 0

    @property
    def score(self) -> int:
        return self._score

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def caught(self) -> int:
        """Fruits caught this session."""
        return self._caught

    @property
    def missed(self) -> int:
        """Fruits missed this session."""
        return self._missed

    @property
    def out_of_lives(self) -> bool:
        return self._lives <= 0

    def apply_catch(self, fruit_uid: int, fruit_name: str, points: int) -> ScoreEvent:
        self._score += points
        self._caught += 1
        return ScoreEvent(fruit_uid, fruit_name, points=points, lives_lost=0)

    def apply_miss(self, fruit_uid: int, fruit_name: str) -> ScoreEvent:
        self._lives = max(0, self._lives - 1)
        self._missed += 1
        return ScoreEvent(fruit_uid, fruit_name, points=0, lives_lost=1)

    def reset(self) -> None:
        """Back to zero score and full lives."""
        self._score = 0
        self._lives = self._starting_lives
        self._caught = 0
        self._missed = 0
