"""
Entities
========

The basket and the falling fruit, plus the entity store that owns them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from fruit_catch.catch_core.fruit_catalog import FruitType


@dataclass
class Box:
    """Axis-aligned box with its top-left corner at (x, y). Y grows downward."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass
class Basket(Box):
    """The player-controlled catcher. Exactly one per game."""
    speed: float = 15.0

    def clamp_to(self, playfield_width: float) -> None:
        """Keep the basket inside [0, playfield_width - width]."""
        if self.x < 0:
            self.x = 0.0
        elif self.x + self.width > playfield_width:
            self.x = playfield_width - self.width

    def center_on(self, x: float, playfield_width: float) -> None:
        self.x = x - self.width / 2
        self.clamp_to(playfield_width)


@dataclass
class Fruit(Box):
    """A falling fruit. Speed is fixed at spawn."""
    speed: float = 1.0
    fruit_type: Optional[FruitType] = None
    uid: int = 0

    @property
    def points(self) -> int:
        return self.fruit_type.points if self.fruit_type is not None else 0

    def fall(self, frames: float) -> None:
        """Advance by speed x frames (elapsed / frame unit)."""
        self.y += self.speed * frames


@dataclass
class EntityStore:
    """Basket plus the active fruit, in spawn order."""
    basket: Basket
    fruits: List[Fruit] = field(default_factory=list)
    _next_uid: int = field(default=0, repr=False)

    def add_fruit(self, fruit: Fruit) -> Fruit:
        fruit.uid = self._next_uid
        self._next_uid += 1
        self.fruits.append(fruit)
        return fruit

    def remove_fruit(self, fruit: Fruit) -> None:
        self.fruits.remove(fruit)

    def clear_fruits(self) -> None:
        self.fruits.clear()

    def __iter__(self) -> Iterator[Fruit]:
        return iter(self.fruits)

    def __len__(self) -> int:
        return len(self.fruits)
