"""
Fruit Spawner
=============

Creates new fruit at the top of the playfield with randomized position,
type and speed. Randomness comes from a private random.Random so that a
seeded game produces the same fruit sequence every time.
"""

from __future__ import annotations

import random
from typing import Optional

from fruit_catch.catch_core.config_loader import GameConfig, get_config
from fruit_catch.catch_core.entities import Fruit
from fruit_catch.catch_core.fruit_catalog import FruitCatalog, get_catalog


class FruitSpawner:
    """
    Builds one fruit per spawn trigger.

    - x is uniform in [0, playfield_width - fruit_size]
    - y is -fruit_size, just above the visible area
    - type is uniform over the catalog
    - speed is uniform in [min_speed, min_speed + max_speed)
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        catalog: Optional[FruitCatalog] = None
    ):
        """
        Initialize spawner.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility. Random if None.
            catalog: Fruit catalog. Built from config if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._catalog = catalog if catalog is not None else get_catalog(config)
        self._rng = random.Random(seed)
        self._fruit_size = config.fruit.size
        self._min_speed = config.fruit.min_speed

    def spawn(self, playfield_width: float, max_speed: float) -> Fruit:
        """
        Create a fruit for the current playfield width and speed band.

        Args:
            playfield_width: Current playfield width.
            max_speed: Width of the speed band above min_speed.

        Returns:
            A new Fruit (not yet added to any store).
        """
        size = self._fruit_size
        x = self._rng.random() * max(0.0, playfield_width - size)
        fruit_type = self._catalog[self._rng.randrange(len(self._catalog))]
        speed = self._min_speed + self._rng.random() * max_speed

        return Fruit(
            x=x,
            y=-size,
            width=size,
            height=size,
            speed=speed,
            fruit_type=fruit_type
        )

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset the random stream.

        Args:
            seed: New random seed. Keeps the current stream if None.
        """
        if seed is not None:
            self._rng = random.Random(seed)

    @property
    def catalog(self) -> FruitCatalog:
        return self._catalog
