"""
Fruit Catalog
=============

Provides convenient access to fruit type definitions loaded from config.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Optional

from fruit_catch.catch_core.config_loader import (
    GameConfig,
    FruitTypeConfig,
    get_config
)


@dataclass(frozen=True)
class FruitType:
    """
    Runtime representation of a fruit type.

    Wraps FruitTypeConfig. Immutable and shared by every fruit of this type.
    """
    config: FruitTypeConfig

    @property
    def id(self) -> int:
        return self.config.id

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def points(self) -> int:
        return self.config.points

    @property
    def color(self) -> Tuple[int, int, int]:
        return self.config.color

    def __repr__(self) -> str:
        return f"FruitType({self.id}: {self.name}, {self.points}pts)"


class FruitCatalog:
    """
    Fixed, read-only collection of fruit types that can fall.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize catalog from game config.

        Args:
            config: GameConfig instance. If None, loads from default location.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._types: Tuple[FruitType, ...] = tuple(
            FruitType(type_config) for type_config in config.fruit_types
        )

    def __len__(self) -> int:
        return len(self._types)

    def __getitem__(self, type_id: int) -> FruitType:
        """Get fruit type by ID."""
        if 0 <= type_id < len(self._types):
            return self._types[type_id]
        raise IndexError(f"Fruit type ID {type_id} out of range [0, {len(self._types)})")

    def __iter__(self):
        return iter(self._types)

    @property
    def all_types(self) -> Tuple[FruitType, ...]:
        """All fruit types in config order."""
        return self._types

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(t.name for t in self._types)

    def get_by_name(self, name: str) -> Optional[FruitType]:
        """Get fruit type by name (case-insensitive)."""
        name_lower = name.lower()
        for fruit_type in self._types:
            if fruit_type.name.lower() == name_lower:
                return fruit_type
        return None


# Module-level singleton
_cached_catalog: Optional[FruitCatalog] = None


def get_catalog(config: Optional[GameConfig] = None) -> FruitCatalog:
    """
    Get the fruit catalog singleton.

    Args:
        config: Optional config to use. If None, uses cached or default config.

    Returns:
        FruitCatalog instance.
    """
    global _cached_catalog
    if _cached_catalog is None or config is not None:
        _cached_catalog = FruitCatalog(config)
    return _cached_catalog
