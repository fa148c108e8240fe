"""
Catch Core - The game simulation.

Main exports:
- CatchGame: Session state machine and per-tick simulation
- GameConfig: Configuration loaded from game_config.yaml
- FruitType, FruitCatalog: Fixed set of fruit that can fall
- ManualClock, MonotonicClock: Timestamp sources for the tick driver
- ArrayRenderSurface: Headless numpy render surface
"""

from fruit_catch.catch_core.config_loader import GameConfig, load_config
from fruit_catch.catch_core.fruit_catalog import FruitType, FruitCatalog
from fruit_catch.catch_core.clock import ManualClock, MonotonicClock
from fruit_catch.catch_core.game import CatchGame, SessionState, TickResult
from fruit_catch.catch_core.state_snapshot import GameSnapshot
from fruit_catch.catch_core.render_solid import ArrayRenderSurface

__all__ = [
    "GameConfig",
    "load_config",
    "FruitType",
    "FruitCatalog",
    "ManualClock",
    "MonotonicClock",
    "CatchGame",
    "SessionState",
    "TickResult",
    "GameSnapshot",
    "ArrayRenderSurface",
]
