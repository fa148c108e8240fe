"""
Input State
===========

Current state of the player's controls, as read by the simulation step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Key names accepted by CatchGame.key_down / key_up
MOVEMENT_KEYS = ("left", "right", "up", "down")


@dataclass
class InputState:
    """
    Held movement keys and the last pointer position.

    Up is an alias for left and down an alias for right. When pointer_x is
    set, the basket follows the pointer instead of the keys.
    """
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    pointer_x: Optional[float] = None

    @property
    def direction(self) -> int:
        """-1, 0 or +1. Opposite keys cancel out."""
        return int(self.right or self.down) - int(self.left or self.up)

    @property
    def pointer_active(self) -> bool:
        return self.pointer_x is not None

    def set_key(self, key: str, pressed: bool) -> None:
        if key not in MOVEMENT_KEYS:
            raise KeyError(f"Unknown movement key: {key!r}")
        setattr(self, key, pressed)

    def release_all(self) -> None:
        self.left = self.right = self.up = self.down = False
        self.pointer_x = None
