"""
Render and Display Interfaces
=============================

Boundary collaborators the game talks to, and the per-tick scene drawing.

The simulation never draws pixels itself. Once per tick the front end hands
a RenderSurface to CatchGame.render(), which issues one draw call per entity.
A surface that has a loaded image for an entity gets draw_image(); otherwise
the entity is drawn with primitive shapes.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Tuple, runtime_checkable

from fruit_catch.catch_core.config_loader import GameConfig
from fruit_catch.catch_core.entities import Basket, Fruit


Color = Tuple[int, int, int]
Point = Tuple[float, float]
Size = Tuple[float, float]

BASKET_IMAGE = "basket"


@runtime_checkable
class RenderSurface(Protocol):
    """Drawing target for one frame."""

    def clear(self) -> None: ...

    def draw_rect(self, pos: Point, size: Size, color: Color) -> None: ...

    def draw_circle(self, center: Point, radius: float, color: Color) -> None: ...

    def draw_image(self, name: str, pos: Point, size: Size) -> None: ...

    def has_image(self, name: str) -> bool: ...


@runtime_checkable
class DisplaySink(Protocol):
    """Score / lives readout outside the playfield."""

    def set_score(self, score: int) -> None: ...

    def set_lives(self, count: int) -> None: ...

    def show_game_over(self, final_score: int) -> None: ...


class NullDisplay:
    """DisplaySink that ignores every update."""

    def set_score(self, score: int) -> None:
        pass

    def set_lives(self, count: int) -> None:
        pass

    def show_game_over(self, final_score: int) -> None:
        pass


class RecordingDisplay:
    """DisplaySink that remembers what it was told. Handy for headless runs."""

    def __init__(self):
        self.score = 0
        self.lives = 0
        self.final_score = None
        self.game_over_calls = 0

    def set_score(self, score: int) -> None:
        self.score = score

    def set_lives(self, count: int) -> None:
        self.lives = count

    def show_game_over(self, final_score: int) -> None:
        self.final_score = final_score
        self.game_over_calls += 1


def draw_basket(surface: RenderSurface, basket: Basket, config: GameConfig) -> None:
    if surface.has_image(BASKET_IMAGE):
        surface.draw_image(BASKET_IMAGE, (basket.x, basket.y), (basket.width, basket.height))
        return

    surface.draw_rect((basket.x, basket.y), (basket.width, basket.height), config.basket.color)
    # Handle
    surface.draw_rect(
        (basket.x + 10, basket.y - 10),
        (basket.width - 20, 10),
        config.basket.handle_color
    )


def draw_fruit(surface: RenderSurface, fruit: Fruit) -> None:
    name = fruit.fruit_type.name if fruit.fruit_type is not None else ""
    if name and surface.has_image(name):
        surface.draw_image(name, (fruit.x, fruit.y), (fruit.width, fruit.height))
        return

    color = fruit.fruit_type.color if fruit.fruit_type is not None else (200, 200, 200)
    radius = fruit.width / 2
    surface.draw_circle((fruit.x + radius, fruit.y + fruit.height / 2), radius, color)


def draw_scene(
    surface: RenderSurface,
    basket: Basket,
    fruits: Iterable[Fruit],
    config: GameConfig
) -> None:
    """Clear the surface, then draw the basket and every fruit."""
    surface.clear()
    draw_basket(surface, basket, config)
    for fruit in fruits:
        draw_fruit(surface, fruit)
