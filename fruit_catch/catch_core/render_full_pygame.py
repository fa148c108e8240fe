"""
Pygame Render Surface
=====================

RenderSurface and DisplaySink backed by pygame. Works on a window surface
for human play or on an off-screen pygame.Surface for headless RGB output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np
import pygame

ASSETS_DIR = Path(__file__).parent.parent.parent / "assets"


def load_images(names, assets_dir: Optional[Path] = None) -> Dict[str, pygame.Surface]:
    """
    Load <name>.png for each name that exists in the assets directory.

    Missing or unreadable files are skipped; entities without an image are
    drawn with shapes instead.
    """
    assets_dir = assets_dir or ASSETS_DIR
    images: Dict[str, pygame.Surface] = {}
    for name in names:
        path = assets_dir / f"{name}.png"
        if not path.exists():
            continue
        try:
            image = pygame.image.load(str(path))
        except pygame.error as e:
            print(f"Could not load {path}: {e}")
            continue
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        images[name] = image
    return images


class PygameRenderSurface:
    """
    Draws the playfield onto a pygame surface.

    The playfield is drawn at the surface's top-left corner, offset by
    `origin`, at 1:1 scale.
    """

    def __init__(
        self,
        surface: pygame.Surface,
        background: Tuple[int, int, int] = (245, 235, 220),
        images: Optional[Dict[str, pygame.Surface]] = None,
        origin: Tuple[int, int] = (0, 0)
    ):
        self._surface = surface
        self._bg_color = background
        self._images = dict(images or {})
        self._origin = origin
        # (name, w, h) -> scaled surface
        self._scaled_cache: Dict[Tuple[str, int, int], pygame.Surface] = {}

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def set_surface(self, surface: pygame.Surface) -> None:
        """Swap the target (e.g. after a window resize)."""
        self._surface = surface

    def to_array(self) -> np.ndarray:
        """Current pixels as an (H, W, 3) uint8 array."""
        array = pygame.surfarray.array3d(self._surface)
        return np.transpose(array, (1, 0, 2))

    # RenderSurface interface

    def clear(self) -> None:
        self._surface.fill(self._bg_color)

    def has_image(self, name: str) -> bool:
        return name in self._images

    def draw_rect(self, pos, size, color) -> None:
        ox, oy = self._origin
        rect = pygame.Rect(int(pos[0]) + ox, int(pos[1]) + oy, int(size[0]), int(size[1]))
        pygame.draw.rect(self._surface, color, rect)

    def draw_circle(self, center, radius, color) -> None:
        ox, oy = self._origin
        pygame.draw.circle(
            self._surface,
            color,
            (int(center[0]) + ox, int(center[1]) + oy),
            int(radius)
        )

    def draw_image(self, name, pos, size) -> None:
        w, h = int(size[0]), int(size[1])
        key = (name, w, h)
        scaled = self._scaled_cache.get(key)
        if scaled is None:
            scaled = pygame.transform.smoothscale(self._images[name], (w, h))
            self._scaled_cache[key] = scaled
        ox, oy = self._origin
        self._surface.blit(scaled, (int(pos[0]) + ox, int(pos[1]) + oy))


class PygameHud:
    """
    DisplaySink drawn as an overlay: score text, one heart per life and a
    game-over box with the final score.
    """

    def __init__(self, heart_image: Optional[pygame.Surface] = None):
        pygame.font.init()
        self._font_huge = pygame.font.Font(None, 56)
        self._font_large = pygame.font.Font(None, 42)
        self._font_medium = pygame.font.Font(None, 28)

        self._text_dark = (80, 60, 40)
        self._text_light = (140, 110, 80)
        self._heart_color = (220, 40, 60)
        self._box_fill = (255, 252, 245)
        self._box_border = (200, 160, 120)

        self._heart_image = heart_image
        self.score = 0
        self.lives = 0
        self.final_score: Optional[int] = None

    # DisplaySink interface

    def set_score(self, score: int) -> None:
        self.score = score

    def set_lives(self, count: int) -> None:
        self.lives = count
        if count > 0:
            self.final_score = None

    def show_game_over(self, final_score: int) -> None:
        self.final_score = final_score

    def draw(self, screen: pygame.Surface, started: bool) -> None:
        """Draw score, lives and any start / game-over overlay."""
        score_text = self._font_large.render(f"Score: {self.score}", True, self._text_dark)
        screen.blit(score_text, (16, 12))

        x = screen.get_width() - 16
        for _ in range(self.lives):
            x -= 30
            if self._heart_image is not None:
                heart = pygame.transform.smoothscale(self._heart_image, (25, 25))
                screen.blit(heart, (x, 14))
            else:
                pygame.draw.circle(screen, self._heart_color, (x + 12, 26), 11)

        if not started:
            self._draw_box(screen, "FRUIT CATCH", "Press Space to start")
        elif self.final_score is not None:
            self._draw_box(screen, "GAME OVER", "Press R to restart",
                           f"Score: {self.final_score:,}")

    def _draw_box(
        self,
        screen: pygame.Surface,
        title: str,
        hint: str,
        detail: Optional[str] = None
    ) -> None:
        width, height = screen.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        screen.blit(overlay, (0, 0))

        box_w, box_h = 320, 180
        box_x = (width - box_w) // 2
        box_y = (height - box_h) // 2
        pygame.draw.rect(screen, self._box_fill, (box_x, box_y, box_w, box_h), border_radius=16)
        pygame.draw.rect(screen, self._box_border, (box_x, box_y, box_w, box_h), 3, border_radius=16)

        title_surf = self._font_huge.render(title, True, self._text_dark)
        screen.blit(title_surf, (box_x + (box_w - title_surf.get_width()) // 2, box_y + 25))

        if detail:
            detail_surf = self._font_large.render(detail, True, self._text_dark)
            screen.blit(detail_surf, (box_x + (box_w - detail_surf.get_width()) // 2, box_y + 85))

        hint_surf = self._font_medium.render(hint, True, self._text_light)
        screen.blit(hint_surf, (box_x + (box_w - hint_surf.get_width()) // 2, box_y + 135))
