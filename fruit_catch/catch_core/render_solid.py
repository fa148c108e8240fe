"""
Solid Renderer
==============

Numpy frame buffer implementing the RenderSurface interface.
Draws solid rectangles and circles into an (H, W, 3) uint8 array, and blits
images registered as arrays. No window or pygame needed.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import numpy as np


class ArrayRenderSurface:
    """
    Headless RenderSurface.

    Coordinates are playfield pixels; anything drawn outside the buffer is
    clipped. Images are (h, w, 3) uint8 arrays keyed by name and are
    nearest-neighbour scaled to the requested size.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Tuple[int, int, int] = (245, 235, 220),
        images: Optional[Dict[str, np.ndarray]] = None
    ):
        """
        Initialize renderer.

        Args:
            width: Buffer width in pixels.
            height: Buffer height in pixels.
            background: RGB fill used by clear().
            images: Optional name -> RGB array mapping for draw_image().
        """
        self._bg_color = np.array(background, dtype=np.uint8)
        self._images: Dict[str, np.ndarray] = dict(images or {})
        self._pixels = np.empty((height, width, 3), dtype=np.uint8)
        self.draw_calls = 0
        self.clear()

    @property
    def pixels(self) -> np.ndarray:
        """The frame buffer (H, W, 3). Live view, copy before keeping."""
        return self._pixels

    @property
    def size(self) -> Tuple[int, int]:
        h, w = self._pixels.shape[:2]
        return (w, h)

    def resize(self, width: int, height: int) -> None:
        self._pixels = np.empty((height, width, 3), dtype=np.uint8)
        self.clear()

    def add_image(self, name: str, image: np.ndarray) -> None:
        if image.ndim != 3 or image.shape[2] != 3:
            raise ValueError(f"Image '{name}' must be (h, w, 3), got {image.shape}")
        self._images[name] = image.astype(np.uint8, copy=False)

    # RenderSurface interface

    def clear(self) -> None:
        self._pixels[:] = self._bg_color
        self.draw_calls = 0

    def has_image(self, name: str) -> bool:
        return name in self._images

    def draw_rect(self, pos, size, color) -> None:
        self.draw_calls += 1
        x0, y0, x1, y1 = self._clip(pos[0], pos[1], pos[0] + size[0], pos[1] + size[1])
        if x0 < x1 and y0 < y1:
            self._pixels[y0:y1, x0:x1] = color

    def draw_circle(self, center, radius, color) -> None:
        self.draw_calls += 1
        cx, cy = center
        x0, y0, x1, y1 = self._clip(cx - radius, cy - radius, cx + radius, cy + radius)
        if x0 >= x1 or y0 >= y1:
            return

        # Pixel centres inside the circle
        yy, xx = np.ogrid[y0:y1, x0:x1]
        mask = (xx + 0.5 - cx) ** 2 + (yy + 0.5 - cy) ** 2 <= radius * radius
        self._pixels[y0:y1, x0:x1][mask] = color

    def draw_image(self, name, pos, size) -> None:
        self.draw_calls += 1
        image = self._images[name]
        w = max(1, int(round(size[0])))
        h = max(1, int(round(size[1])))

        # Nearest-neighbour scale
        src_h, src_w = image.shape[:2]
        rows = (np.arange(h) * src_h // h).clip(0, src_h - 1)
        cols = (np.arange(w) * src_w // w).clip(0, src_w - 1)
        scaled = image[rows][:, cols]

        left = int(np.floor(pos[0]))
        top = int(np.floor(pos[1]))
        x0, y0, x1, y1 = self._clip(left, top, left + w, top + h)
        if x0 >= x1 or y0 >= y1:
            return
        self._pixels[y0:y1, x0:x1] = scaled[y0 - top:y1 - top, x0 - left:x1 - left]

    def _clip(self, x0: float, y0: float, x1: float, y1: float) -> Tuple[int, int, int, int]:
        h, w = self._pixels.shape[:2]
        return (
            max(0, int(np.floor(x0))),
            max(0, int(np.floor(y0))),
            min(w, int(np.ceil(x1))),
            min(h, int(np.ceil(y1)))
        )
