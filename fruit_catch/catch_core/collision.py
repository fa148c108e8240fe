"""
Collision
=========

Catch and miss tests on axis-aligned boxes.
"""

from fruit_catch.catch_core.entities import Box


def boxes_overlap(a: Box, b: Box) -> bool:
    # Touching edges do not count as overlap
    return (a.x < b.x + b.width and
            a.x + a.width > b.x and
            a.y < b.y + b.height and
            a.y + a.height > b.y)


def is_below(box: Box, playfield_height: float) -> bool:
    # Top edge past the bottom of the playfield
    return box.y > playfield_height
