"""Debug overlays drawn straight onto a surface (not depth sorted)."""

from __future__ import annotations

import math

from .layout import TileGrid, host_height_at
from .projection import ProjectionBasis, tile_vertices
from ..utils.vec2 import Vector2


def draw_tile_heights(surface, grid: TileGrid, basis: ProjectionBasis, length: int) -> None:
    """Label every tile in [0, length)^2 with its height at its z=0 origin corner."""
    heights = grid.host_heights()

    surface.push()
    surface.stroke("black")
    surface.stroke_weight(2)
    surface.fill("white")
    surface.text_align("left", "top")
    surface.text_size(24)

    for ty in range(length):
        for tx in range(length):
            origin = tile_vertices(tx, ty, 0, basis)[0]
            height = host_height_at(heights, tx, ty)
            surface.text(f"{height:g}", *origin.to_tuple())

    surface.pop()


def draw_arrow(surface, begin: Vector2, way: Vector2, brim_size: float = 20) -> None:
    """
    Arrow from `begin` along `way`.

    The two barbs are the reversed direction scaled to `brim_size`, rotated
    by +pi/6 and -pi/6. brim_size == 0 draws only the shaft.
    """
    end = begin.add(way)

    if brim_size != 0:
        b1 = way.normalized().mul(-brim_size).rotated(math.pi / 6)
        b2 = b1.rotated(-2 * math.pi / 6)
        for brim in (b1, b2):
            brim_end = end.add(brim)
            surface.line(*end.to_tuple(), *brim_end.to_tuple())

    surface.line(*begin.to_tuple(), *end.to_tuple())
