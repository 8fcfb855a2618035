"""World-to-screen projection and tile-map command assembly.

A view is defined by a projection basis: a screen-space root and two
screen-space axis vectors for the grid x and y directions. The vertical axis
is derived as ``z_axis = -x_axis - y_axis`` so the three axes sum to zero and
extruding along -z reads as "up" on screen.

Coordinate conventions
----------------------
- Grid space: x right, y down, z up; one unit per tile
- Screen space: pixels, x right, y down
- Tile (x, y) at height z has its top face sheared by (-z, -z) in grid space,
  which is what lifts raised tiles on screen
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import jax.numpy as jnp
from flax import struct

from .layout import TileGrid, host_height_at
from .renderer import QuadCommand
from ..utils.colors import TILE_TOP_COLOR, TILE_WALL_COLOR
from ..utils.vec2 import Vector2


@dataclass
class ViewConfig:
    """Configuration of one projected view.

    Attributes
    ----------
    root : tuple[float, float]
        Screen position of grid origin (pixels)
    x_axis : tuple[float, float]
        Screen vector of one grid step along x (pixels)
    y_axis : tuple[float, float]
        Screen vector of one grid step along y (pixels)
    view_size : int
        Number of cells drawn per side, starting at the origin (default: 4)
    draw_height : bool
        Raise tiles by their height and draw walls; False flattens the view
    figure_offset : tuple[float, float]
        Extra screen offset applied to the figure's foot position
    """
    root: tuple[float, float] = (200.0, 275.0)
    x_axis: tuple[float, float] = (48.0, 24.0)
    y_axis: tuple[float, float] = (-48.0, 24.0)
    view_size: int = 4
    draw_height: bool = True
    figure_offset: tuple[float, float] = (0.0, 0.0)

    def basis(self) -> ProjectionBasis:
        return ProjectionBasis(
            root=Vector2(*map(float, self.root)),
            x_axis=Vector2(*map(float, self.x_axis)),
            y_axis=Vector2(*map(float, self.y_axis)),
        )


def isometric_view() -> ViewConfig:
    return ViewConfig()


def top_view() -> ViewConfig:
    return ViewConfig(
        root=(400.0, 50.0),
        x_axis=(48.0, 0.0),
        y_axis=(0.0, 48.0),
        view_size=4,
        draw_height=False,
        figure_offset=(0.0, 12.0),
    )


@struct.dataclass
class ProjectionBasis:
    root: Vector2
    x_axis: Vector2
    y_axis: Vector2

    @property
    def z_axis(self) -> Vector2:
        return Vector2.zero().sub(self.x_axis).sub(self.y_axis)


def tile_vertices(x, y, z, basis: ProjectionBasis) -> tuple[Vector2, Vector2, Vector2, Vector2]:
    """
    Screen-space corners of the top face of tile (x, y) at height z.

    Returns:
        4 vertices, clockwise from the root-shifted corner:
        (P, P + x_axis, P + x_axis + y_axis, P + y_axis) with
        P = root + x_axis * (x - z) + y_axis * (y - z)
    """
    p = basis.root.add(basis.x_axis.mul(x - z)).add(basis.y_axis.mul(y - z))
    return (
        p,
        p.add(basis.x_axis),
        p.add(basis.x_axis).add(basis.y_axis),
        p.add(basis.y_axis),
    )


def project_point(position: Vector2, z, basis: ProjectionBasis) -> Vector2:
    """Screen position of world point (position.x, position.y, z)."""
    return (
        basis.root
        .add(basis.x_axis.mul(position.x))
        .add(basis.y_axis.mul(position.y))
        .add(basis.z_axis.mul(z))
    )


def figure_depth(position: Vector2) -> int:
    """Depth key of a figure, matching the tile convention x + y."""
    return int(jnp.floor(position.x)) + int(jnp.floor(position.y))


def shadow_position(projected: Vector2, z, floor_height, basis: ProjectionBasis) -> Vector2:
    """Drop a projected point straight down onto the floor below it."""
    return projected.sub(basis.z_axis.mul(z - floor_height))


def make_tilemap_commands(
    grid: TileGrid,
    basis: ProjectionBasis,
    view_size: int,
    draw_height: bool = True,
    top_color: str = TILE_TOP_COLOR,
    wall_color: str = TILE_WALL_COLOR,
) -> List[QuadCommand]:
    """
    Draw commands for the tiles in [0, view_size) x [0, view_size).

    Args:
        grid: level heightmap
        basis: projection of the view
        view_size: number of cells per side
        draw_height: use tile heights; False draws every tile flat at z=0
        top_color: fill of top faces
        wall_color: fill of side walls

    Returns:
        Quads in row order. Each cell yields a top face and, when its height
        is positive, the two walls hanging from its trailing edges. All
        quads of a cell share depth x + y.
    """
    z_axis = basis.z_axis
    heights = grid.host_heights()
    commands: List[QuadCommand] = []

    for ty in range(view_size):
        for tx in range(view_size):
            height = host_height_at(heights, tx, ty) if draw_height else 0.0

            top = tile_vertices(tx, ty, height, basis)
            depth = tx + ty

            commands.append(QuadCommand(top, top_color, depth))

            if height > 0:
                wall = z_axis.mul(height)
                bottom = tuple(v.sub(wall) for v in top)

                # x-side wall
                commands.append(QuadCommand((top[1], bottom[1], bottom[2], top[2]), wall_color, depth))
                # y-side wall
                commands.append(QuadCommand((top[2], bottom[2], bottom[3], top[3]), wall_color, depth))

    return commands
