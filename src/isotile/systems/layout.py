"""Tile grid (heightmap) world model.

The grid stores one height per cell in row-major order. A height of 0 is a
hole; any other height is a floor or platform standing that tall. Lookups are
``jnp`` expressions so they can run inside the JIT-compiled physics step, and
they never fail: coordinates outside the grid read as holes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import jax.numpy as jnp
import numpy as np
from flax import struct


OUT_OF_BOUNDS = -1


@dataclass
class GridConfig:
    """Configuration for the level heightmap.

    Attributes
    ----------
    preset : str
        "default" (8x8, all 1.0), "flat" (width x height of flat_height)
        or "custom" (explicit heights)
    width : int
        Grid width in cells for "flat"/"custom" (default: 8)
    height : int
        Grid height in cells for "flat"/"custom" (default: 8)
    flat_height : float
        Cell height for "flat" (default: 1.0)
    heights : Optional[list]
        Explicit heights for "custom": flat row-major list or list of rows
    """
    preset: str = "default"
    width: int = 8
    height: int = 8
    flat_height: float = 1.0
    heights: Optional[list] = None


@struct.dataclass
class TileGrid:
    heights: jnp.ndarray                              # (width*height,) float32, row-major
    width: int = struct.field(pytree_node=False)
    height: int = struct.field(pytree_node=False)

    def index_of(self, x, y) -> jnp.ndarray:
        """Row-major index of the cell containing (x, y), or OUT_OF_BOUNDS."""
        xi = jnp.floor(x).astype(jnp.int32)
        yi = jnp.floor(y).astype(jnp.int32)
        inside = (xi >= 0) & (xi < self.width) & (yi >= 0) & (yi < self.height)
        return jnp.where(inside, yi * self.width + xi, jnp.int32(OUT_OF_BOUNDS))

    def height_at(self, x, y) -> jnp.ndarray:
        """Height of the cell containing (x, y); 0 outside the grid."""
        idx = self.index_of(x, y)
        safe_idx = jnp.clip(idx, 0, self.heights.shape[0] - 1)
        return jnp.where(idx == OUT_OF_BOUNDS, jnp.float32(0.0), self.heights[safe_idx])

    def is_passable(self, x, y, z) -> jnp.ndarray:
        """
        Whether a body may occupy (x, y) at altitude z.

        A hole is never passable. A cell of height h is passable at z >= h,
        i.e. standing on top of it, never inside it.
        """
        tile_height = self.height_at(x, y)
        return (tile_height != 0) & (z >= tile_height)

    def host_heights(self) -> np.ndarray:
        """Heights copied to the host as a (height, width) numpy array."""
        return np.asarray(self.heights).reshape(self.height, self.width)


def create_grid(heights: Sequence, width: int, height: int) -> TileGrid:
    """
    Build a grid from explicit heights.

    Args:
        heights: Flat row-major sequence of width*height values, or `height`
            rows of `width` values each (nested lists or a 2-D array)
        width: Number of columns
        height: Number of rows

    Returns:
        TileGrid

    Raises:
        ValueError: if the dimensions are not positive or do not match heights
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

    try:
        values = np.asarray(heights, dtype=np.float32)
    except ValueError:
        raise ValueError(f"Every row of the heightmap must have {width} cells") from None

    if values.ndim == 2 and values.shape != (height, width):
        raise ValueError(
            f"Heightmap rows have shape {values.shape}, expected ({height}, {width})"
        )
    if values.ndim > 2:
        raise ValueError(f"Heightmap must be 1-D or 2-D, got {values.ndim} dimensions")

    values = values.reshape(-1)
    if values.size != width * height:
        raise ValueError(
            f"Heightmap has {values.size} cells, expected {width}x{height}={width * height}"
        )

    return TileGrid(
        heights=jnp.asarray(values, dtype=jnp.float32),
        width=int(width),
        height=int(height),
    )


def create_flat_grid(width: int = 5, height: int = 5, flat_height: float = 1.0) -> TileGrid:
    """Uniform grid; mostly useful in tests."""
    return create_grid([flat_height] * (width * height), width, height)


def create_default_grid() -> TileGrid:
    """The production level: 8x8, every cell at height 1.0."""
    return create_flat_grid(8, 8, 1.0)


def grid_from_config(cfg: GridConfig) -> TileGrid:
    if cfg.preset == "default":
        return create_default_grid()
    if cfg.preset == "flat":
        return create_flat_grid(cfg.width, cfg.height, cfg.flat_height)
    if cfg.preset == "custom":
        if cfg.heights is None:
            raise ValueError("GridConfig preset 'custom' requires heights")
        return create_grid(cfg.heights, cfg.width, cfg.height)
    raise ValueError(f"Unknown grid preset: {cfg.preset}")


def host_height_at(heights: np.ndarray, x, y) -> float:
    """
    Host-side twin of ``TileGrid.height_at`` for per-cell loops outside jit.

    Args:
        heights: array from ``TileGrid.host_heights()``
        x, y: grid coordinates (floored to a cell)

    Returns:
        Cell height, 0.0 outside the grid
    """
    xi = math.floor(x)
    yi = math.floor(y)
    rows, cols = heights.shape
    if 0 <= xi < cols and 0 <= yi < rows:
        return float(heights[yi, xi])
    return 0.0
