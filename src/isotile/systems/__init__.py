"""Simulation systems (layout, physics, input, projection, rendering)."""

from __future__ import annotations

from .input import FrameInput, InputState, decode_input
from .layout import GridConfig, TileGrid, create_default_grid, create_flat_grid, create_grid
from .physics import PhysicsConfig, apply_physics
from .projection import ProjectionBasis, ViewConfig, make_tilemap_commands, project_point, tile_vertices
from .renderer import (
    DrawCommand,
    DrawingSurface,
    FigureCommand,
    QuadCommand,
    ShadowCommand,
    render_command,
    render_commands,
)

__all__ = [
    "FrameInput",
    "InputState",
    "decode_input",
    "GridConfig",
    "TileGrid",
    "create_default_grid",
    "create_flat_grid",
    "create_grid",
    "PhysicsConfig",
    "apply_physics",
    "ProjectionBasis",
    "ViewConfig",
    "make_tilemap_commands",
    "project_point",
    "tile_vertices",
    "DrawCommand",
    "DrawingSurface",
    "FigureCommand",
    "QuadCommand",
    "ShadowCommand",
    "render_command",
    "render_commands",
]
