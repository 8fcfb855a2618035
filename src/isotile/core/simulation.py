"""Frame-driven tile simulation.

One external driver calls, once per rendered frame:

>>> from isotile import SimulationService, InputState
>>> sim = SimulationService()
>>> sim.initialize()
>>> sim.advance_frame(InputState.from_codes({68}))   # hold D
>>> frame = sim.build_frame()
>>> len(frame.iso_commands) > 0
True

Before ``initialize()`` both per-frame calls are safe no-ops, so a host may
start its frame loop before setup completes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

import jax

from .config import SimConfig
from .state import Actor, create_actor
from ..entities.avatar import appearance_from_preset
from ..systems.input import InputState, decode_input
from ..systems.layout import TileGrid, create_default_grid, grid_from_config
from ..systems.physics import apply_physics
from ..systems.projection import (
    figure_depth,
    make_tilemap_commands,
    project_point,
    shadow_position,
)
from ..systems.renderer import DrawCommand, FigureCommand, ShadowCommand
from ..utils.vec2 import Vector2


# Screen-relative facing of the figure in the isometric view
ISO_FACING_OFFSET = math.pi / 4


@dataclass(frozen=True)
class FrameOutput:
    """Everything a host needs to draw one frame.

    Attributes
    ----------
    iso_commands : List[DrawCommand]
        Isometric view commands; sort ascending by depth before drawing
    top_commands : List[DrawCommand]
        Top view commands; draw in list order
    player_position : Vector2
        Player planar position in grid units
    grid : TileGrid
        Level heightmap
    """
    iso_commands: List[DrawCommand]
    top_commands: List[DrawCommand]
    player_position: Vector2
    grid: TileGrid


class SimulationService:
    """Owner of the actor and the level; runs the per-frame pipeline.

    Attributes
    ----------
    config : SimConfig
        Simulation configuration (immutable in use)
    actor : Optional[Actor]
        Current actor, None until initialize()
    grid : TileGrid
        Current level (the default level until initialize())

    Notes
    -----
    The actor is replaced (not mutated) each tick; the service is its only
    owner. The grid is read only after construction.
    """

    def __init__(self, config: Optional[SimConfig] = None):
        self.config = config if config is not None else SimConfig()
        self.actor: Optional[Actor] = None
        self.grid: TileGrid = create_default_grid()
        self._initialized = False

        if self.config.use_jit:
            self._physics_step = jax.jit(apply_physics, static_argnames=("cfg",))
        else:
            self._physics_step = apply_physics

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Reset the actor and the level to the configured start state."""
        actor_cfg = self.config.actor
        appearance = appearance_from_preset(actor_cfg.appearance, actor_cfg.color)

        self.actor = create_actor(
            appearance=appearance,
            position=Vector2(*map(float, actor_cfg.start_position)),
            facing_angle=actor_cfg.start_angle,
            z_height=actor_cfg.start_height,
        )
        self.grid = grid_from_config(self.config.grid)
        self._initialized = True

    def advance_frame(self, input_state: InputState) -> None:
        """Run one physics tick from the current input; no-op before initialize()."""
        if not self._initialized:
            return

        frame_input = decode_input(input_state)
        self.actor = self._physics_step(
            self.actor,
            frame_input.direction,
            frame_input.jump,
            self.grid,
            cfg=self.config.physics,
        )

    def build_frame(self) -> FrameOutput:
        """
        Project the current state into draw commands for both views.

        Returns:
            FrameOutput; before initialize() the command lists are empty and
            the player position is zero.
        """
        if not self._initialized:
            return FrameOutput(
                iso_commands=[],
                top_commands=[],
                player_position=Vector2.zero(),
                grid=self.grid,
            )

        cfg = self.config
        actor, grid = self.actor, self.grid
        appearance = actor.appearance
        position = Vector2(*actor.position.to_tuple())
        z_height = float(actor.z_height)
        facing = float(actor.facing_angle)
        clock = int(actor.animation_clock)

        iso = cfg.iso_view.basis()
        top = cfg.top_view.basis()

        # Isometric view: tiles, shadow and figure interleave by depth.
        iso_commands: List[DrawCommand] = list(make_tilemap_commands(
            grid,
            iso,
            cfg.iso_view.view_size,
            draw_height=cfg.iso_view.draw_height,
            top_color=cfg.tile_top_color,
            wall_color=cfg.tile_wall_color,
        ))

        player_iso = project_point(position, z_height, iso).add(Vector2(*map(float, cfg.iso_view.figure_offset)))
        depth = figure_depth(position)
        floor_height = float(grid.height_at(position.x, position.y))
        shadow_center = shadow_position(player_iso, z_height, floor_height, iso)

        iso_commands.append(ShadowCommand(shadow_center, cfg.shadow_radius, depth))
        iso_commands.append(FigureCommand(
            foot_position=player_iso,
            facing_angle=facing + ISO_FACING_OFFSET,
            animation_clock=clock,
            appearance=appearance,
            depth=depth,
        ))

        # Top view: flat tiles, figure on top (depth 0, no sorting needed).
        top_commands: List[DrawCommand] = list(make_tilemap_commands(
            grid,
            top,
            cfg.top_view.view_size,
            draw_height=cfg.top_view.draw_height,
            top_color=cfg.tile_top_color,
            wall_color=cfg.tile_wall_color,
        ))

        player_top = project_point(position, 0.0, top).add(Vector2(*map(float, cfg.top_view.figure_offset)))
        top_commands.append(FigureCommand(
            foot_position=player_top,
            facing_angle=facing,
            animation_clock=clock,
            appearance=appearance,
            depth=0,
        ))

        return FrameOutput(
            iso_commands=iso_commands,
            top_commands=top_commands,
            player_position=actor.position,
            grid=grid,
        )
