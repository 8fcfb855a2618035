from __future__ import annotations

import math
from typing import TYPE_CHECKING

import jax.numpy as jnp
from flax import struct

from ..systems.layout import TileGrid
from ..utils.vec2 import Vector2

if TYPE_CHECKING:
    from ..core.state import Actor


@struct.dataclass
class PhysicsConfig:
    """Discrete-step physics parameters.

    All quantities are per simulation tick, in grid units.

    Attributes
    ----------
    gravity : float
        Downward acceleration per tick^2 (default: 0.0029)
    jump_impulse : float
        Vertical velocity set by a jump from rest (default: 0.1)
    step_size : float
        Planar distance walked per tick (default: 1/30)
    isometric_skew : float
        Angle subtracted from the input angle so screen-relative WASD
        follows the isometric axes (default: pi/4)
    """
    gravity: float = 0.0029             # altitude units / tick^2
    jump_impulse: float = 0.1           # altitude units / tick
    step_size: float = 1.0 / 30.0       # grid units / tick
    isometric_skew: float = math.pi / 4


def jump(actor: Actor, impulse: float = 0.1) -> Actor:
    """Start a jump. Only an actor at rest (z_velocity == 0) may jump."""
    return actor.replace(
        z_velocity=jnp.where(actor.z_velocity == 0, jnp.float32(impulse), actor.z_velocity)
    )


def apply_gravity(actor: Actor, gravity: float = 0.0029) -> Actor:
    return actor.replace(z_velocity=actor.z_velocity - jnp.float32(gravity))


def update_height(actor: Actor) -> Actor:
    return actor.replace(z_height=actor.z_height + actor.z_velocity)


def reset_velocity(actor: Actor) -> Actor:
    return actor.replace(z_velocity=jnp.zeros_like(actor.z_velocity))


def advance_animation(actor: Actor) -> Actor:
    return actor.replace(animation_clock=actor.animation_clock + 1)


def apply_physics(
    actor: Actor,
    direction: Vector2,
    jump_requested,
    grid: TileGrid,
    cfg: PhysicsConfig,
) -> Actor:
    """
    Advance the actor by one tick.

    Args:
        actor: current actor state
        direction: input direction, each axis in {-1, 0, +1}
        jump_requested: whether the jump key is held this tick
        grid: level heightmap (read only)
        cfg: physics configuration

    Returns:
        new Actor

    Physics order:
        1. Jump: impulse only from rest (z_velocity == 0), no double jump
        2. Walk: face the skew-compensated input angle and take one fixed
           step if the destination is passable at the current altitude;
           otherwise stay put (no sliding, no partial step)
        3. Vertical: move by z_velocity if the new altitude is passable at
           the (already resolved) planar position and apply gravity;
           otherwise zero the velocity without snapping to the surface

    Written with jnp.where only, so it can be wrapped in jax.jit with cfg
    passed as a static argument.
    """
    # 1. Jump.
    jump_trigger = jnp.asarray(jump_requested) & (actor.z_velocity == 0)
    vz = jnp.where(jump_trigger, jnp.float32(cfg.jump_impulse), actor.z_velocity)

    # 2. Horizontal movement.
    dx = jnp.asarray(direction.x, dtype=jnp.float32)
    dy = jnp.asarray(direction.y, dtype=jnp.float32)
    moving = (dx != 0) | (dy != 0)

    angle = jnp.arctan2(dy, dx) - jnp.float32(cfg.isometric_skew)
    step = Vector2(jnp.cos(angle), jnp.sin(angle)).mul(jnp.float32(cfg.step_size))
    candidate = actor.position.add(step)

    can_move = moving & grid.is_passable(candidate.x, candidate.y, actor.z_height)
    position = Vector2(
        jnp.where(can_move, candidate.x, actor.position.x),
        jnp.where(can_move, candidate.y, actor.position.y),
    )
    facing_angle = jnp.where(moving, angle, actor.facing_angle)
    animation_clock = jnp.where(moving, actor.animation_clock + 1, actor.animation_clock)

    # 3. Vertical integration against the resolved planar position.
    candidate_z = actor.z_height + vz
    can_rise_or_fall = grid.is_passable(position.x, position.y, candidate_z)
    z_height = jnp.where(can_rise_or_fall, candidate_z, actor.z_height)
    vz = jnp.where(can_rise_or_fall, vz - jnp.float32(cfg.gravity), jnp.float32(0.0))

    return actor.replace(
        position=position,
        facing_angle=facing_angle.astype(jnp.float32),
        z_height=z_height.astype(jnp.float32),
        z_velocity=vz.astype(jnp.float32),
        animation_clock=animation_clock.astype(jnp.int32),
    )
