"""State representations for the tile simulation.

Actor state is a Flax struct dataclass:
- Immutable (every update returns a new Actor)
- JAX pytree, so the physics step can be JIT compiled
- Appearance is static pytree metadata, not traced
"""

from __future__ import annotations

import math
from typing import Optional

import jax.numpy as jnp
from flax import struct

from ..entities.avatar import AppearanceDescriptor, default_appearance
from ..utils.vec2 import Vector2


@struct.dataclass
class Actor:
    """Player state (immutable JAX pytree).

    The simulation owns exactly one Actor and replaces it every tick.

    Attributes
    ----------
    position : Vector2
        Planar position in grid units, components float32 scalars
    facing_angle : jnp.ndarray
        Facing direction in radians, shape (), dtype float32
    z_height : jnp.ndarray
        Altitude above the grid base, shape (), dtype float32
    z_velocity : jnp.ndarray
        Vertical velocity per tick, shape (), dtype float32
    animation_clock : jnp.ndarray
        Walk animation tick counter, shape (), dtype int32
    appearance : AppearanceDescriptor
        Avatar look (static metadata)
    """
    position: Vector2
    facing_angle: jnp.ndarray
    z_height: jnp.ndarray
    z_velocity: jnp.ndarray
    animation_clock: jnp.ndarray
    appearance: AppearanceDescriptor = struct.field(pytree_node=False)


def create_actor(
    appearance: Optional[AppearanceDescriptor] = None,
    position: Vector2 = Vector2(1.5, 3.5),
    facing_angle: float = -math.pi / 2,
    z_height: float = 1.0,
    z_velocity: float = 0.0,
    animation_clock: int = 0,
) -> Actor:
    """Create an actor; defaults are the production start state."""
    return Actor(
        position=Vector2(jnp.float32(position.x), jnp.float32(position.y)),
        facing_angle=jnp.float32(facing_angle),
        z_height=jnp.float32(z_height),
        z_velocity=jnp.float32(z_velocity),
        animation_clock=jnp.int32(animation_clock),
        appearance=appearance if appearance is not None else default_appearance(),
    )
