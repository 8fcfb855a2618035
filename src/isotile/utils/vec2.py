"""Immutable 2-D vector used for grid positions and screen coordinates.

Vector2 is a Flax struct dataclass, so it is frozen, hashable when its
components are, and a JAX pytree: it can be passed through ``jax.jit`` as part
of the simulation state. Components may be Python floats or ``jnp`` scalars.
"""

from __future__ import annotations

import jax.numpy as jnp
from flax import struct


@struct.dataclass
class Vector2:
    """2-D vector with value semantics.

    Every operation returns a new instance; nothing mutates in place.

    Attributes
    ----------
    x : float
        X component
    y : float
        Y component
    """
    x: float
    y: float

    # Arithmetic

    def add(self, b: Vector2) -> Vector2:
        return Vector2(self.x + b.x, self.y + b.y)

    def sub(self, b: Vector2) -> Vector2:
        return Vector2(self.x - b.x, self.y - b.y)

    def mul(self, s) -> Vector2:
        return Vector2(s * self.x, s * self.y)

    def div(self, s) -> Vector2:
        return Vector2(self.x / s, self.y / s)

    def dot(self, b: Vector2):
        return self.x * b.x + self.y * b.y

    def __add__(self, b: Vector2) -> Vector2:
        return self.add(b)

    def __sub__(self, b: Vector2) -> Vector2:
        return self.sub(b)

    def __mul__(self, s) -> Vector2:
        return self.mul(s)

    __rmul__ = __mul__

    def __truediv__(self, s) -> Vector2:
        return self.div(s)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    # Magnitude

    def mag(self):
        """Euclidean length."""
        return jnp.sqrt(self.x ** 2 + self.y ** 2)

    def mag_set(self, s) -> Vector2:
        """Vector with the same direction and length ``s`` (zero stays zero)."""
        current = self.mag()
        safe = jnp.where(current == 0, 1.0, current)
        factor = jnp.where(current == 0, 0.0, s / safe)
        return self.mul(factor)

    def mag_added(self, s) -> Vector2:
        """Vector with ``s`` added to its length (zero stays zero)."""
        current = self.mag()
        safe = jnp.where(current == 0, 1.0, current)
        factor = jnp.where(current == 0, 0.0, 1.0 + s / safe)
        return self.mul(factor)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction (zero stays zero)."""
        return self.mag_set(1.0)

    def rotated(self, rad) -> Vector2:
        """Rotate counter-clockwise (in math coordinates) by ``rad`` radians."""
        cos = jnp.cos(rad)
        sin = jnp.sin(rad)
        return Vector2(
            self.x * cos - self.y * sin,
            self.x * sin + self.y * cos,
        )

    # Misc

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def equals(self, b: Vector2) -> bool:
        """Exact component-wise equality."""
        return bool(self.x == b.x) and bool(self.y == b.y)

    def to_tuple(self) -> tuple[float, float]:
        """Components as Python floats (host-side use only, not traceable)."""
        return float(self.x), float(self.y)

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0.0, 0.0)

    @staticmethod
    def right() -> Vector2:
        return Vector2(1.0, 0.0)

    @staticmethod
    def down() -> Vector2:
        return Vector2(0.0, 1.0)
