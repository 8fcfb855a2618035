"""Utility functions and helpers."""

from __future__ import annotations

from .colors import COLOR_PALETTE, to_rgb
from .vec2 import Vector2

__all__ = [
    "COLOR_PALETTE",
    "to_rgb",
    "Vector2",
]
