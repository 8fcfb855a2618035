"""Game entities (avatar appearance, articulated figure)."""

from __future__ import annotations

from .avatar import AppearanceDescriptor, default_appearance, simple_appearance
from .character import ActorConfig

__all__ = [
    "ActorConfig",
    "AppearanceDescriptor",
    "default_appearance",
    "simple_appearance",
]
