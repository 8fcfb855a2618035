"""Core simulation components.

This package contains the frame-driven core:
- Actor state (Actor)
- Configuration dataclasses (SimConfig)
- Simulation service (initialize / advance_frame / build_frame)
"""

from __future__ import annotations

from .config import SimConfig
from .simulation import FrameOutput, SimulationService
from .state import Actor, create_actor

__all__ = [
    "Actor",
    "create_actor",
    "SimConfig",
    "SimulationService",
    "FrameOutput",
]
