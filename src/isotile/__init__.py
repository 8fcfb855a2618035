"""isotile: a minimal isometric tile-game simulation.

A frame-driven simulation core with:
- Heightmapped tile grid with a single passability rule
- Discrete-step physics (walk, jump, gravity, contact against tile height)
- Projection of the world into an isometric and a top-down view
- Closed set of depth-tagged draw commands rendered on any DrawingSurface

Quickstart
----------
```python
from isotile import SimulationService, InputState, render_commands

sim = SimulationService()
sim.initialize()

# Once per frame
sim.advance_frame(InputState.from_codes({68}))  # hold D
frame = sim.build_frame()
render_commands(surface, frame.iso_commands, sort=True)
render_commands(surface, frame.top_commands, sort=False)
```

Pygame host
-----------
```python
import pygame
from isotile.wrappers import PygameSurface, pygame_input_state

surface = PygameSurface(pygame.display.set_mode((800, 600)))
sim.advance_frame(pygame_input_state())
```

Modules
-------
core
    Simulation service, actor state, configuration
systems
    Physics, input, layout (tile grid), projection, rendering, overlays
entities
    Avatar appearance and articulated figure drawing
utils
    Vectors, colors, YAML config loading
wrappers
    Pygame drawing surface and keyboard input
"""

from __future__ import annotations

# Core API
from .core import Actor, FrameOutput, SimConfig, SimulationService
from .systems.input import InputState
from .systems.renderer import render_commands
from .utils.config_loader import load_config_from_yaml
from .utils.vec2 import Vector2


__version__ = "0.1.0"

__all__ = [
    # Core API
    "SimulationService",
    "SimConfig",
    "Actor",
    "FrameOutput",
    "InputState",
    "Vector2",
    "render_commands",
    "load_config_from_yaml",
]
