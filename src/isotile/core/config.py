"""Simulation configuration composition.

SimConfig composes all subsystem configurations into a single dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..entities.character import ActorConfig
from ..systems.layout import GridConfig
from ..systems.physics import PhysicsConfig
from ..systems.projection import ViewConfig, isometric_view, top_view
from ..utils.colors import TILE_TOP_COLOR, TILE_WALL_COLOR


@dataclass
class SimConfig:
    """Complete simulation configuration.

    Composes all subsystem configurations for easy parameter passing.

    Attributes
    ----------
    shadow_radius : float
        Radius of the figure's ground shadow in pixels (default: 8)
    tile_top_color : str
        Fill of tile top faces (default: "#A8D5BA")
    tile_wall_color : str
        Fill of tile side walls (default: "#8BB9A0")
    use_jit : bool
        Compile the physics step with jax.jit (default: False)
    physics : PhysicsConfig
        Gravity, jump impulse, step size
    grid : GridConfig
        Level heightmap
    actor : ActorConfig
        Player start state and appearance
    iso_view : ViewConfig
        Isometric view projection
    top_view : ViewConfig
        Top-down view projection

    Examples
    --------
    Create default config:

    >>> cfg = SimConfig()

    Create config with a custom level:

    >>> from isotile.systems.layout import GridConfig
    >>> grid_cfg = GridConfig(preset="flat", width=12, height=12, flat_height=2.0)
    >>> cfg = SimConfig(grid=grid_cfg)
    """

    # Rendering
    shadow_radius: float = 8.0
    tile_top_color: str = TILE_TOP_COLOR
    tile_wall_color: str = TILE_WALL_COLOR

    # Execution
    use_jit: bool = False

    # Subsystem configs
    physics: PhysicsConfig = None
    grid: GridConfig = None
    actor: ActorConfig = None
    iso_view: ViewConfig = None
    top_view: ViewConfig = None

    def __post_init__(self):
        """Initialize default sub-configs if not provided."""
        if self.physics is None:
            self.physics = PhysicsConfig()

        if self.grid is None:
            self.grid = GridConfig()

        if self.actor is None:
            self.actor = ActorConfig()

        if self.iso_view is None:
            self.iso_view = isometric_view()

        if self.top_view is None:
            self.top_view = top_view()
