"""Draw commands and their rendering against a drawing surface.

The projection step emits a closed set of draw commands, each tagged with a
depth key for painter's-algorithm ordering:

- QuadCommand: filled, outlined quadrilateral (tile tops and walls)
- ShadowCommand: flat black ellipse under the figure
- FigureCommand: the articulated avatar

Commands are frozen and rebuilt every frame. ``render_command`` is the single
dispatch point; a new variant needs a new branch there.

The surface is anything implementing ``DrawingSurface`` (an immediate-mode
canvas with a push/pop style scope). ``wrappers.pygame_host.PygameSurface`` is
the bundled implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Protocol, Sequence, Union

from ..entities.avatar import AppearanceDescriptor
from ..entities.character import render_figure
from ..utils.colors import Color
from ..utils.vec2 import Vector2


class DrawingSurface(Protocol):
    """Immediate-mode drawing surface consumed by the renderer."""

    def fill(self, color: Color) -> None: ...

    def stroke(self, color: Color) -> None: ...

    def stroke_weight(self, weight: float) -> None: ...

    def push(self) -> None: ...

    def pop(self) -> None: ...

    def circle(self, x: float, y: float, diameter: float) -> None: ...

    def ellipse(self, x: float, y: float, width: float, height: float) -> None: ...

    def quad(
        self,
        x1: float, y1: float,
        x2: float, y2: float,
        x3: float, y3: float,
        x4: float, y4: float,
    ) -> None: ...

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def text(self, text: str, x: float, y: float) -> None: ...

    def text_align(self, horizontal: str, vertical: str) -> None: ...

    def text_size(self, size: float) -> None: ...


@dataclass(frozen=True)
class QuadCommand:
    """Quadrilateral with vertices listed clockwise."""
    vertices: tuple[Vector2, ...]
    fill_color: Color
    depth: float

    def __post_init__(self):
        object.__setattr__(self, "vertices", tuple(self.vertices))
        if len(self.vertices) != 4:
            raise ValueError(f"QuadCommand requires exactly 4 vertices, got {len(self.vertices)}")


@dataclass(frozen=True)
class ShadowCommand:
    """Ground shadow; drawn as an ellipse 4r wide and 2r tall."""
    center: Vector2
    radius: float
    depth: float


@dataclass(frozen=True)
class FigureCommand:
    foot_position: Vector2
    facing_angle: float
    animation_clock: int
    appearance: AppearanceDescriptor
    depth: float


DrawCommand = Union[QuadCommand, ShadowCommand, FigureCommand]


def _render_quad(surface: DrawingSurface, cmd: QuadCommand) -> None:
    coords: List[float] = []
    for v in cmd.vertices:
        coords.extend(v.to_tuple())

    surface.push()
    surface.stroke("black")
    surface.stroke_weight(2)
    surface.fill(cmd.fill_color)
    surface.quad(*coords)
    surface.pop()


def _render_shadow(surface: DrawingSurface, cmd: ShadowCommand) -> None:
    x, y = cmd.center.to_tuple()
    r = float(cmd.radius)

    surface.push()
    surface.stroke_weight(0)
    surface.fill("black")
    surface.ellipse(x, y, r * 4, r * 2)
    surface.pop()


def render_command(surface: DrawingSurface, cmd: DrawCommand) -> None:
    """Issue the surface calls for one command."""
    if isinstance(cmd, QuadCommand):
        _render_quad(surface, cmd)
    elif isinstance(cmd, ShadowCommand):
        _render_shadow(surface, cmd)
    elif isinstance(cmd, FigureCommand):
        render_figure(
            surface,
            cmd.foot_position,
            float(cmd.facing_angle),
            int(cmd.animation_clock),
            cmd.appearance,
        )
    else:
        raise TypeError(f"Unknown draw command: {type(cmd).__name__}")


def sort_by_depth(commands: Iterable[DrawCommand]) -> List[DrawCommand]:
    """Far-to-near order (ascending depth); ties keep emission order."""
    return sorted(commands, key=lambda c: c.depth)


def render_commands(
    surface: DrawingSurface,
    commands: Sequence[DrawCommand],
    sort: bool = True,
) -> None:
    """
    Render a command list.

    Args:
        surface: target surface
        commands: commands of one view
        sort: apply painter's ordering first (needed for the isometric view)
    """
    ordered = sort_by_depth(commands) if sort else commands
    for cmd in ordered:
        render_command(surface, cmd)
