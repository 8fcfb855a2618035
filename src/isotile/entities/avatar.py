"""Avatar appearance data.

An appearance describes how the articulated figure looks: a circular body, a
circular head with an offset, and optional eyes, beak/mouth, accessories and
walk animation. It is pure data; ``entities.character`` turns it into surface
calls.

All records are frozen (and hashable) so an appearance can ride along in the
simulation state as static data of a JAX pytree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


EYE_TYPES = ("circle", "dot", "custom")


@dataclass(frozen=True)
class Offset:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class BodyPart:
    color: str
    size: float


@dataclass(frozen=True)
class HeadPart:
    color: str
    size: float
    offset: Offset = Offset()


@dataclass(frozen=True)
class Eyes:
    """Eye settings; each position is mirrored by the side it sits on."""
    type: str = "dot"
    color: str = "black"
    size: Optional[float] = None  # None -> 3px
    positions: tuple[Offset, ...] = ()


@dataclass(frozen=True)
class Beak:
    color: str
    size: float
    offset: Offset = Offset()


@dataclass(frozen=True)
class Accessory:
    """Accessory slot. `data` is opaque to the simulation and not compared."""
    type: str
    position: Offset = Offset()
    data: Any = field(default=None, compare=False, hash=False)


@dataclass(frozen=True)
class AnimationParams:
    bounce: bool = True
    bounce_amount: float = 2.0


@dataclass(frozen=True)
class AppearanceDescriptor:
    """Complete look of an avatar.

    Attributes
    ----------
    id : str
        Identifier of the appearance
    name : str
        Display name
    body : BodyPart
        Body circle (color, diameter)
    head : HeadPart
        Head circle (color, diameter, offset from body center)
    eyes : Optional[Eyes]
        Eyes, drawn only on the side facing the viewer
    beak : Optional[Beak]
        Beak/mouth, drawn only when the figure faces the viewer
    accessories : tuple[Accessory, ...]
        Accessories (carried, not drawn by the core)
    animation : Optional[AnimationParams]
        Walk bounce; None means bounce enabled with amount 2
    """
    id: str
    name: str
    body: BodyPart
    head: HeadPart
    eyes: Optional[Eyes] = None
    beak: Optional[Beak] = None
    accessories: tuple[Accessory, ...] = ()
    animation: Optional[AnimationParams] = None


def default_appearance() -> AppearanceDescriptor:
    """Peach-colored figure with dot eyes and a coral mouth."""
    return AppearanceDescriptor(
        id="default",
        name="Default character",
        body=BodyPart(color="#FFE5B4", size=32),
        head=HeadPart(color="#FFE5B4", size=24, offset=Offset(6, -16)),
        eyes=Eyes(
            type="dot",
            color="#2C3E50",
            size=3,
            positions=(Offset(8, -4), Offset(-8, -4)),
        ),
        beak=Beak(color="#FF9A8B", size=8, offset=Offset(12, 0)),
        animation=AnimationParams(bounce=True, bounce_amount=2),
    )


def simple_appearance(color: str = "lightblue") -> AppearanceDescriptor:
    """Single-color figure with white circle eyes and no beak."""
    return AppearanceDescriptor(
        id="simple",
        name="Simple character",
        body=BodyPart(color=color, size=28),
        head=HeadPart(color=color, size=20, offset=Offset(0, -14)),
        eyes=Eyes(
            type="circle",
            color="white",
            size=6,
            positions=(Offset(5, -3), Offset(-5, -3)),
        ),
        animation=AnimationParams(bounce=True, bounce_amount=1.5),
    )


APPEARANCE_PRESETS = {
    "default": default_appearance,
    "simple": simple_appearance,
}


def appearance_from_preset(preset: str, color: Optional[str] = None) -> AppearanceDescriptor:
    """
    Look up a preset by name.

    Args:
        preset: "default" or "simple"
        color: Body/head color, only used by the "simple" preset

    Raises:
        ValueError: for unknown preset names
    """
    if preset not in APPEARANCE_PRESETS:
        raise ValueError(
            f"Unknown appearance preset: {preset}. "
            f"Available presets: {list(APPEARANCE_PRESETS.keys())}"
        )
    if preset == "simple" and color is not None:
        return simple_appearance(color)
    return APPEARANCE_PRESETS[preset]()
