"""Player character: start configuration and articulated figure drawing.

Functions
---------
normalize_angle
    Wrap an angle into [0, 2pi) with a small bias against boundary flicker
is_facing_viewer
    Whether an angle lies in the facing arc
compute_figure_pose
    Screen positions of body, head, eyes and beak for one frame
render_figure
    Issue surface calls for the figure
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .avatar import AppearanceDescriptor
from ..utils.vec2 import Vector2


# Facing arc: a loose ~190 degree range in which the figure faces the viewer
FACING_ARC_MIN = -math.pi / 36
FACING_ARC_MAX = 37 * math.pi / 36

BODY_LIFT = -16.0           # body center above the foot (pixels)
BOUNCE_PERIOD = 20          # ticks per gait cycle
BOUNCE_HALF = 10            # bounce when clock % period > half
EYE_SIDE_ANGLE = math.pi / 3
DEFAULT_EYE_SIZE = 3.0
DEFAULT_BOUNCE_AMOUNT = 2.0


@dataclass
class ActorConfig:
    """Configuration for the player character at (re)initialization."""

    start_position: tuple[float, float] = (1.5, 3.5)  # grid units
    start_angle: float = -math.pi / 2                  # radians
    start_height: float = 1.0                          # altitude units

    # Appearance
    appearance: str = "default"       # "default" or "simple"
    color: Optional[str] = None       # body color for the "simple" preset


@dataclass(frozen=True)
class FigurePose:
    """Where each part of the figure lands on screen this frame."""
    body_center: Vector2
    head_center: Vector2
    eyes: tuple[Vector2, ...]
    beak_center: Optional[Vector2]
    facing_viewer: bool


def normalize_angle(angle: float) -> float:
    return (angle + 0.0001 + 10000 * math.pi) % (2 * math.pi)


def is_facing_viewer(angle: float) -> bool:
    a = normalize_angle(angle)
    return FACING_ARC_MIN <= a <= FACING_ARC_MAX


def compute_figure_pose(
    foot: Vector2,
    angle: float,
    animation_clock: int,
    appearance: AppearanceDescriptor,
) -> FigurePose:
    """
    Lay out the figure parts.

    Args:
        foot: screen position of the feet
        angle: facing angle in radians (view-relative)
        animation_clock: walk animation tick counter
        appearance: avatar look

    Returns:
        FigurePose

    Rules:
        - Walk bounce is a square wave: (0, -amount) while clock % 20 > 10
        - Head x offset is scaled by cos(angle) to foreshorten when turning;
          the head counter-bounces against the body
        - Each eye looks along angle -/+ pi/3 (by side) and is only shown
          while that direction is in the facing arc
        - The beak is only shown when the figure faces the viewer
    """
    foot = Vector2(*foot.to_tuple())
    facing = is_facing_viewer(angle)
    cos_a = math.cos(angle)

    bounce_enabled = True
    bounce_amount = DEFAULT_BOUNCE_AMOUNT
    if appearance.animation is not None:
        bounce_enabled = appearance.animation.bounce
        bounce_amount = appearance.animation.bounce_amount

    shake = Vector2.zero()
    if bounce_enabled and animation_clock % BOUNCE_PERIOD > BOUNCE_HALF:
        shake = Vector2(0.0, -bounce_amount)

    body_center = foot.add(Vector2(0.0, BODY_LIFT)).add(shake)

    head_offset = appearance.head.offset
    head_center = body_center.add(Vector2(head_offset.x * cos_a, head_offset.y)).sub(shake)

    beak_center = None
    if appearance.beak is not None and facing:
        beak_offset = appearance.beak.offset
        beak_center = head_center.add(Vector2(beak_offset.x * cos_a, beak_offset.y))

    eyes = []
    if appearance.eyes is not None:
        for eye in appearance.eyes.positions:
            eye_angle = angle + (-EYE_SIDE_ANGLE if eye.x > 0 else EYE_SIDE_ANGLE)
            if is_facing_viewer(eye_angle):
                eyes.append(head_center.add(Vector2(abs(eye.x) * math.cos(eye_angle), eye.y)))

    return FigurePose(
        body_center=body_center,
        head_center=head_center,
        eyes=tuple(eyes),
        beak_center=beak_center,
        facing_viewer=facing,
    )


def render_figure(
    surface,
    foot: Vector2,
    angle: float,
    animation_clock: int,
    appearance: AppearanceDescriptor,
) -> None:
    """Draw the figure; the part closer to the viewer is drawn last."""
    pose = compute_figure_pose(foot, angle, animation_clock, appearance)

    surface.push()
    surface.stroke("black")
    surface.stroke_weight(2)

    def draw_body():
        surface.fill(appearance.body.color)
        surface.circle(pose.body_center.x, pose.body_center.y, appearance.body.size)

    def draw_head():
        surface.fill(appearance.head.color)
        surface.circle(pose.head_center.x, pose.head_center.y, appearance.head.size)

    if pose.facing_viewer:
        draw_body()
        draw_head()
    else:
        draw_head()
        draw_body()

    if appearance.eyes is not None and pose.eyes:
        eye_size = appearance.eyes.size if appearance.eyes.size is not None else DEFAULT_EYE_SIZE
        surface.fill(appearance.eyes.color)
        surface.stroke_weight(0)
        for eye in pose.eyes:
            # every eye type is drawn as a filled dot for now
            surface.circle(eye.x, eye.y, eye_size)

    if appearance.beak is not None and pose.beak_center is not None:
        surface.fill(appearance.beak.color)
        surface.stroke_weight(1)
        surface.circle(pose.beak_center.x, pose.beak_center.y, appearance.beak.size)

    surface.pop()
