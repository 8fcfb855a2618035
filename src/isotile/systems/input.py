"""Keyboard input decoding.

The host supplies an ``InputState``: whether any key is pressed, plus a
predicate telling whether a given key code is held. Key codes follow the
browser ``keyCode`` convention (uppercase ASCII for letters). The key table is
static.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from flax import struct

from ..utils.vec2 import Vector2


# Key codes
KEY_SPACE = 32
KEY_A = 65
KEY_D = 68
KEY_S = 83
KEY_W = 87

KEY_BINDINGS = {
    "jump": KEY_SPACE,
    "right": KEY_D,
    "left": KEY_A,
    "down": KEY_S,
    "up": KEY_W,
}


@dataclass(frozen=True)
class InputState:
    """Raw input snapshot for one frame.

    Attributes
    ----------
    key_is_pressed : bool
        True if any key is currently pressed
    key_is_down : Callable[[int], bool]
        Predicate: is key code K currently held
    """
    key_is_pressed: bool
    key_is_down: Callable[[int], bool]

    @staticmethod
    def from_codes(codes: Iterable[int]) -> InputState:
        """Input state with exactly the given key codes held."""
        held = frozenset(codes)
        return InputState(key_is_pressed=bool(held), key_is_down=lambda code: code in held)

    @staticmethod
    def idle() -> InputState:
        return InputState.from_codes(())


@struct.dataclass
class FrameInput:
    """Decoded per-tick intent: planar direction and jump request."""
    direction: Vector2
    jump: bool


def decode_input(state: InputState) -> FrameInput:
    """
    Map raw key state to a FrameInput.

    Nothing is decoded unless some key is pressed. On each axis the later
    binding wins when both opposite keys are held: A over D, W over S.
    """
    if not state.key_is_pressed:
        return FrameInput(direction=Vector2.zero(), jump=False)

    is_down = state.key_is_down
    ix = 0.0
    iy = 0.0
    if is_down(KEY_BINDINGS["right"]):
        ix = 1.0
    if is_down(KEY_BINDINGS["left"]):
        ix = -1.0
    if is_down(KEY_BINDINGS["down"]):
        iy = 1.0
    if is_down(KEY_BINDINGS["up"]):
        iy = -1.0

    return FrameInput(
        direction=Vector2(ix, iy),
        jump=bool(is_down(KEY_BINDINGS["jump"])),
    )
