"""Host adapters for the simulation."""

from __future__ import annotations

from .pygame_host import PygameSurface, input_state_from_keys, pygame_input_state

__all__ = [
    "PygameSurface",
    "input_state_from_keys",
    "pygame_input_state",
]
