"""Pygame host adapter.

PygameSurface implements the DrawingSurface protocol on top of a
``pygame.Surface`` so the renderer can draw into a window (or an off-screen
surface for headless rendering). ``pygame_input_state`` builds an InputState
from the live keyboard.

Style state (fill, stroke, stroke weight, text alignment and size) lives on a
stack: ``push`` saves it, ``pop`` restores it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Optional

import pygame

from ..systems.input import KEY_A, KEY_D, KEY_S, KEY_SPACE, KEY_W, InputState
from ..utils.colors import RGB, Color, to_rgb


# Browser-style key codes -> pygame key constants
PYGAME_KEYS: Dict[int, int] = {
    KEY_SPACE: pygame.K_SPACE,
    KEY_A: pygame.K_a,
    KEY_D: pygame.K_d,
    KEY_S: pygame.K_s,
    KEY_W: pygame.K_w,
}


@dataclass
class _Style:
    fill: Optional[RGB] = (255, 255, 255)
    stroke: Optional[RGB] = (0, 0, 0)
    stroke_weight: float = 1.0
    align_h: str = "left"
    align_v: str = "top"
    text_size: float = 12.0


class PygameSurface:
    """DrawingSurface over a pygame.Surface.

    Args:
        target: surface to draw into (e.g. the display surface)
        font_name: system font used for text (None -> pygame default font)
    """

    def __init__(self, target: pygame.Surface, font_name: Optional[str] = None):
        self.target = target
        self.font_name = font_name
        self._style = _Style()
        self._stack: List[_Style] = []
        self._fonts: Dict[int, pygame.font.Font] = {}

    # Style

    def fill(self, color: Color) -> None:
        self._style.fill = to_rgb(color)

    def stroke(self, color: Color) -> None:
        self._style.stroke = to_rgb(color)

    def stroke_weight(self, weight: float) -> None:
        self._style.stroke_weight = float(weight)

    def push(self) -> None:
        self._stack.append(replace(self._style))

    def pop(self) -> None:
        if not self._stack:
            raise RuntimeError("pop() without matching push()")
        self._style = self._stack.pop()

    def text_align(self, horizontal: str, vertical: str) -> None:
        self._style.align_h = horizontal
        self._style.align_v = vertical

    def text_size(self, size: float) -> None:
        self._style.text_size = float(size)

    # Shapes

    @property
    def _outline(self) -> int:
        # Weight 0 means no outline
        return int(round(self._style.stroke_weight))

    def circle(self, x: float, y: float, diameter: float) -> None:
        center = (round(x), round(y))
        radius = max(1, int(round(diameter / 2)))
        if self._style.fill is not None:
            pygame.draw.circle(self.target, self._style.fill, center, radius)
        if self._style.stroke is not None and self._outline > 0:
            pygame.draw.circle(self.target, self._style.stroke, center, radius, self._outline)

    def ellipse(self, x: float, y: float, width: float, height: float) -> None:
        """Ellipse centered on (x, y)."""
        rect = pygame.Rect(0, 0, max(1, round(width)), max(1, round(height)))
        rect.center = (round(x), round(y))
        if self._style.fill is not None:
            pygame.draw.ellipse(self.target, self._style.fill, rect)
        if self._style.stroke is not None and self._outline > 0:
            pygame.draw.ellipse(self.target, self._style.stroke, rect, self._outline)

    def quad(self, x1, y1, x2, y2, x3, y3, x4, y4) -> None:
        points = [(x1, y1), (x2, y2), (x3, y3), (x4, y4)]
        if self._style.fill is not None:
            pygame.draw.polygon(self.target, self._style.fill, points)
        if self._style.stroke is not None and self._outline > 0:
            pygame.draw.polygon(self.target, self._style.stroke, points, self._outline)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if self._style.stroke is None:
            return
        pygame.draw.line(self.target, self._style.stroke, (x1, y1), (x2, y2), max(1, self._outline))

    def text(self, text: str, x: float, y: float) -> None:
        color = self._style.fill if self._style.fill is not None else (0, 0, 0)
        image = self._font().render(text, True, color)
        rect = image.get_rect()

        anchor_x = {"left": "left", "center": "centerx", "right": "right"}.get(self._style.align_h, "left")
        anchor_y = {"top": "top", "center": "centery", "bottom": "bottom"}.get(self._style.align_v, "top")
        setattr(rect, anchor_x, round(x))
        setattr(rect, anchor_y, round(y))
        self.target.blit(image, rect)

    def _font(self) -> pygame.font.Font:
        size = int(round(self._style.text_size))
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.SysFont(self.font_name, size)
        return self._fonts[size]


def input_state_from_keys(pressed) -> InputState:
    """InputState from a ``pygame.key.get_pressed()`` style sequence."""
    held = frozenset(code for code, key in PYGAME_KEYS.items() if pressed[key])
    return InputState(key_is_pressed=any(pressed), key_is_down=lambda code: code in held)


def pygame_input_state() -> InputState:
    """Snapshot of the live keyboard."""
    return input_state_from_keys(pygame.key.get_pressed())
