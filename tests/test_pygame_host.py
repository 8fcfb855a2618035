import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from isotile import render_commands
from isotile.systems.input import decode_input
from isotile.utils.colors import to_rgb
from isotile.wrappers import PygameSurface, input_state_from_keys


WHITE = (255, 255, 255)


@pytest.fixture
def canvas():
    pygame.init()
    target = pygame.Surface((200, 200))
    target.fill(WHITE)
    yield target
    pygame.quit()


def rgb_at(target, x, y):
    return tuple(target.get_at((x, y)))[:3]


def test_quad_fills_and_outlines(canvas):
    surface = PygameSurface(canvas)
    surface.fill("red")
    surface.stroke("black")
    surface.stroke_weight(2)
    surface.quad(20, 20, 120, 20, 120, 120, 20, 120)

    assert rgb_at(canvas, 70, 70) == to_rgb("red")
    assert rgb_at(canvas, 20, 70) == (0, 0, 0)
    assert rgb_at(canvas, 150, 150) == WHITE


def test_shapes_without_outline(canvas):
    surface = PygameSurface(canvas)
    surface.fill("#A8D5BA")
    surface.stroke_weight(0)
    surface.circle(50, 50, 40)
    surface.ellipse(150, 150, 40, 20)

    assert rgb_at(canvas, 50, 50) == (0xA8, 0xD5, 0xBA)
    assert rgb_at(canvas, 50, 31) == (0xA8, 0xD5, 0xBA)
    assert rgb_at(canvas, 150, 150) == (0xA8, 0xD5, 0xBA)
    assert rgb_at(canvas, 150, 135) == WHITE


def test_push_pop_restores_style(canvas):
    surface = PygameSurface(canvas)
    surface.fill("red")
    surface.push()
    surface.fill("blue")
    surface.stroke_weight(0)
    surface.pop()
    surface.stroke_weight(0)
    surface.circle(100, 100, 20)

    assert rgb_at(canvas, 100, 100) == to_rgb("red")


def test_pop_without_push(canvas):
    with pytest.raises(RuntimeError):
        PygameSurface(canvas).pop()


def test_line_and_text(canvas):
    surface = PygameSurface(canvas)
    surface.stroke("black")
    surface.stroke_weight(1)
    surface.line(0, 190, 199, 190)
    surface.fill("black")
    surface.text_align("left", "top")
    surface.text_size(24)
    surface.text("8", 10, 10)

    assert rgb_at(canvas, 100, 190) == (0, 0, 0)
    drawn = [rgb_at(canvas, x, y) for x in range(10, 40) for y in range(10, 40)]
    assert any(pixel != WHITE for pixel in drawn)


def test_frame_renders_onto_pygame(canvas, sim):
    big = pygame.Surface((800, 600))
    big.fill(WHITE)
    surface = PygameSurface(big)
    frame = sim.build_frame()

    render_commands(surface, frame.iso_commands, sort=True)
    render_commands(surface, frame.top_commands, sort=False)

    # center of the top face of tile (0, 0) in the top view
    assert rgb_at(big, 424, 74) == to_rgb("#A8D5BA")


def test_input_state_from_keys():
    pressed = [False] * 512
    assert input_state_from_keys(pressed).key_is_pressed is False

    pressed[pygame.K_d] = True
    pressed[pygame.K_SPACE] = True
    frame = decode_input(input_state_from_keys(pressed))

    assert frame.direction.to_tuple() == (1.0, 0.0)
    assert frame.jump is True
