import pytest

from isotile.entities.avatar import default_appearance
from isotile.systems.renderer import (
    FigureCommand,
    QuadCommand,
    ShadowCommand,
    render_command,
    render_commands,
    sort_by_depth,
)
from isotile.utils.vec2 import Vector2


SQUARE = (Vector2(0.0, 0.0), Vector2(10.0, 0.0), Vector2(10.0, 10.0), Vector2(0.0, 10.0))


def quad(depth, color="red"):
    return QuadCommand(SQUARE, color, depth)


def test_quad_requires_four_vertices():
    with pytest.raises(ValueError):
        QuadCommand(SQUARE[:3], "red", 0)
    with pytest.raises(ValueError):
        QuadCommand(SQUARE + (Vector2(5.0, 5.0),), "red", 0)


def test_quad_vertices_are_stored_as_tuple():
    cmd = QuadCommand(list(SQUARE), "red", 0)

    assert isinstance(cmd.vertices, tuple)


def test_render_quad(surface):
    render_command(surface, quad(0, "#A8D5BA"))

    assert surface.calls == [
        ("push", ()),
        ("stroke", ("black",)),
        ("stroke_weight", (2,)),
        ("fill", ("#A8D5BA",)),
        ("quad", (0.0, 0.0, 10.0, 0.0, 10.0, 10.0, 0.0, 10.0)),
        ("pop", ()),
    ]


def test_render_shadow(surface):
    render_command(surface, ShadowCommand(Vector2(100.0, 50.0), 8.0, 3))

    assert surface.calls == [
        ("push", ()),
        ("stroke_weight", (0,)),
        ("fill", ("black",)),
        ("ellipse", (100.0, 50.0, 32.0, 16.0)),
        ("pop", ()),
    ]


def test_render_figure_dispatch(surface):
    cmd = FigureCommand(Vector2(100.0, 200.0), 0.0, 0, default_appearance(), 4)
    render_command(surface, cmd)

    names = surface.names()
    assert names[0] == "push" and names[-1] == "pop"
    assert names.count("circle") >= 2


def test_unknown_command(surface):
    with pytest.raises(TypeError):
        render_command(surface, "not a command")


def test_sort_by_depth_is_stable():
    a, b, c, d = quad(2, "a"), quad(0, "b"), quad(1, "c"), quad(0, "d")

    assert [cmd.fill_color for cmd in sort_by_depth([a, b, c, d])] == ["b", "d", "c", "a"]


def test_render_commands_ordering(surface):
    commands = [quad(1, "far?"), quad(0, "near?")]

    render_commands(surface, commands, sort=True)
    assert surface.args_of("fill") == [("near?",), ("far?",)]

    surface.calls.clear()
    render_commands(surface, commands, sort=False)
    assert surface.args_of("fill") == [("far?",), ("near?",)]


def test_figure_drawn_after_tiles_of_same_depth():
    tile = quad(4)
    shadow = ShadowCommand(Vector2(0.0, 0.0), 8.0, 4)
    next_row = quad(5)

    assert sort_by_depth([tile, next_row, shadow]) == [tile, shadow, next_row]
