import pytest

from isotile.core.config import SimConfig
from isotile.systems.layout import create_default_grid, create_flat_grid, create_grid
from isotile.systems.projection import (
    ProjectionBasis,
    figure_depth,
    isometric_view,
    make_tilemap_commands,
    project_point,
    shadow_position,
    tile_vertices,
    top_view,
)
from isotile.systems.renderer import QuadCommand
from isotile.utils.colors import TILE_TOP_COLOR, TILE_WALL_COLOR
from isotile.utils.vec2 import Vector2


ISO = isometric_view().basis()
TOP = top_view().basis()


def points(vertices):
    return [v.to_tuple() for v in vertices]


def test_views():
    iso = isometric_view()
    top = top_view()

    assert (iso.root, iso.x_axis, iso.y_axis) == ((200.0, 275.0), (48.0, 24.0), (-48.0, 24.0))
    assert iso.view_size == 4 and iso.draw_height
    assert (top.root, top.x_axis, top.y_axis) == ((400.0, 50.0), (48.0, 0.0), (0.0, 48.0))
    assert not top.draw_height
    assert top.figure_offset == (0.0, 12.0)


def test_z_axis_closes_the_basis():
    assert ISO.z_axis.to_tuple() == (0.0, -48.0)
    assert TOP.z_axis.to_tuple() == (-48.0, -48.0)
    basis = ProjectionBasis(Vector2(0.0, 0.0), Vector2(3.0, 1.0), Vector2(-2.0, 5.0))
    assert basis.x_axis.add(basis.y_axis).add(basis.z_axis).to_tuple() == (0.0, 0.0)


def test_tile_vertices_at_ground():
    assert points(tile_vertices(0, 0, 0, ISO)) == [(200, 275), (248, 299), (200, 323), (152, 299)]
    assert points(tile_vertices(1, 2, 0, TOP)) == [(448, 146), (496, 146), (496, 194), (448, 194)]


def test_tile_vertices_are_lifted_by_height():
    lifted = points(tile_vertices(1, 0, 1, ISO))

    assert lifted[0] == (248.0, 251.0)
    # the top face is the ground face moved along z_axis
    ground = tile_vertices(1, 0, 0, ISO)
    assert lifted == [v.add(ISO.z_axis).to_tuple() for v in ground]


def test_project_point():
    assert project_point(Vector2(1.5, 3.5), 1.0, ISO).to_tuple() == (104.0, 347.0)
    assert project_point(Vector2(1.5, 3.5), 0.0, TOP).to_tuple() == (472.0, 218.0)


def test_shadow_drops_to_floor():
    projected = project_point(Vector2(1.5, 3.5), 2.0, ISO)

    assert projected.to_tuple() == (104.0, 299.0)
    assert shadow_position(projected, 2.0, 1.0, ISO).to_tuple() == (104.0, 347.0)
    assert shadow_position(projected, 2.0, 2.0, ISO).equals(projected)


def test_figure_depth():
    assert figure_depth(Vector2(1.5, 3.5)) == 4
    assert figure_depth(Vector2(0.0, 0.0)) == 0
    assert isinstance(figure_depth(Vector2(2.9, 2.9)), int)


def test_isometric_tilemap_emits_tops_and_walls():
    commands = make_tilemap_commands(create_default_grid(), ISO, 4)

    assert len(commands) == 16 * 3
    assert all(isinstance(c, QuadCommand) for c in commands)
    assert [c.depth for c in commands[::3]] == [tx + ty for ty in range(4) for tx in range(4)]

    top, x_wall, y_wall = commands[:3]
    assert top.fill_color == TILE_TOP_COLOR
    assert x_wall.fill_color == y_wall.fill_color == TILE_WALL_COLOR
    assert top.depth == x_wall.depth == y_wall.depth == 0

    t = points(top.vertices)
    assert t == [(200, 227), (248, 251), (200, 275), (152, 251)]
    assert points(x_wall.vertices) == [t[1], (248, 299), (200, 323), t[2]]
    assert points(y_wall.vertices) == [t[2], (200, 323), (152, 299), t[3]]


def test_top_view_tilemap_is_flat():
    commands = make_tilemap_commands(create_default_grid(), TOP, 4, draw_height=False)

    assert len(commands) == 16
    assert points(commands[0].vertices) == [(400, 50), (448, 50), (448, 98), (400, 98)]
    assert points(commands[5].vertices) == points(tile_vertices(1, 1, 0, TOP))


def test_holes_have_no_walls():
    grid = create_grid([1.0, 0.0, 2.0, 1.0], width=2, height=2)
    commands = make_tilemap_commands(grid, ISO, 2)

    # 3 + 1 + 3 + 3
    assert len(commands) == 10
    assert points(commands[3].vertices) == points(tile_vertices(1, 0, 0, ISO))


def test_view_larger_than_grid_draws_flat_ground():
    grid = create_grid([1.0], width=1, height=1)
    commands = make_tilemap_commands(grid, ISO, 2)

    assert len(commands) == 3 + 1 + 1 + 1


def test_custom_colors():
    commands = make_tilemap_commands(create_default_grid(), ISO, 1, top_color="red", wall_color="blue")

    assert [c.fill_color for c in commands] == ["red", "blue", "blue"]


def test_default_config_views_match_factories():
    cfg = SimConfig()

    assert cfg.iso_view == isometric_view()
    assert cfg.top_view == top_view()


@pytest.mark.parametrize("n", [1, 3, 6])
@pytest.mark.parametrize("h", [0.5, 2.0])
def test_raised_grid_yields_tops_and_two_walls_per_cell(n, h):
    commands = make_tilemap_commands(create_flat_grid(n, n, h), ISO, n)
    tops = [c for c in commands if c.fill_color == TILE_TOP_COLOR]
    walls = [c for c in commands if c.fill_color == TILE_WALL_COLOR]

    assert len(tops) == n * n
    assert len(walls) == 2 * n * n


def test_flat_view_has_no_walls():
    commands = make_tilemap_commands(create_flat_grid(3, 3, 2.0), TOP, 3, draw_height=False)

    assert len(commands) == 9
    assert all(c.fill_color == TILE_TOP_COLOR for c in commands)
