import jax.numpy as jnp
import numpy as np
import pytest

from isotile.systems.layout import (
    OUT_OF_BOUNDS,
    GridConfig,
    create_default_grid,
    create_flat_grid,
    create_grid,
    grid_from_config,
    host_height_at,
)


@pytest.fixture
def stepped_grid():
    # row 0: floor, platform; row 1: hole, floor
    return create_grid([[1.0, 2.0], [0.0, 1.0]], width=2, height=2)


def test_default_grid_is_eight_by_eight_floor():
    grid = create_default_grid()

    assert (grid.width, grid.height) == (8, 8)
    assert grid.heights.shape == (64,)
    assert all(float(h) == 1.0 for h in grid.heights)


def test_index_of_floors_coordinates():
    grid = create_default_grid()

    assert int(grid.index_of(0.0, 0.0)) == 0
    assert int(grid.index_of(2.7, 1.2)) == 10
    assert int(grid.index_of(7.99, 7.99)) == 63


@pytest.mark.parametrize("x, y", [(-0.1, 0.0), (0.0, -0.5), (8.0, 0.0), (0.0, 8.0), (100.0, 100.0)])
def test_out_of_bounds_reads_as_hole(x, y):
    grid = create_default_grid()

    assert int(grid.index_of(x, y)) == OUT_OF_BOUNDS
    assert float(grid.height_at(x, y)) == 0.0
    assert not bool(grid.is_passable(x, y, 10.0))


def test_height_at_reads_row_major(stepped_grid):
    assert float(stepped_grid.height_at(0.5, 0.5)) == 1.0
    assert float(stepped_grid.height_at(1.5, 0.5)) == 2.0
    assert float(stepped_grid.height_at(0.5, 1.5)) == 0.0
    assert float(stepped_grid.height_at(1.5, 1.5)) == 1.0


def test_passability(stepped_grid):
    # on top of the floor
    assert bool(stepped_grid.is_passable(0.5, 0.5, 1.0))
    # inside the platform
    assert not bool(stepped_grid.is_passable(1.5, 0.5, 1.0))
    assert bool(stepped_grid.is_passable(1.5, 0.5, 2.0))
    # holes are never passable
    assert not bool(stepped_grid.is_passable(0.5, 1.5, 5.0))
    # below the floor
    assert not bool(stepped_grid.is_passable(1.5, 1.5, 0.99))


def test_create_grid_accepts_flat_list():
    grid = create_grid([1, 2, 3, 4, 5, 6], width=3, height=2)

    assert float(grid.height_at(2, 1)) == 6.0


def test_create_grid_rejects_bad_shapes():
    with pytest.raises(ValueError):
        create_grid([1, 2, 3], width=2, height=2)
    with pytest.raises(ValueError):
        create_grid([[1, 2], [3]], width=2, height=2)
    with pytest.raises(ValueError):
        create_grid([], width=0, height=2)


def test_flat_grid():
    grid = create_flat_grid(3, 4, 2.5)

    assert (grid.width, grid.height) == (3, 4)
    assert float(grid.height_at(2.5, 3.5)) == 2.5


def test_grid_from_config():
    assert grid_from_config(GridConfig()).width == 8

    flat = grid_from_config(GridConfig(preset="flat", width=3, height=2, flat_height=4.0))
    assert (flat.width, flat.height) == (3, 2)
    assert float(flat.height_at(0, 0)) == 4.0

    custom = grid_from_config(GridConfig(preset="custom", width=2, height=1, heights=[1.0, 0.0]))
    assert float(custom.height_at(1, 0)) == 0.0


def test_grid_from_config_errors():
    with pytest.raises(ValueError):
        grid_from_config(GridConfig(preset="custom"))
    with pytest.raises(ValueError):
        grid_from_config(GridConfig(preset="maze"))


@pytest.mark.parametrize("z", [-5.0, -0.5, 0.0, 0.25, 1.0, 3.75, 1e6])
@pytest.mark.parametrize("x, y", [(-0.1, 0.0), (8.0, 3.0), (3.0, -2.0), (8.5, 8.5)])
def test_out_of_bounds_impassable_at_any_altitude(x, y, z):
    assert not bool(create_default_grid().is_passable(x, y, z))


def test_create_grid_accepts_arrays():
    grid = create_grid(np.arange(6.0).reshape(2, 3), width=3, height=2)

    assert float(grid.height_at(2.5, 1.5)) == 5.0
    assert create_grid(jnp.ones(4), width=2, height=2).heights.shape == (4,)
    with pytest.raises(ValueError):
        create_grid(np.ones((3, 2)), width=3, height=2)


def test_host_lookup_matches_traced_lookup(stepped_grid):
    host = stepped_grid.host_heights()

    assert host.shape == (2, 2)
    for x in (-1.0, -0.5, 0.0, 0.5, 1.25, 1.99, 2.0, 3.5):
        for y in (-1.0, -0.01, 0.0, 0.75, 1.5, 2.0, 4.0):
            assert host_height_at(host, x, y) == float(stepped_grid.height_at(x, y))
