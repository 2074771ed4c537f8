"""Tests for Game of Life grids."""

import numpy as np
import pytest

from grayblock.utils.life import (
    count_neighbors,
    grid_to_image,
    image_to_grid,
    next_generation,
    run_generations,
)


def _grid(size, cells):
    grid = np.zeros((size, size), dtype=bool)
    for r, c in cells:
        grid[r, c] = True
    return grid


def test_blinker_oscillates():
    """A horizontal blinker turns vertical, then back."""
    horizontal = _grid(5, [(2, 1), (2, 2), (2, 3)])
    vertical = _grid(5, [(1, 2), (2, 2), (3, 2)])
    assert np.array_equal(next_generation(horizontal), vertical)
    assert np.array_equal(run_generations(horizontal, 2), horizontal)


def test_block_is_still_life():
    block = _grid(6, [(2, 2), (2, 3), (3, 2), (3, 3)])
    assert np.array_equal(run_generations(block, 5), block)


def test_lonely_cell_dies():
    assert not next_generation(_grid(5, [(2, 2)])).any()


def test_neighbors_wrap_around_edges():
    """A cell in one corner is a neighbor of the opposite corner."""
    counts = count_neighbors(_grid(4, [(0, 0)]))
    assert counts[3, 3] == 1
    assert counts[0, 3] == 1
    assert counts[3, 0] == 1
    assert counts[0, 0] == 0


def test_blinker_across_edge():
    """A blinker on the top row continues through the bottom row."""
    horizontal = _grid(5, [(0, 0), (0, 1), (0, 2)])
    expected = _grid(5, [(4, 1), (0, 1), (1, 1)])
    assert np.array_equal(next_generation(horizontal), expected)


def test_next_generation_returns_new_array():
    grid = _grid(5, [(2, 1), (2, 2), (2, 3)])
    before = grid.copy()
    next_generation(grid)
    assert np.array_equal(grid, before)


def test_image_to_grid_dark_cells_alive():
    image = np.full((40, 40, 3), 255, dtype=np.uint8)
    image[:, :20] = 0
    grid = image_to_grid(image, size=8)
    assert grid.shape == (8, 8)
    assert grid.dtype == bool
    assert grid[:, :4].all()
    assert not grid[:, 4:].any()


def test_image_to_grid_larger_than_image():
    """Small images are stretched up to the grid size."""
    image = np.zeros((3, 3, 3), dtype=np.uint8)
    assert image_to_grid(image, size=10).all()


def test_image_to_grid_uses_channel_mean():
    """Pure red has mean brightness 85, so it counts as dark at 128."""
    image = np.full((10, 10, 3), (255, 0, 0), dtype=np.uint8)
    assert image_to_grid(image, size=5, threshold=128).all()
    assert not image_to_grid(image, size=5, threshold=80).any()


def test_image_to_grid_validation():
    image = np.zeros((10, 10, 3), dtype=np.uint8)
    with pytest.raises(ValueError):
        image_to_grid(image, size=0)
    with pytest.raises(ValueError):
        image_to_grid(image, threshold=300)


def test_grid_to_image():
    grid = _grid(3, [(1, 1)])
    image = grid_to_image(grid, cell_size=4)
    assert image.shape == (12, 12, 3)
    assert (image[4:8, 4:8] == 0).all()
    assert (image[:4, :] == 255).all()


def test_negative_steps_rejected():
    with pytest.raises(ValueError):
        run_generations(_grid(3, []), -1)
