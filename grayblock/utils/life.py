"""Conway's Game of Life on grids seeded from images.

A grid is a square boolean NumPy array; ``True`` marks a live cell. The
board wraps at its edges (toroidal), so cells on the last row or column
count neighbors on the first one.
"""
from __future__ import annotations

import numpy as np

from .resize import downscale_area, resize_nearest

Array = np.ndarray

GRID_SIZE = 64
BRIGHTNESS_THRESHOLD = 128


def image_to_grid(arr: Array, size: int = GRID_SIZE, threshold: int = BRIGHTNESS_THRESHOLD) -> Array:
    """Seed a ``size x size`` grid from an RGB image.

    The image is area-resampled to the grid size (aspect ratio is not
    kept). A cell is alive when the mean of its R, G and B values is below
    ``threshold``, so dark regions become live cells.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 3), dtype=uint8.
    size : int
        Grid edge length (>=1).
    threshold : int
        Brightness level in [0, 255].

    Returns
    -------
    np.ndarray
        Boolean array of shape (size, size).
    """
    if size < 1:
        raise ValueError("size must be >= 1")
    if not 0 <= threshold <= 255:
        raise ValueError("threshold must be in [0, 255]")
    small = downscale_area(arr, size, size)
    brightness = small.astype(np.float32).mean(axis=2)
    return brightness < threshold


def count_neighbors(grid: Array) -> Array:
    """Return the number of live neighbors of every cell, wrapping at edges."""
    g = grid.astype(np.uint8)
    total = np.zeros(g.shape, dtype=np.uint8)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dy == 0 and dx == 0:
                continue
            total += np.roll(np.roll(g, dy, axis=0), dx, axis=1)
    return total


def next_generation(grid: Array) -> Array:
    """Advance a grid by one step of the B3/S23 rule.

    A live cell survives with 2 or 3 live neighbors; a dead cell becomes
    alive with exactly 3. Returns a new array.
    """
    if not isinstance(grid, np.ndarray) or grid.ndim != 2:
        raise ValueError("grid must be a 2D array")
    grid = grid.astype(bool)
    n = count_neighbors(grid)
    return (n == 3) | (grid & (n == 2))


def run_generations(grid: Array, steps: int) -> Array:
    """Apply `next_generation` ``steps`` times."""
    if steps < 0:
        raise ValueError("steps must be >= 0")
    out = grid.astype(bool)
    for _ in range(steps):
        out = next_generation(out)
    return out


def grid_to_image(grid: Array, cell_size: int = 8) -> Array:
    """Render a grid as an RGB image: live cells black, dead cells white."""
    if cell_size < 1:
        raise ValueError("cell_size must be >= 1")
    h, w = grid.shape
    cells = np.where(grid, 0, 255).astype(np.uint8)
    rgb = np.repeat(cells[:, :, None], 3, axis=2)
    return resize_nearest(rgb, h * cell_size, w * cell_size)
