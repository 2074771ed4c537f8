"""Pixelation utilities operating on NumPy arrays.

Pixelation is implemented by area-averaging the image down to one pixel per
`block_size x block_size` tile, then resizing back to the original size with
nearest-neighbor. This results in a classic pixelated effect with flat
blocks.
"""
from __future__ import annotations

import numpy as np

from ..errors import InvalidDimensions
from .resize import downscale_area, resize_nearest

Array = np.ndarray


def pixelated_shape(height: int, width: int, block_size: int) -> tuple[int, int]:
    """Return the (h, w) of the intermediate image for ``block_size``.

    Raises `InvalidDimensions` when either side would collapse to zero.
    """
    if block_size < 1:
        raise ValueError("block_size must be >= 1")
    small_h = height // block_size
    small_w = width // block_size
    if small_h == 0 or small_w == 0:
        raise InvalidDimensions(
            f"block size {block_size} exceeds image dimensions {width}x{height}"
        )
    return small_h, small_w


def pixelate(arr: Array, block_size: int) -> Array:
    """Pixelate an RGB image array by a given block size.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 3), dtype=uint8.
    block_size : int
        Edge length (>=1) of the square blocks. The image is area-averaged to
        (H // block_size, W // block_size), then resized back to (H, W)
        using nearest neighbor. When H or W is not a multiple of
        ``block_size`` the blocks are stretched slightly so the output still
        covers exactly (H, W).

    Returns
    -------
    np.ndarray
        Pixelated image of the same shape and dtype as the input.

    Raises
    ------
    InvalidDimensions
        If ``block_size`` is larger than the image height or width.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must be an RGB image with shape (H, W, 3)")

    H, W, _ = arr.shape
    small_h, small_w = pixelated_shape(H, W, block_size)
    if block_size == 1:
        return arr.copy()

    small = downscale_area(arr, small_h, small_w)
    return resize_nearest(small, H, W)
