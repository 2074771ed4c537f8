"""Grayscale conversion for RGB NumPy arrays."""
from __future__ import annotations

import numpy as np

Array = np.ndarray

# ITU-R BT.601 luma weights, scaled by 1000 so the sum stays exact
LUMA_WEIGHTS = np.array([299, 587, 114], dtype=np.int64)


def luma(arr: Array) -> Array:
    """Return the (H, W) luma plane, ``floor(0.299 R + 0.587 G + 0.114 B)``.

    Integer arithmetic keeps white at exactly 255 and makes the conversion
    idempotent on images that are already gray.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must be an RGB image with shape (H, W, 3)")
    y = (arr.astype(np.int64) @ LUMA_WEIGHTS) // 1000
    return y.astype(np.uint8)


def to_grayscale(arr: Array) -> Array:
    """Convert an RGB image to gray, keeping three equal channels.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 3), dtype=uint8.

    Returns
    -------
    np.ndarray
        Array of the same shape where R == G == B for every pixel.
    """
    y = luma(arr)
    return np.repeat(y[:, :, None], 3, axis=2)


def threshold(arr: Array, level: int = 128) -> Array:
    """Map an RGB image to pure black and white.

    Pixels whose luma is below ``level`` become black, all others white.
    """
    if not 0 <= level <= 255:
        raise ValueError("level must be in [0, 255]")
    y = luma(arr)
    bw = np.where(y < level, 0, 255).astype(np.uint8)
    return np.repeat(bw[:, :, None], 3, axis=2)
