"""Resampling utilities for NumPy arrays.

Provides an area-averaging downscale (smooth) and a nearest-neighbor resize
(fast) to arbitrary output sizes. Neither requires the ratio between input
and output to be an integer.
"""
from __future__ import annotations

import numpy as np

Array = np.ndarray


def _check_rgb(arr: Array, new_h: int, new_w: int) -> None:
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must be an RGB image with shape (H, W, 3)")
    if new_h < 1 or new_w < 1:
        raise ValueError("new_h and new_w must be >= 1")


def _area_weights(src: int, dst: int) -> Array:
    """Build a (dst, src) matrix of coverage weights along one axis.

    Output cell ``i`` spans ``[i * src / dst, (i + 1) * src / dst)`` in source
    coordinates. Each source pixel contributes the length of its overlap with
    that span; rows are normalised to sum to 1.
    """
    edges = np.arange(dst + 1, dtype=np.float64) * (src / dst)
    lo = edges[:-1, None]
    hi = edges[1:, None]
    px = np.arange(src, dtype=np.float64)[None, :]
    overlap = np.minimum(hi, px + 1.0) - np.maximum(lo, px)
    overlap = np.clip(overlap, 0.0, None)
    return (overlap / overlap.sum(axis=1, keepdims=True)).astype(np.float32)


def downscale_area(arr: Array, new_h: int, new_w: int) -> Array:
    """Resize an RGB image to (new_h, new_w) by area averaging.

    Every output pixel is the mean of the input pixels under its footprint,
    with partially covered pixels weighted by their coverage, rounded half
    up. This is the smoothing filter used for the first half of pixelation.
    Growing an axis (``new_h > H``) is also allowed; each output pixel then
    blends the one or two source pixels it overlaps.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 3), dtype=uint8.
    new_h : int
        Target height (>=1).
    new_w : int
        Target width (>=1).

    Returns
    -------
    np.ndarray
        Resized image, dtype=uint8.
    """
    _check_rgb(arr, new_h, new_w)

    H, W, _ = arr.shape
    if H == new_h and W == new_w:
        return arr.copy()

    if H % new_h == 0 and W % new_w == 0:
        # Whole blocks: plain block means, no float copy of the image
        fy, fx = H // new_h, W // new_w
        blocks = arr.reshape(new_h, fy, new_w, fx, 3)
        out = blocks.mean(axis=(1, 3), dtype=np.float32)
    else:
        wy = _area_weights(H, new_h)
        wx = _area_weights(W, new_w)
        out = np.einsum("ih,hwc,jw->ijc", wy, arr.astype(np.float32), wx, optimize=True)
    # Round half up
    return np.clip(np.floor(out + 0.5), 0, 255).astype(np.uint8)


def resize_nearest(arr: Array, new_h: int, new_w: int) -> Array:
    """Resize an RGB image to (new_h, new_w) via nearest-neighbor.

    Output pixel ``i`` samples source pixel ``floor((i + 0.5) * src / dst)``,
    i.e. the source pixel under the output pixel's center.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 3), dtype=uint8.
    new_h : int
        Target height (>=1).
    new_w : int
        Target width (>=1).

    Returns
    -------
    np.ndarray
        Resized image.
    """
    _check_rgb(arr, new_h, new_w)

    H, W, _ = arr.shape
    if H == new_h and W == new_w:
        return arr.copy()

    # Integer form of the center mapping, exact for any size
    yi = ((2 * np.arange(new_h, dtype=np.int64) + 1) * H) // (2 * new_h)
    xi = ((2 * np.arange(new_w, dtype=np.int64) + 1) * W) // (2 * new_w)

    out = arr[yi[:, None], xi[None, :], :]
    return out.astype(np.uint8)
