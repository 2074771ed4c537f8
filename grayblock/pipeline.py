"""Pixelate-and-grayscale transform.

Pipeline:
- Area-average the image down by ``block_size``
- Nearest-neighbor resize back to the original size
- Convert to gray (or to black/white when a threshold is set)
- Encode as PNG (``pixelate_bytes`` only)

Every stage returns a new array; the input is never modified.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .utils.codec import decode_image, encode_png
from .utils.grayscale import threshold as to_black_white
from .utils.grayscale import to_grayscale
from .utils.pixelate import pixelate

logger = logging.getLogger(__name__)

Array = np.ndarray

BLOCK_SIZE = 10


def transform(
    arr: Array,
    block_size: int = BLOCK_SIZE,
    threshold: Optional[int] = None,
) -> Array:
    """Pixelate an RGB image and convert it to gray.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 3), dtype=uint8.
    block_size : int
        Edge length of the pixelation blocks.
    threshold : int | None
        If set, map the result to pure black/white at this luma level
        instead of keeping continuous gray.

    Returns
    -------
    np.ndarray
        Array of the same shape as ``arr`` with R == G == B everywhere.
    """
    blocky = pixelate(arr, block_size)
    if threshold is None:
        return to_grayscale(blocky)
    return to_black_white(blocky, threshold)


def pixelate_bytes(
    data: bytes,
    block_size: int = BLOCK_SIZE,
    threshold: Optional[int] = None,
) -> bytes:
    """Decode ``data``, run `transform`, and return the result as PNG bytes.

    Raises `DecodeError`, `InvalidDimensions` or `EncodeError`; there is no
    partial output.
    """
    arr = decode_image(data)
    h, w, _ = arr.shape
    logger.debug("decoded %dx%d image (%d bytes)", w, h, len(data))

    out = transform(arr, block_size=block_size, threshold=threshold)
    png = encode_png(out)
    logger.debug("encoded %dx%d PNG (%d bytes), block=%d", w, h, len(png), block_size)
    return png
