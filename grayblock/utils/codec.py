"""Image decoding and encoding using Pillow, with NumPy arrays.

All processing in this project occurs on NumPy arrays. These helpers only
convert between encoded image bytes (or files) and NumPy `uint8` RGB arrays.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import DecodeError, EncodeError

Array = np.ndarray


def _high_depth_to_uint8(im: Image.Image) -> Array:
    """Rescale a single-channel 16-bit, 32-bit int or float image to uint8.

    ``I;16*`` and ``I`` are taken as 16-bit samples (0..65535), which is how
    Pillow opens 16-bit PNG and TIFF grayscale. ``F`` is taken as 0.0..1.0.
    """
    a = np.array(im)
    if im.mode == "F":
        a = np.clip(np.nan_to_num(a), 0.0, 1.0) * 255.0
        return np.floor(a + 0.5).astype(np.uint8)
    a = np.clip(a.astype(np.int64), 0, 65535)
    return (a >> 8).astype(np.uint8)


def _to_rgb_array(im: Image.Image) -> Array:
    if im.mode == "F" or im.mode == "I" or im.mode.startswith("I;16"):
        # convert("RGB") would clip these to 0..255 instead of rescaling
        y = _high_depth_to_uint8(im)
        return np.repeat(y[:, :, None], 3, axis=2)
    # convert() drops alpha instead of compositing it
    if im.mode != "RGB":
        im = im.convert("RGB")
    return np.array(im, dtype=np.uint8)


def _check_rgb(arr: Array) -> None:
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must have shape (H, W, 3)")


def decode_image(data: bytes) -> Array:
    """Decode encoded image bytes into an RGB NumPy array (uint8).

    Parameters
    ----------
    data : bytes
        Bytes of any format Pillow can read (PNG, JPEG, GIF, BMP, ...).
        Palette, grayscale and alpha modes are normalised to RGB.

    Returns
    -------
    np.ndarray
        Array of shape (H, W, 3), dtype=uint8, in RGB order.

    Raises
    ------
    DecodeError
        If the bytes are empty, truncated, or not a recognised image.
    """
    if not data:
        raise DecodeError("empty image payload")
    try:
        with Image.open(io.BytesIO(data)) as im:
            im.load()
            return _to_rgb_array(im)
    except (UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"unrecognised image data: {exc}") from exc
    except (OSError, ValueError, SyntaxError) as exc:
        # Pillow reports corrupt or truncated streams through these
        raise DecodeError(f"could not decode image: {exc}") from exc


def encode_png(arr: Array) -> bytes:
    """Encode an RGB NumPy array (uint8) as PNG bytes.

    Raises
    ------
    EncodeError
        If Pillow fails while writing the PNG stream.
    """
    _check_rgb(arr)
    buf = io.BytesIO()
    try:
        Image.fromarray(arr).save(buf, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodeError(f"could not encode PNG: {exc}") from exc
    return buf.getvalue()


def load_image(path: Union[str, Path]) -> Array:
    """Load an image file into an RGB NumPy array (uint8).

    Unreadable files raise `DecodeError`, like `decode_image`.
    """
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise DecodeError(f"could not read {p}: {exc}") from exc
    return decode_image(data)


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Save an RGB NumPy array (uint8) to an image file via Pillow.

    The format is inferred from the extension of ``path``.
    """
    _check_rgb(arr)
    p = Path(path)
    try:
        Image.fromarray(arr).save(p)
    except (OSError, ValueError) as exc:
        # unknown extension, missing directory, permissions
        raise EncodeError(f"could not save image to {p}: {exc}") from exc
