from __future__ import annotations

from .errors import DecodeError, EncodeError, GrayblockError, InvalidDimensions  # noqa: F401
from .pipeline import BLOCK_SIZE, pixelate_bytes, transform  # noqa: F401
from .utils.codec import decode_image, encode_png  # noqa: F401
from .utils.grayscale import to_grayscale  # noqa: F401
from .utils.pixelate import pixelate  # noqa: F401

__all__ = [
    "BLOCK_SIZE",
    "transform",
    "pixelate_bytes",
    "decode_image",
    "encode_png",
    "pixelate",
    "to_grayscale",
    "GrayblockError",
    "DecodeError",
    "InvalidDimensions",
    "EncodeError",
]
