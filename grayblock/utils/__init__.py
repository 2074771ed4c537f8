"""Utility functions for grayblock.

Modules:
- codec: Encoded bytes / files <-> NumPy conversion utilities.
- resize: Area-averaging and nearest-neighbor resampling.
- pixelate: Pixelation via area downscale then nearest upscale.
- grayscale: Luma conversion and optional black/white threshold.
- life: Game of Life grids seeded from images.
"""
from .codec import decode_image, encode_png, load_image, save_image
from .resize import downscale_area, resize_nearest
from .pixelate import pixelate, pixelated_shape
from .grayscale import luma, to_grayscale, threshold
from .life import image_to_grid, next_generation, run_generations, grid_to_image

__all__ = [
    "decode_image",
    "encode_png",
    "load_image",
    "save_image",
    "downscale_area",
    "resize_nearest",
    "pixelate",
    "pixelated_shape",
    "luma",
    "to_grayscale",
    "threshold",
    "image_to_grid",
    "next_generation",
    "run_generations",
    "grid_to_image",
]
