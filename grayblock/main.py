"""Command-line entry point for grayblock.

This tool loads an image, pixelates it, converts it to grayscale (or to
black and white when a threshold is given), and saves the result. It runs
the same pipeline as the HTTP service, on local files. Optionally it also
seeds a Game of Life grid from the result and writes the board after a
number of generations.

All processing occurs on NumPy arrays; Pillow is used only for
loading and saving.

Usage example:
    python -m grayblock.main -i input.jpg -o output.png --block 10
    python -m grayblock.main -i input.jpg -o output.png --life-output life.png --life-steps 20
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .errors import GrayblockError
from .pipeline import BLOCK_SIZE, transform
from .utils.codec import load_image, save_image
from .utils.life import BRIGHTNESS_THRESHOLD, GRID_SIZE, grid_to_image, image_to_grid, run_generations

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="grayblock",
        description="Pixelate an image and render it in grayscale.",
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", required=True, help="Path to output image file")
    parser.add_argument(
        "--block",
        type=int,
        default=BLOCK_SIZE,
        help=f"Pixelation block size in pixels (>=1, default {BLOCK_SIZE})",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Map output to pure black/white at this luma level (0-255). Off by default.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline details")

    life = parser.add_argument_group("Game of Life")
    life.add_argument(
        "--life-output",
        type=str,
        default=None,
        help="Also write a Game of Life board seeded from the pixelated image to this path",
    )
    life.add_argument("--life-steps", type=int, default=0, help="Generations to run before writing the board")
    life.add_argument("--grid-size", type=int, default=GRID_SIZE, help=f"Board edge length in cells (default {GRID_SIZE})")
    life.add_argument(
        "--life-threshold",
        type=int,
        default=BRIGHTNESS_THRESHOLD,
        help="Cells darker than this brightness (0-255) start alive",
    )
    life.add_argument("--cell-size", type=int, default=8, help="Rendered pixels per cell")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs."""
    if ns.block < 1:
        raise ValueError("--block must be an integer >= 1")
    if ns.threshold is not None and not 0 <= ns.threshold <= 255:
        raise ValueError("--threshold must be in 0..255")
    if ns.life_steps < 0:
        raise ValueError("--life-steps must be >= 0")
    if ns.grid_size < 1 or ns.cell_size < 1:
        raise ValueError("--grid-size and --cell-size must be >= 1")
    if not 0 <= ns.life_threshold <= 255:
        raise ValueError("--life-threshold must be in 0..255")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Returns
    -------
    int
        Exit status code: 0 on success, 1 if the image could not be
        read, processed or written, 2 for invalid arguments.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    try:
        img = load_image(args.input)
        out = transform(img, block_size=args.block, threshold=args.threshold)
        save_image(out, args.output)
        if args.life_output:
            grid = image_to_grid(out, size=args.grid_size, threshold=args.life_threshold)
            logger.debug("seeded %d live cells", int(grid.sum()))
            grid = run_generations(grid, args.life_steps)
            save_image(grid_to_image(grid, cell_size=args.cell_size), args.life_output)
    except GrayblockError as e:
        logger.debug("pipeline failed", exc_info=True)
        print(f"Error: {e}")
        return 1

    h, w, _ = out.shape
    print(f"Wrote {w}x{h} image: {args.output}")
    if args.life_output:
        print(f"Wrote {args.grid_size}x{args.grid_size} board after {args.life_steps} generations: {args.life_output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
