"""Tests for the pixelate-and-grayscale transform."""

import io

import numpy as np
import pytest
from PIL import Image

from grayblock.errors import DecodeError, InvalidDimensions
from grayblock.pipeline import BLOCK_SIZE, pixelate_bytes, transform


def _split_image() -> np.ndarray:
    image = np.zeros((10, 10, 3), dtype=np.uint8)
    image[:, :5] = (0, 0, 255)
    image[:, 5:] = (255, 255, 255)
    return image


def test_default_block_size():
    assert BLOCK_SIZE == 10


def test_solid_red_becomes_76():
    """100x100 red with block 10 turns into uniform gray 76."""
    image = np.full((100, 100, 3), (255, 0, 0), dtype=np.uint8)
    out = transform(image)
    assert out.shape == (100, 100, 3)
    assert (out == 76).all()


def test_dimensions_and_gray(photo):
    for block in (1, 3, 10, 64):
        out = transform(photo, block_size=block)
        assert out.shape == photo.shape
        assert (out[..., 0] == out[..., 1]).all()
        assert (out[..., 1] == out[..., 2]).all()


def test_single_block_blends_split():
    """One block over a blue/white split averages both halves."""
    out = transform(_split_image(), block_size=10)
    values = np.unique(out)
    assert len(values) == 1
    # blue alone is 29, white alone is 255
    assert 29 < values[0] < 255


def test_straddling_block_blends_edge():
    """The block that covers the split is neither blue nor white."""
    out = transform(_split_image(), block_size=3)[..., 0]
    assert (out[:, 0] == 29).all()
    assert (out[:, 9] == 255).all()
    assert (29 < out[:, 4]).all() and (out[:, 4] < 255).all()
    # no sharp edge between the two original halves
    assert (out[:, 4] == out[:, 5]).all()


def test_interior_blocks_flat(photo):
    out = transform(photo, block_size=8)[..., 0]
    for i in range(0, 64, 8):
        for j in range(0, 80, 8):
            assert (out[i:i + 8, j:j + 8] == out[i, j]).all()


def test_threshold_output(photo):
    out = transform(photo, block_size=4, threshold=128)
    assert set(np.unique(out).tolist()) <= {0, 255}


def test_transform_too_small():
    with pytest.raises(InvalidDimensions):
        transform(np.zeros((9, 200, 3), dtype=np.uint8))


def test_pixelate_bytes_round_trip(red_png):
    data = pixelate_bytes(red_png)
    with Image.open(io.BytesIO(data)) as im:
        assert im.format == "PNG"
        assert im.size == (100, 100)
        arr = np.array(im.convert("RGB"))
    assert (arr == 76).all()


def test_pixelate_bytes_odd_size(make_png):
    """Dimensions that are not multiples of the block survive unchanged."""
    image = np.random.randint(0, 256, (47, 133, 3), dtype=np.uint8)
    data = pixelate_bytes(make_png(image))
    with Image.open(io.BytesIO(data)) as im:
        assert im.size == (133, 47)


def test_pixelate_bytes_errors(make_png):
    with pytest.raises(DecodeError):
        pixelate_bytes(b"garbage")
    with pytest.raises(InvalidDimensions):
        pixelate_bytes(make_png(np.zeros((4, 4, 3), dtype=np.uint8)))
