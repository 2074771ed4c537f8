import io

import numpy as np
import pytest
from PIL import Image


def _png_bytes(arr: np.ndarray, mode: str = "RGB") -> bytes:
    im = Image.fromarray(arr)
    if im.mode != mode:
        im = im.convert(mode)
    buf = io.BytesIO()
    im.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def make_png():
    """Encode a NumPy array as PNG bytes, optionally in another mode."""
    return _png_bytes


@pytest.fixture
def red_png() -> bytes:
    return _png_bytes(np.full((100, 100, 3), (255, 0, 0), dtype=np.uint8))


@pytest.fixture
def photo() -> np.ndarray:
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, (64, 80, 3), dtype=np.uint8)
