import numpy as np
import pytest

from chromaview import config
from chromaview.colors import RGB, BGR, Gray


@pytest.fixture
def rgb_2x2():
    """2x2 RGB[uint8] image laid out row-major: (1,2,3) (4,5,6) / (7,8,9) (10,11,12)."""
    return np.array(
        [[(1, 2, 3), (4, 5, 6)],
         [(7, 8, 9), (10, 11, 12)]],
        dtype=RGB[np.uint8].dtype,
    )


@pytest.fixture
def bgr_2x2():
    """Same colors as ``rgb_2x2`` stored blue first."""
    img = np.zeros((2, 2), dtype=BGR[np.uint8].dtype)
    values = [[(1, 2, 3), (4, 5, 6)], [(7, 8, 9), (10, 11, 12)]]
    for i in range(2):
        for j in range(2):
            r, g, b = values[i][j]
            img[i, j] = (b, g, r)
    return img


@pytest.fixture
def gray_2x3():
    return np.array(
        [[(0.0,), (0.1,), (0.2,)],
         [(0.3,), (0.4,), (0.5,)]],
        dtype=Gray[np.float32].dtype,
    )


@pytest.fixture
def no_squeeze(monkeypatch):
    """Give single-channel colors their own axis for the duration of a test."""
    monkeypatch.setattr(config, "SQUEEZE1", False)
