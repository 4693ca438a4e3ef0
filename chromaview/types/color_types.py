from __future__ import annotations
from typing import Literal, Tuple
import numpy as np

Scalar = int | float | np.number
Index = Tuple[int, ...]
Shape = Tuple[int, ...]
ColorMode = Literal["gray", "graya", "rgb", "rgba", "hsv", "hsva", "hsl", "hsla"]
HUE_SPACES = {"hsl", "hsla", "hsv", "hsva"}


def is_hue_space(color_space: ColorMode) -> bool:
    """
    True for color modes with a hue channel (HSV, HSL and their alpha forms).

    Args:
        color_space: color mode, e.g. ``"hsva"``
    """
    return color_space.lower() in HUE_SPACES


def is_numeric_dtype(dtype) -> bool:
    """True for plain (non-structured) boolean, integer, float or complex dtypes."""
    dtype = np.dtype(dtype)
    return dtype.names is None and dtype.subdtype is None and dtype.kind in "biufc"
