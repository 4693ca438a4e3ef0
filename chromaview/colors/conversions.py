"""
Scalar conversions between RGB and the hue spaces.

All functions work on unit floats: r, g, b, saturation, value and lightness
in [0, 1], hue in degrees [0, 360).
"""
import math
from typing import Callable, Dict, Tuple

Triple = Tuple[float, float, float]


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360


def _hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    if delta == 0:
        return 0.0
    if max_c == r:
        return (60 * ((g - b) / delta) + 360) % 360
    if max_c == g:
        return (60 * ((b - r) / delta) + 120) % 360
    return (60 * ((r - g) / delta) + 240) % 360


def rgb_to_hsv(r: float, g: float, b: float) -> Triple:
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)
    saturation = 0.0 if max_c == 0 else delta / max_c
    return _hue(r, g, b, max_c, delta), saturation, max_c


def hsv_to_rgb(h: float, s: float, v: float) -> Triple:
    h = normalize_hue(h)
    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c
    match int(math.floor(h / 60)):
        case 0:
            r, g, b = c, x, 0.0
        case 1:
            r, g, b = x, c, 0.0
        case 2:
            r, g, b = 0.0, c, x
        case 3:
            r, g, b = 0.0, x, c
        case 4:
            r, g, b = x, 0.0, c
        case _:
            r, g, b = c, 0.0, x
    return r + m, g + m, b + m


def rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    """
    Convert RGB to HSL (CSS Color 4 algorithm).

    Returns:
        (hue [0, 360), saturation [0, 1], lightness [0, 1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2.0
    if delta == 0:
        saturation = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))
    return _hue(r, g, b, max_c, delta), saturation, lightness


def hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    """Convert HSL to RGB (CSS Color 4 algorithm)."""
    h = normalize_hue(h)
    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)
    low = 2 * l - m1
    match int(math.floor(h / 60)):
        case 0:
            return m1, m2, low
        case 1:
            return m2, m1, low
        case 2:
            return low, m1, m2
        case 3:
            return low, m2, m1
        case 4:
            return m2, low, m1
        case _:
            return m1, low, m2


TO_RGB: Dict[str, Callable[[float, float, float], Triple]] = {
    "hsv": hsv_to_rgb,
    "hsl": hsl_to_rgb,
}

FROM_RGB: Dict[str, Callable[[float, float, float], Triple]] = {
    "hsv": rgb_to_hsv,
    "hsl": rgb_to_hsl,
}
