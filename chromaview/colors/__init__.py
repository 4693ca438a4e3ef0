"""
Chromaview Color Classes
========================

Immutable color values with 1 to 4 channels, and the numpy structured
dtypes used to store them in arrays.

Features
--------
- Immutable color instances (frozen after initialization)
- Parametric precision: ``RGB`` is partial, ``RGB[np.uint8]`` is concrete
- Logical (constructor) channel order independent of memory order (``BGR``)
- Alpha channel support with the WithAlpha mixin, alpha is always the last
  logical channel
- Saturating casts into integer precisions

Usage
-----
>>> import numpy as np
>>> from chromaview.colors import RGB, BGR, color_type_of
>>>
>>> c = RGB[np.uint8](255, 128, 0)
>>> c.value             # (255, 128, 0)
>>> c.g                 # 128
>>> BGR[np.uint8].dtype # dtype([('b', 'u1'), ('g', 'u1'), ('r', 'u1')])
>>>
>>> img = np.zeros((4, 4), dtype=RGB[np.uint8].dtype)
>>> color_type_of(img)  # RGB[uint8]

Color Classes
-------------
    - Gray, GrayA, AGray
    - RGB, BGR, RGBA, BGRA, ARGB, ABGR
    - HSV, HSVA, HSL, HSLA

Notes
-----
- ``reinterpretable`` is declared per class: it is True only when memory
  order equals constructor order.
- Arrays of colors are structured arrays whose field names identify the
  color type.
"""

from .color_base import ColorBase, WithAlpha
from .gray import Gray, GrayA, AGray
from .rgb import RGB, BGR, RGBA, BGRA, ARGB, ABGR
from .hsv import HSV, HSVA
from .hsl import HSL, HSLA
from .color import (
    convert,
    color_type_of,
    color_type_of_dtype,
    is_color_type,
    is_packed,
    resolve_color_type,
    unified_fields_to_class,
)


__all__ = [
    'ColorBase', 'WithAlpha',
    'Gray', 'GrayA', 'AGray',
    'RGB', 'BGR', 'RGBA', 'BGRA', 'ARGB', 'ABGR',
    'HSV', 'HSVA', 'HSL', 'HSLA',
    'convert', 'color_type_of', 'color_type_of_dtype', 'is_color_type',
    'is_packed', 'resolve_color_type', 'unified_fields_to_class',
]
