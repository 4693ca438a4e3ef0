"""Chromaview: zero-copy channel and color views over numpy arrays."""

from .colors import (
    ColorBase,
    WithAlpha,
    Gray,
    GrayA,
    AGray,
    RGB,
    BGR,
    RGBA,
    BGRA,
    ARGB,
    ABGR,
    HSV,
    HSVA,
    HSL,
    HSLA,
    convert,
    color_type_of,
    resolve_color_type,
)
from .config import SQUEEZE1
from .errors import (
    DimensionMismatch,
    ChannelCountMismatch,
    OutOfBoundsError,
    UnresolvedColorType,
)
from .channels import decompose, set_channel
from .allocation import similar
from .views import ChannelView, ColorView, StackedView, zeroarray
from .dispatch import channelview, colorview

__all__ = [
    # color types
    "ColorBase",
    "WithAlpha",
    "Gray",
    "GrayA",
    "AGray",
    "RGB",
    "BGR",
    "RGBA",
    "BGRA",
    "ARGB",
    "ABGR",
    "HSV",
    "HSVA",
    "HSL",
    "HSLA",
    "convert",
    "color_type_of",
    "resolve_color_type",
    # configuration and errors
    "SQUEEZE1",
    "DimensionMismatch",
    "ChannelCountMismatch",
    "OutOfBoundsError",
    "UnresolvedColorType",
    # channel access
    "decompose",
    "set_channel",
    # views
    "ChannelView",
    "ColorView",
    "StackedView",
    "zeroarray",
    "channelview",
    "colorview",
    "similar",
]
