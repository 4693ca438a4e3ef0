"""
Cheapest-representation constructors.

``channelview`` and ``colorview`` return something that behaves like a
ChannelView or ColorView, but skip the wrapper whenever a cheaper exact
representation exists. In order of preference:

1. the input itself, when it already has the requested kind of elements;
2. the parent of an opposite view (``channelview(ColorView(...))``);
3. a plain numpy view of the same memory under another dtype, when memory
   order equals constructor order and the channels sit next to each other;
4. a ChannelView / ColorView wrapper.
"""
from __future__ import annotations
from typing import Any
import numpy as np
from . import config
from .colors.color import color_type_of, is_packed, resolve_color_type
from .colors.color_base import ColorBase
from .errors import DimensionMismatch, UnresolvedColorType
from .indexing import colorview_shape, is_squeezed
from .types.color_types import is_numeric_dtype
from .views.channelview import ChannelView
from .views.colorview import ColorView
from .views.stacked import StackedView, zeroarray


def channelview(array):
    """
    Return a view of ``array`` with the color channels split out along a new
    first dimension.

    Numeric arrays come back unchanged, a ColorView gives back its parent and
    structured arrays of reinterpretable colors (RGB, RGBA, Gray...) become a
    plain numpy array over the same memory. Anything else is wrapped in a
    ChannelView. Channels are in constructor order, not memory order.
    """
    if is_numeric_dtype(array.dtype):
        return array
    if isinstance(array, ColorView):
        return array.parent
    color_type = color_type_of(array)
    if isinstance(array, np.ndarray) and color_type.reinterpretable and is_packed(array.dtype):
        return _reinterpret_as_channels(array, color_type)
    return ChannelView(array)


def _reinterpret_as_channels(array: np.ndarray, color_type: type[ColorBase]) -> np.ndarray:
    n = color_type.num_channels
    channels = array.view(np.dtype((color_type.eltype, (n,))))
    if is_squeezed(config.SQUEEZE1, n):
        return channels[..., 0]
    return np.moveaxis(channels, -1, 0)


def _reinterpret_as_colors(array: np.ndarray, color_type: type[ColorBase]):
    n = color_type.num_channels
    if is_squeezed(config.SQUEEZE1, n):
        channels = array[..., np.newaxis]
    else:
        colorview_shape(config.SQUEEZE1, n, array.shape)
        channels = np.moveaxis(array, 0, -1)
    if n > 1 and channels.strides[-1] != array.itemsize:
        # channels of one color are not adjacent in memory
        return None
    return channels.view(color_type.dtype)[..., 0]


def colorview(color_type: Any, array, *arrays):
    """
    Return a view of ``array`` as an array of ``color_type``.

    ``color_type`` may lack a precision (``RGB``); it is then taken from
    ``array``. A ChannelView over colors of the requested type gives back its
    parent, a numpy array whose channel axis is contiguous in memory is
    reinterpreted in place, and anything else is wrapped in a ColorView.

    With several arrays, ``colorview(RGB, r, g, b)`` combines numeric (or
    gray) arrays into the channels of one color array; ``zeroarray`` fills a
    channel with zeros:

    >>> img = colorview(RGB, r, zeroarray, b)

    An array of colors is first split with ``channelview`` and then read back
    as ``color_type``.
    """
    if arrays:
        return _colorview_stacked(color_type, (array, *arrays))
    if array is zeroarray:
        raise DimensionMismatch("zeroarray needs at least one real array to take its shape from")
    if not is_numeric_dtype(array.dtype):
        return colorview(color_type, channelview(array))
    target = resolve_color_type(color_type, array.dtype)
    if isinstance(array, ChannelView):
        source = array.color_type
        if source.base_type() is target.base_type() and source.eltype == target.eltype:
            return array.parent
    if isinstance(array, np.ndarray) and target.reinterpretable and array.dtype == target.eltype:
        colors = _reinterpret_as_colors(array, target)
        if colors is not None:
            return colors
    return ColorView(target, array)


def _as_channel(array):
    if array is zeroarray or is_numeric_dtype(array.dtype):
        return array
    source = color_type_of(array)
    if source.num_channels != 1:
        raise TypeError(
            f"only numeric or single-channel arrays can be combined, got {source.__qualname__}"
        )
    channels = channelview(array)
    if is_squeezed(config.SQUEEZE1, 1):
        return channels
    # drop the length-1 channel axis so every slot has the element shape
    if not isinstance(channels, np.ndarray):
        raise TypeError(
            f"cannot drop the channel axis of a {type(channels).__name__}; "
            "combine numpy arrays of numbers or of packed gray colors"
        )
    return channels[0]


def _colorview_stacked(color_type: Any, arrays):
    channels = tuple(_as_channel(a) for a in arrays)
    real = [a for a in channels if a is not zeroarray]
    if not real:
        raise DimensionMismatch("zeroarray needs at least one real array to take its shape from")
    if not (isinstance(color_type, type) and issubclass(color_type, ColorBase)):
        raise UnresolvedColorType(f"{color_type!r} is not a color type")
    eltype = color_type.eltype
    if eltype is None:
        eltype = np.result_type(*(a.dtype for a in real))
    stacked = StackedView(*channels, dtype=eltype)
    return colorview(resolve_color_type(color_type.base_type(), eltype), stacked)
