"""
Allocation of companion arrays.

``similar`` creates a new, zero-filled array that matches an existing array
or view. The views use the shape helpers here to move a requested shape
between channel space and element space before delegating to their parent.
"""
from __future__ import annotations
from typing import Any, Optional
import numpy as np
from .colors.color import color_type_of, is_color_type, resolve_color_type
from .errors import ChannelCountMismatch
from .indexing import is_squeezed
from .types.color_types import Shape


def check_channel_count(squeeze: bool, num_channels: int, shape: Shape) -> None:
    """Raise ChannelCountMismatch unless ``shape`` starts with ``num_channels``."""
    if is_squeezed(squeeze, num_channels):
        return
    if len(shape) == 0 or shape[0] != num_channels:
        found = shape[0] if shape else None
        raise ChannelCountMismatch(
            f"new array has {found} color channels, must have {num_channels}"
        )


def channel_parent_shape(squeeze: bool, num_channels: int, shape: Shape) -> Shape:
    """Element-space shape of the parent behind a channel-space ``shape``."""
    if is_squeezed(squeeze, num_channels):
        return tuple(shape)
    return tuple(shape[1:])


def color_parent_shape(squeeze: bool, num_channels: int, shape: Shape) -> Shape:
    """Channel-space shape of the parent behind an element-space ``shape``."""
    if is_squeezed(squeeze, num_channels):
        return tuple(shape)
    return (num_channels, *shape)


def element_precision(color_type, eltype) -> np.dtype:
    """Precision for a new parent: the color's own, else the existing parent's."""
    if color_type.eltype is not None:
        return color_type.eltype
    return np.dtype(eltype)


def channel_eltype(array) -> np.dtype:
    """Numeric dtype of an array of numbers, or the channel dtype of an array of colors."""
    color_type = color_type_of(array)
    if color_type is None:
        return np.dtype(array.dtype)
    return color_type.eltype


def storage_dtype(dtype: Any, like) -> np.dtype:
    """numpy dtype used to allocate elements of ``dtype`` next to the array ``like``."""
    if is_color_type(dtype):
        return resolve_color_type(dtype, element_precision(dtype, channel_eltype(like))).dtype
    return np.dtype(dtype)


def similar(array, dtype: Any = None, shape: Optional[Shape] = None):
    """
    Allocate a zero-filled array like ``array``.

    Args:
        array: numpy array or any of the views.
        dtype: numeric dtype or color type. Defaults to the element type of
            ``array``.
        shape: shape of the new array. Defaults to the shape of ``array``.

    Returns:
        A numpy array for numpy inputs; views allocate through their parent
        and return a view of the same kind.
    """
    if isinstance(array, np.ndarray):
        shape = array.shape if shape is None else tuple(shape)
        dtype = array.dtype if dtype is None else storage_dtype(dtype, array)
        return np.zeros(shape, dtype=dtype)
    return array.similar(dtype, shape)
