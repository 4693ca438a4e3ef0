"""
Index and shape translation between channel space and element space.

Channel space is the numeric view, with the channel axis first; element
space is the array of colors. Every function takes the squeeze policy
explicitly: when ``squeeze`` is true, single-channel colors do not get an
axis of their own.
"""
from __future__ import annotations
import operator
from typing import Sequence, Tuple
from .errors import DimensionMismatch, OutOfBoundsError
from .types.color_types import Index, Shape


def is_squeezed(squeeze: bool, num_channels: int) -> bool:
    return squeeze and num_channels == 1


def split_index(squeeze: bool, num_channels: int, index: Index) -> Tuple[int, Index]:
    """
    Split a channel-space index into ``(channel, element_index)``.

    >>> split_index(True, 3, (2, 0, 1))
    (2, (0, 1))
    >>> split_index(True, 1, (0, 1))
    (0, (0, 1))
    """
    if is_squeezed(squeeze, num_channels):
        return 0, tuple(index)
    return index[0], tuple(index[1:])


def channelview_shape(squeeze: bool, num_channels: int, parent_shape: Shape) -> Shape:
    """Shape of the numeric view of a color array of shape ``parent_shape``."""
    if is_squeezed(squeeze, num_channels):
        return tuple(parent_shape)
    return (num_channels, *parent_shape)


def colorview_shape(squeeze: bool, num_channels: int, parent_shape: Shape) -> Shape:
    """
    Shape of the color view of a numeric array of shape ``parent_shape``.

    Raises DimensionMismatch when the leading extent is not ``num_channels``.
    """
    if is_squeezed(squeeze, num_channels):
        return tuple(parent_shape)
    if len(parent_shape) == 0:
        raise DimensionMismatch(
            f"a 0-dimensional array has no channel axis for {num_channels} channels"
        )
    if parent_shape[0] != num_channels:
        raise DimensionMismatch(
            f"dimension 0 must have {num_channels} entries, got {parent_shape[0]}"
        )
    return tuple(parent_shape[1:])


def normalize_index(index: Sequence, shape: Shape, owner: str = "array") -> Index:
    """
    Check ``index`` against ``shape`` and return it with negative entries wrapped.

    Raises OutOfBoundsError if any coordinate falls outside ``shape`` and
    IndexError if the number of coordinates does not match.
    """
    index = tuple(operator.index(i) for i in index)
    if len(index) != len(shape):
        raise IndexError(
            f"{owner} of shape {tuple(shape)} needs {len(shape)} indices, got {len(index)}"
        )
    normalized = []
    for i, n in zip(index, shape):
        if not -n <= i < n:
            raise OutOfBoundsError(index, shape, owner)
        normalized.append(i + n if i < 0 else i)
    return tuple(normalized)
