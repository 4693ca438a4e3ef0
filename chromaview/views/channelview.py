from __future__ import annotations
from typing import Any, Optional
import numpy as np
from .. import config
from ..allocation import channel_parent_shape, check_channel_count, similar
from ..channels import decompose, set_channel
from ..colors.color import color_type_of, is_color_type
from ..errors import DimensionMismatch
from ..indexing import channelview_shape, is_squeezed, split_index
from ..types.color_types import Index, Shape, Scalar, is_numeric_dtype
from .base import ArrayView, element_at, store_element


class ChannelView(ArrayView):
    """
    View an array of colors as an array of numbers.

    The channels of each color become a new first dimension: an ``(m, n)``
    array of ``RGB[np.float32]`` is seen as a ``(3, m, n)`` array of float32.
    Single-channel colors add no dimension while ``config.SQUEEZE1`` is set.

    Channels appear in constructor order, not memory order: channel 0 of a
    ``BGR`` array is red.

    Writes go through to the parent. Because colors are immutable, setting
    one channel reads the whole color, builds a new one and stores it back.

    Args:
        parent: structured numpy array of a registered color type, or a
            ColorView.
        ndim: expected dimensionality of the view; checked if given.

    Raises:
        TypeError: if ``parent`` holds numbers rather than colors.
        DimensionMismatch: if ``ndim`` does not match the computed shape.

    See also ``channelview``, which avoids the wrapper when it can.
    """

    def __init__(self, parent, ndim: Optional[int] = None) -> None:
        color_type = color_type_of(parent)
        if color_type is None:
            raise TypeError(
                f"ChannelView needs an array of colors, got dtype {parent.dtype}"
            )
        shape = channelview_shape(config.SQUEEZE1, color_type.num_channels, parent.shape)
        if ndim is not None and ndim != len(shape):
            raise DimensionMismatch(
                f"a ChannelView of {color_type.__qualname__} over a {len(parent.shape)}-dimensional "
                f"array has {len(shape)} dimensions, not {ndim}"
            )
        self._parent = parent
        self.color_type = color_type

    @property
    def parent(self):
        return self._parent

    @property
    def num_channels(self) -> int:
        return self.color_type.num_channels

    @property
    def shape(self) -> Shape:
        return channelview_shape(config.SQUEEZE1, self.num_channels, self._parent.shape)

    @property
    def dtype(self) -> np.dtype:
        return self.color_type.eltype

    @property
    def linear_indexing(self) -> bool:
        return is_squeezed(config.SQUEEZE1, self.num_channels)

    def _get(self, index: Index) -> Scalar:
        channel, parent_index = split_index(config.SQUEEZE1, self.num_channels, index)
        color = element_at(self._parent, self.color_type, parent_index)
        return decompose(color)[channel]

    def _set(self, index: Index, value: Scalar) -> None:
        channel, parent_index = split_index(config.SQUEEZE1, self.num_channels, index)
        color = element_at(self._parent, self.color_type, parent_index)
        store_element(self._parent, parent_index, set_channel(color, value, channel))

    def similar(self, dtype: Any = None, shape: Optional[Shape] = None) -> ChannelView:
        """
        Allocate a new array of colors of the same family and wrap it.

        ``shape`` is given in channel space, so its first entry must equal
        the number of channels (unless single-channel colors are squeezed).
        """
        dtype = self.dtype if dtype is None else dtype
        if is_color_type(dtype) or not is_numeric_dtype(dtype):
            raise TypeError(f"ChannelView.similar expects a numeric dtype, got {dtype!r}")
        shape = self.shape if shape is None else tuple(shape)
        squeeze = config.SQUEEZE1
        n = self.num_channels
        check_channel_count(squeeze, n, shape)
        new_type = self.color_type.base_type()[dtype]
        return ChannelView(similar(self._parent, new_type, channel_parent_shape(squeeze, n, shape)))
