from __future__ import annotations
from typing import Any, Optional
import numpy as np
from .. import config
from ..allocation import color_parent_shape, element_precision, similar
from ..channels import get_channels, set_channels
from ..colors.color import convert, is_color_type, resolve_color_type
from ..colors.color_base import ColorBase
from ..errors import DimensionMismatch, UnresolvedColorType
from ..indexing import colorview_shape
from ..types.color_types import Index, Shape, is_numeric_dtype
from .base import ArrayView


class ColorView(ArrayView):
    """
    View an array of numbers as an array of colors.

    The first dimension of ``parent`` holds the channels of ``color_type``:
    a ``(3, m, n)`` float32 array seen through ``ColorView(RGB, parent)`` is
    an ``(m, n)`` array of ``RGB[float32]``. Single-channel colors consume no
    dimension while ``config.SQUEEZE1`` is set.

    Channels are read in constructor order, so ``ColorView(BGR, a)[i]`` takes
    red from ``a[0, i]`` even though BGR stores blue first.

    Args:
        color_type: color class, with or without precision. Without one the
            precision of ``parent`` is used.
        parent: numeric numpy array, ChannelView or StackedView.
        ndim: expected dimensionality of the view; checked if given.

    Raises:
        UnresolvedColorType: if no color type is given.
        DimensionMismatch: if the leading extent of ``parent`` is not the
            number of channels, or ``ndim`` does not match.

    See also ``colorview``, which avoids the wrapper when it can.
    """

    def __init__(self, color_type=None, parent=None, *, ndim: Optional[int] = None) -> None:
        if parent is None:
            raise UnresolvedColorType("specify the desired colorspace with ColorView(C, parent)")
        parent_dtype = getattr(parent, 'dtype', None)
        if parent_dtype is None or not is_numeric_dtype(parent_dtype):
            raise TypeError(f"ColorView needs an array of numbers, got dtype {parent_dtype}")
        color_type = resolve_color_type(color_type, parent_dtype)
        shape = colorview_shape(config.SQUEEZE1, color_type.num_channels, parent.shape)
        if ndim is not None and ndim != len(shape):
            raise DimensionMismatch(
                f"a ColorView of {color_type.__qualname__} over a {len(parent.shape)}-dimensional "
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
        return colorview_shape(config.SQUEEZE1, self.num_channels, self._parent.shape)

    @property
    def dtype(self) -> np.dtype:
        """Structured dtype of the color type, the same one a stored array would use."""
        return self.color_type.dtype

    @property
    def linear_indexing(self) -> bool:
        return self.num_channels == 1

    def _get(self, index: Index) -> ColorBase:
        return self.color_type(*get_channels(self._parent, self.color_type, index, config.SQUEEZE1))

    def _set(self, index: Index, value: Any) -> None:
        color = convert(self.color_type, value)
        set_channels(self._parent, color, index, config.SQUEEZE1)

    def similar(self, dtype: Any = None, shape: Optional[Shape] = None):
        """
        Allocate a new array next to this view.

        A color type gives a new ColorView over a freshly allocated numeric
        parent; a numeric dtype is handed straight to the parent's allocator.
        """
        dtype = self.color_type if dtype is None else dtype
        shape = self.shape if shape is None else tuple(shape)
        if not is_color_type(dtype):
            return similar(self._parent, dtype, shape)
        eltype = element_precision(dtype, self._parent.dtype)
        new_type = resolve_color_type(dtype, eltype)
        parent_shape = color_parent_shape(config.SQUEEZE1, new_type.num_channels, shape)
        return ColorView(new_type, similar(self._parent, eltype, parent_shape))
