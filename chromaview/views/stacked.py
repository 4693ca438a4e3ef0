from __future__ import annotations
from typing import Any, Optional
import numpy as np
from ..allocation import storage_dtype
from ..errors import DimensionMismatch
from ..types.color_types import Index, Shape, Scalar, is_numeric_dtype
from .base import ArrayView


class ZeroArray:
    """Placeholder for an all-zero channel of matching size in ``StackedView``."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "zeroarray"


zeroarray = ZeroArray()


class StackedView(ArrayView):
    """
    Stack equally shaped numeric arrays along a new first dimension.

    ``StackedView(r, zeroarray, b)`` behaves like a ``(3, *r.shape)`` array
    whose slice 0 is ``r``, slice 1 is all zeros and slice 2 is ``b``. Nothing
    is copied; writes go to the stacked arrays. A ``zeroarray`` slot only
    accepts zeros.

    Args:
        *arrays: numeric arrays or ``zeroarray``; at least one real array.
        dtype: element dtype of the view; defaults to the promoted dtype of
            the arrays.
    """

    def __init__(self, *arrays, dtype=None) -> None:
        real = [a for a in arrays if a is not zeroarray]
        if not real:
            raise DimensionMismatch("StackedView needs at least one array besides zeroarray")
        for a in real:
            if not is_numeric_dtype(a.dtype):
                raise TypeError(f"StackedView stacks arrays of numbers, got dtype {a.dtype}")
        shape = tuple(real[0].shape)
        for a in real[1:]:
            if tuple(a.shape) != shape:
                raise DimensionMismatch(f"all arrays must have shape {shape}, got {tuple(a.shape)}")
        self._arrays = tuple(arrays)
        self._inner_shape = shape
        self._dtype = np.dtype(dtype) if dtype is not None else np.result_type(*(a.dtype for a in real))

    @property
    def parent(self):
        return self._arrays

    @property
    def shape(self) -> Shape:
        return (len(self._arrays), *self._inner_shape)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def _get(self, index: Index) -> Scalar:
        a = self._arrays[index[0]]
        if a is zeroarray:
            return self._dtype.type(0)
        return self._dtype.type(a[index[1:]])

    def check_channels(self, values) -> None:
        """
        Raise ValueError if writing ``values`` (one per slot, in slot order)
        would put a non-zero value into a ``zeroarray`` slot.
        """
        for k, (a, value) in enumerate(zip(self._arrays, values)):
            if a is zeroarray and value != 0:
                raise ValueError(f"cannot store {value!r} in zeroarray channel {k}")

    def _set(self, index: Index, value: Scalar) -> None:
        a = self._arrays[index[0]]
        if a is zeroarray:
            if value != 0:
                raise ValueError(f"cannot store {value!r} in a zeroarray channel")
            return
        a[index[1:]] = value

    def similar(self, dtype: Any = None, shape: Optional[Shape] = None) -> np.ndarray:
        """Allocate a plain zero-filled numpy array."""
        shape = self.shape if shape is None else tuple(shape)
        return np.zeros(shape, dtype=self._dtype if dtype is None else storage_dtype(dtype, self))
