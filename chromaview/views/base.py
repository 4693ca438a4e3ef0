from __future__ import annotations
import operator
from abc import ABC, abstractmethod
from math import prod
from typing import Any, Iterator, Optional
import numpy as np
from ..colors.color_base import ColorBase
from ..indexing import normalize_index
from ..errors import OutOfBoundsError
from ..types.color_types import Index, Shape


class ArrayView(ABC):
    """
    Common indexing protocol of the views.

    A view owns no data. Subclasses provide ``shape``, ``dtype``, element
    access on normalized index tuples and ``similar``; this class turns
    ``view[i, j]`` keys into bounds-checked tuples before any parent access.
    """

    # single-integer indexing into an n-d view, walking the view in C order
    linear_indexing: bool = False

    @property
    @abstractmethod
    def parent(self) -> Any:
        ...

    @property
    @abstractmethod
    def shape(self) -> Shape:
        ...

    @property
    @abstractmethod
    def dtype(self) -> np.dtype:
        ...

    @property
    def ndim(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        return prod(self.shape)

    @abstractmethod
    def _get(self, index: Index) -> Any:
        ...

    @abstractmethod
    def _set(self, index: Index, value: Any) -> None:
        ...

    @abstractmethod
    def similar(self, dtype: Any = None, shape: Optional[Shape] = None):
        ...

    def _index(self, key) -> Index:
        if not isinstance(key, tuple):
            key = (key,)
        if any(isinstance(k, (slice, type(Ellipsis))) or k is None for k in key):
            raise TypeError(f"{type(self).__name__} supports integer indices only, got {key!r}")
        shape = self.shape
        if len(key) == 1 and len(shape) != 1:
            if not self.linear_indexing:
                raise IndexError(
                    f"{type(self).__name__} of shape {shape} needs {len(shape)} indices; "
                    "linear indexing is only available for single-channel colors"
                )
            return self._linear_index(key[0])
        return normalize_index(key, shape, type(self).__name__)

    def _linear_index(self, i) -> Index:
        size = self.size
        i = operator.index(i)
        if not -size <= i < size:
            raise OutOfBoundsError((i,), (size,), type(self).__name__)
        return tuple(int(k) for k in np.unravel_index(i % size, self.shape))

    def __getitem__(self, key):
        return self._get(self._index(key))

    def __setitem__(self, key, value):
        self._set(self._index(key), value)

    def __len__(self) -> int:
        if not self.shape:
            raise TypeError(f"len() of a 0-dimensional {type(self).__name__}")
        return self.shape[0]

    def indices(self) -> Iterator[Index]:
        """All indices of the view in row-major order."""
        return iter(np.ndindex(*self.shape))

    def __iter__(self):
        for index in np.ndindex(*self.shape):
            yield self._get(index)

    def __repr__(self):
        return f"{type(self).__name__}(shape={self.shape}, dtype={self.dtype})"


def element_at(parent, color_type: type[ColorBase], index: Index) -> ColorBase:
    """Read one color from an array of colors."""
    if isinstance(parent, np.ndarray):
        return color_type.from_record(parent[index])
    return parent[index]


def store_element(parent, index: Index, color: ColorBase) -> None:
    """Write one color into an array of colors."""
    if isinstance(parent, np.ndarray):
        parent[index] = color.record()
    else:
        parent[index] = color
