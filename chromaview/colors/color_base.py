from __future__ import annotations
from typing import ClassVar, Dict, Tuple, Callable
import warnings
from abc import ABC
from boundednumbers.functions import clamp
import numpy as np
from ..types.color_types import ColorMode, Scalar, is_hue_space, is_numeric_dtype


def _saturate(value: Scalar, eltype: np.dtype) -> Scalar:
    """Cast a channel value to ``eltype``, clamping into the integer range first."""
    if eltype.kind in ("i", "u"):
        info = np.iinfo(eltype)
        clamped = clamp(value, info.min, info.max)
        if clamped != value:
            warnings.warn(
                f"channel value {value!r} saturated to {clamped} for dtype {eltype}",
                RuntimeWarning,
                stacklevel=4,
            )
        value = clamped
    return eltype.type(value)


class ColorBase:
    """
    Immutable color value with a fixed number of channels.

    Subclasses declare their channels twice: ``channels`` in constructor
    (logical) order and ``fields`` in memory order. The two differ for types
    like BGR, whose memory layout is blue-green-red while the constructor
    still takes red, green, blue.

    A subclass without precision (``RGB``) is partially specified. Indexing
    it with a numeric dtype (``RGB[np.uint8]``) yields the concrete subclass,
    which also knows the numpy structured dtype used to store it in arrays.
    Calling a partially specified class infers the precision from its
    arguments.
    """
    __slots__ = ('_value',)

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorMode]
    channels:   ClassVar[Tuple[str, ...]]
    fields:     ClassVar[Tuple[str, ...]]
    # memory order equals logical order, so arrays of this type may be
    # reread bit-for-bit as arrays of numbers
    reinterpretable: ClassVar[bool] = True
    eltype:     ClassVar[np.dtype | None] = None
    dtype:      ClassVar[np.dtype | None] = None
    _field_order: ClassVar[Tuple[int, ...]]
    _concrete:  ClassVar[Dict[np.dtype, type]]
    _is_frozen: bool = False   # class-level default, set per instance once frozen
    convert: Callable[[ColorBase, type], ColorBase]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if 'fields' in cls.__dict__:
            if sorted(cls.fields) != sorted(cls.channels):
                raise TypeError(f"{cls.__name__}: fields {cls.fields} do not match channels {cls.channels}")
            cls._field_order = tuple(cls.channels.index(name) for name in cls.fields)
            cls._concrete = {}

    def __class_getitem__(cls, eltype) -> type:
        if cls.eltype is not None:
            raise TypeError(f"{cls.__qualname__} already has precision {cls.eltype}")
        if not hasattr(cls, 'channels'):
            raise TypeError(f"{cls.__name__} is abstract and has no precision")
        eltype = np.dtype(eltype)
        if not is_numeric_dtype(eltype):
            raise TypeError(f"color channels must be numeric, got {eltype}")
        concrete = cls._concrete.get(eltype)
        if concrete is None:
            concrete = type(cls)(cls.__name__, (cls,), {
                'eltype': eltype,
                'dtype': np.dtype([(name, eltype) for name in cls.fields]),
                '__module__': cls.__module__,
                '__qualname__': f"{cls.__qualname__}[{eltype}]",
            })
            cls._concrete[eltype] = concrete
        return concrete

    def __new__(cls, *values: Scalar):
        if cls.eltype is None:
            if not hasattr(cls, 'channels'):
                raise TypeError(f"{cls.__name__} cannot be instantiated")
            if not values:
                raise TypeError(f"{cls.__name__} needs channel values to infer its precision")
            cls = cls[np.result_type(*values)]
        return object.__new__(cls)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *values: Scalar) -> None:
        if len(values) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channel values, got {len(values)}"
            )
        eltype = self.eltype
        self._value = tuple(_saturate(v, eltype) for v in values)

        # no more writes after this
        super().__setattr__('_is_frozen', True)

    def __getattr__(self, name):
        # named channel access: rgb.r, graya.alpha, hsv.h ...
        channels = getattr(type(self), 'channels', ())
        if name in channels:
            return self._value[channels.index(name)]
        raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        """Channel values in constructor order."""
        return self._value

    @property
    def comp1(self) -> Scalar:
        return self._value[0]

    @property
    def comp2(self) -> Scalar:
        return self._value[1]

    @property
    def comp3(self) -> Scalar:
        return self._value[2]

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    @classmethod
    def base_type(cls) -> type[ColorBase]:
        """The color family without precision (``RGB`` for ``RGB[uint8]``)."""
        return cls.__bases__[0] if cls.eltype is not None else cls

    @classmethod
    def is_alpha_channel(cls, index: int) -> bool:
        return cls.mode.endswith('a') and index == cls.num_channels - 1

    # ------------------ RECORDS ------------------
    @classmethod
    def from_record(cls, record) -> ColorBase:
        """Build a color from one element of a structured array."""
        return cls(*(record[name] for name in cls.channels))

    def record(self) -> Tuple[Scalar, ...]:
        """Channel values in memory (field) order, ready to store in a structured array."""
        return tuple(self._value[i] for i in self._field_order)

    def __eq__(self, other):
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.base_type() is other.base_type() and self._value == other._value

    def __hash__(self):
        return hash((self.base_type(), self._value))

    def __repr__(self):
        values = ", ".join(repr(v.item()) for v in self._value)
        return f"{type(self).__qualname__}({values})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* logical channel, whatever its memory position.
    """

    num_channels: ClassVar[int]
    mode: ClassVar[ColorMode]
    value: Tuple[Scalar, ...]

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: Scalar):
        """Return a new instance with the alpha channel replaced."""
        return self.__class__(*self.value[:-1], alpha)  # type: ignore


def build_registry(*classes: type[ColorBase]):
    return {
        cls.fields: cls
        for cls in classes
    }
