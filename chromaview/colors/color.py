from __future__ import annotations
from typing import Any, Optional, Tuple
import numpy as np
from .color_base import ColorBase
from .gray import gray_fields_to_class
from .rgb import rgb_fields_to_class
from .hsv import hsv_fields_to_class
from .hsl import hsl_fields_to_class
from .conversions import FROM_RGB, TO_RGB
from ..config import opaque_value
from ..errors import UnresolvedColorType
from ..types.color_types import Scalar, is_hue_space, is_numeric_dtype

unified_fields_to_class: dict[Tuple[str, ...], type[ColorBase]] = {
    **gray_fields_to_class,
    **rgb_fields_to_class,
    **hsv_fields_to_class,
    **hsl_fields_to_class,
}

# Rec. 601 luma
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def is_color_type(obj: Any) -> bool:
    """True for color classes that declare channels (``RGB``, ``RGB[np.uint8]``...)."""
    return isinstance(obj, type) and issubclass(obj, ColorBase) and hasattr(obj, 'channels')


def color_type_of_dtype(dtype) -> Optional[type[ColorBase]]:
    """
    Map a numpy dtype to the concrete color type stored with it.

    Returns None for numeric dtypes. Structured dtypes are matched on their
    field names; all fields must share one numeric dtype.
    """
    dtype = np.dtype(dtype)
    if dtype.names is None:
        return None
    cls = unified_fields_to_class.get(dtype.names)
    if cls is None:
        raise UnresolvedColorType(f"no color type is stored with fields {dtype.names}")
    eltypes = {dtype.fields[name][0] for name in dtype.names}
    if len(eltypes) != 1:
        raise UnresolvedColorType(f"{cls.__name__} fields must share one dtype, got {dtype}")
    return cls[eltypes.pop()]


def color_type_of(array) -> Optional[type[ColorBase]]:
    """Concrete color type of an array of colors, None for arrays of numbers."""
    if isinstance(array, ColorBase):
        return type(array)
    dtype = getattr(array, 'dtype', None)
    if dtype is None:
        raise TypeError(f"expected an array, got {type(array).__name__}")
    return color_type_of_dtype(dtype)


def is_packed(dtype: np.dtype) -> bool:
    """True if the structured dtype stores its fields back to back without padding."""
    itemsize = dtype.fields[dtype.names[0]][0].itemsize
    if dtype.itemsize != itemsize * len(dtype.names):
        return False
    return all(dtype.fields[name][1] == i * itemsize for i, name in enumerate(dtype.names))


def resolve_color_type(color_type: Any, eltype) -> type[ColorBase]:
    """
    Complete a possibly partial color type with the precision of an array.

    ``resolve_color_type(RGB, np.uint8)`` is ``RGB[np.uint8]``; a concrete type
    is returned unchanged.
    """
    if not is_color_type(color_type):
        raise UnresolvedColorType(
            f"{color_type!r} is not a color type; specify the desired colorspace, e.g. RGB"
        )
    if color_type.eltype is not None:
        return color_type
    if eltype is None or not is_numeric_dtype(eltype):
        raise UnresolvedColorType(
            f"cannot give {color_type.__name__} the precision of non-numeric dtype {eltype}"
        )
    return color_type[eltype]


def _to_unit(value: Scalar, eltype: np.dtype) -> float:
    return float(value) / float(opaque_value(eltype))


def _from_unit(value: float, eltype: np.dtype) -> Scalar:
    scale = float(opaque_value(eltype))
    if eltype.kind in ("i", "u"):
        return round(value * scale)
    return value * scale


def _hue_space(mode: str) -> Optional[str]:
    """``"hsv"`` or ``"hsl"`` for hue modes (alpha forms included), else None."""
    return mode.rstrip('a') if is_hue_space(mode) else None


def _remap_channels(color: ColorBase, target: type[ColorBase]) -> Tuple[Scalar, ...]:
    """
    Match the channels of ``color`` to the channel names of ``target``.

    Hue spaces go through RGB. Values stay in the precision of ``color``;
    hue is always in degrees.
    """
    source = dict(zip(color.channels, color.value))
    wanted = target.channels
    eltype = color.eltype
    src_space = color.mode.rstrip('a') if color.has_hue else None
    dst_space = _hue_space(target.mode)
    if src_space is not None and src_space != dst_space:
        h, s, third = color.value[:3]
        rgb = TO_RGB[src_space](float(h), _to_unit(s, eltype), _to_unit(third, eltype))
        source = {name: v for name, v in source.items() if name == 'alpha'}
        source.update(zip('rgb', (_from_unit(c, eltype) for c in rgb)))
    if 'gray' in wanted and 'gray' not in source and {'r', 'g', 'b'} <= source.keys():
        source['gray'] = sum(w * float(source[c]) for w, c in zip(LUMA_WEIGHTS, 'rgb'))
    if 'gray' in source:
        for c in 'rgb':
            source.setdefault(c, source['gray'])
    if dst_space is not None and dst_space != src_space and {'r', 'g', 'b'} <= source.keys():
        h, s, third = FROM_RGB[dst_space](*(_to_unit(source[c], eltype) for c in 'rgb'))
        source['h'] = round(h) if eltype.kind in ('i', 'u') else h
        source['s'] = _from_unit(s, eltype)
        source[dst_space[-1]] = _from_unit(third, eltype)
    if 'alpha' in wanted and 'alpha' not in source:
        source['alpha'] = opaque_value(target.eltype)
    missing = [c for c in wanted if c not in source]
    if missing:
        raise TypeError(
            f"cannot convert {type(color).__qualname__} to {target.__qualname__}: "
            f"no source for channels {missing}"
        )
    return tuple(source[c] for c in wanted)


def convert(color_type: type[ColorBase], value: Any) -> ColorBase:
    """
    Convert ``value`` to ``color_type``.

    Accepts colors (precision change, memory-order variants such as BGR to RGB,
    adding or dropping alpha, gray and RGB, HSV and HSL through RGB),
    structured-array records, tuples of
    channel values in constructor order and, for single-channel types, bare
    numbers. A partially specified ``color_type`` keeps the precision of a
    color ``value``.
    """
    if isinstance(value, ColorBase):
        if color_type.eltype is None:
            color_type = color_type[value.eltype]
        if type(value) is color_type:
            return value
        return color_type(*_remap_channels(value, color_type))
    if isinstance(value, np.void) and value.dtype.names is not None:
        return convert(color_type, color_type_of_dtype(value.dtype).from_record(value))
    if isinstance(value, (tuple, list, np.ndarray)):
        return color_type(*value)
    return color_type(value)


def color_convert(self: ColorBase, to_type: type[ColorBase]) -> ColorBase:
    """Convert this color to another color type (see ``convert``)."""
    return convert(to_type, self)


ColorBase.convert = color_convert
