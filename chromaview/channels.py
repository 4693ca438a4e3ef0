"""
Channel access for single colors.

``decompose`` and ``set_channel`` work on one color value; ``get_channels``
and ``set_channels`` move the channels of one color between a numeric array
(channel axis first) and a color value. Channel indices are 0-based and follow
constructor order, so channel 0 of a ``BGR`` is red even though blue is
stored first.
"""
from __future__ import annotations
from typing import Tuple
from .colors.color_base import ColorBase
from .types.color_types import Index, Scalar


def decompose(color: ColorBase) -> Tuple[Scalar, ...]:
    """
    Return the channels of ``color`` in constructor order.

    Two-channel colors give ``(comp1, alpha)``, four-channel colors give
    ``(comp1, comp2, comp3, alpha)``.
    """
    match color.num_channels:
        case 1:
            return (color.comp1,)
        case 2:
            return (color.comp1, color.alpha)
        case 3:
            return (color.comp1, color.comp2, color.comp3)
        case 4:
            return (color.comp1, color.comp2, color.comp3, color.alpha)
    raise ValueError(f"unsupported number of channels: {color.num_channels}")


def set_channel(color: ColorBase, value: Scalar, index: int) -> ColorBase:
    """
    Return a copy of ``color`` with channel ``index`` replaced by ``value``.

    Colors are immutable, so this builds a new value of the same concrete
    type; ``index`` is interpreted in constructor order.
    """
    n = color.num_channels
    if not 0 <= index < n:
        raise IndexError(f"channel {index} out of range for {n}-channel {type(color).__qualname__}")
    C = type(color)
    match n:
        case 1:
            return C(value)
        case 2:
            return C(value if index == 0 else color.comp1,
                     value if index == 1 else color.alpha)
        case 3:
            return C(value if index == 0 else color.comp1,
                     value if index == 1 else color.comp2,
                     value if index == 2 else color.comp3)
        case 4:
            return C(value if index == 0 else color.comp1,
                     value if index == 1 else color.comp2,
                     value if index == 2 else color.comp3,
                     value if index == 3 else color.alpha)
    raise ValueError(f"unsupported number of channels: {n}")


def get_channels(parent, color_type: type[ColorBase], index: Index, squeeze: bool) -> Tuple[Scalar, ...]:
    """Gather the channels of the color at ``index`` from the numeric array ``parent``."""
    n = color_type.num_channels
    if n == 1 and squeeze:
        return (parent[index],)
    return tuple(parent[(k,) + index] for k in range(n))


def set_channels(parent, color: ColorBase, index: Index, squeeze: bool) -> ColorBase:
    """
    Distribute the channels of ``color`` along ``parent[:, *index]``.

    Parents that can refuse some channels (``StackedView``) check all of them
    first, so a rejected color leaves ``parent`` untouched.
    """
    values = decompose(color)
    if len(values) == 1 and squeeze:
        parent[index] = values[0]
        return color
    check = getattr(parent, "check_channels", None)
    if check is not None:
        check(values)
    for k, v in enumerate(values):
        parent[(k,) + index] = v
    return color
