from typing import ClassVar, Tuple
from ..types.color_types import ColorMode
from .color_base import ColorBase, WithAlpha, build_registry


class RGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorMode] = "rgb"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    fields: ClassVar[Tuple[str, ...]] = ("r", "g", "b")


class BGR(ColorBase):
    """RGB stored blue first; still constructed as ``BGR(r, g, b)``."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorMode] = "rgb"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    fields: ClassVar[Tuple[str, ...]] = ("b", "g", "r")
    reinterpretable: ClassVar[bool] = False


class RGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorMode] = "rgba"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "alpha")
    fields: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "alpha")


class BGRA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorMode] = "rgba"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "alpha")
    fields: ClassVar[Tuple[str, ...]] = ("b", "g", "r", "alpha")
    reinterpretable: ClassVar[bool] = False


class ARGB(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorMode] = "rgba"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "alpha")
    fields: ClassVar[Tuple[str, ...]] = ("alpha", "r", "g", "b")
    reinterpretable: ClassVar[bool] = False


class ABGR(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorMode] = "rgba"
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "alpha")
    fields: ClassVar[Tuple[str, ...]] = ("alpha", "b", "g", "r")
    reinterpretable: ClassVar[bool] = False


rgb_fields_to_class = build_registry(
    RGB,
    BGR,
    RGBA,
    BGRA,
    ARGB,
    ABGR,
)
