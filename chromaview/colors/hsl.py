from typing import ClassVar, Tuple
from ..types.color_types import ColorMode
from .color_base import ColorBase, WithAlpha, build_registry

class HSL(ColorBase):
    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorMode] = "hsl"
    channels:   ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    fields:     ClassVar[Tuple[str, ...]] = ("h", "s", "l")

class HSLA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorMode] = "hsla"
    channels:   ClassVar[Tuple[str, ...]] = ("h", "s", "l", "alpha")
    fields:     ClassVar[Tuple[str, ...]] = ("h", "s", "l", "alpha")


hsl_fields_to_class = build_registry(
    HSL,
    HSLA,
)
