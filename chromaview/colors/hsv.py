from typing import ClassVar, Tuple
from ..types.color_types import ColorMode
from .color_base import ColorBase, WithAlpha, build_registry

class HSV(ColorBase):
    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorMode] = "hsv"
    channels:   ClassVar[Tuple[str, ...]] = ("h", "s", "v")
    fields:     ClassVar[Tuple[str, ...]] = ("h", "s", "v")

class HSVA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorMode] = "hsva"
    channels:   ClassVar[Tuple[str, ...]] = ("h", "s", "v", "alpha")
    fields:     ClassVar[Tuple[str, ...]] = ("h", "s", "v", "alpha")


hsv_fields_to_class = build_registry(
    HSV,
    HSVA,
)
