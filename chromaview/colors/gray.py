from typing import ClassVar, Tuple
from ..types.color_types import ColorMode
from .color_base import ColorBase, WithAlpha, build_registry


class Gray(ColorBase):
    num_channels: ClassVar[int] = 1
    mode: ClassVar[ColorMode] = "gray"
    channels: ClassVar[Tuple[str, ...]] = ("gray",)
    fields: ClassVar[Tuple[str, ...]] = ("gray",)


class GrayA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 2
    mode: ClassVar[ColorMode] = "graya"
    channels: ClassVar[Tuple[str, ...]] = ("gray", "alpha")
    fields: ClassVar[Tuple[str, ...]] = ("gray", "alpha")


class AGray(ColorBase, WithAlpha):
    """Gray with alpha, alpha stored first."""
    num_channels: ClassVar[int] = 2
    mode: ClassVar[ColorMode] = "graya"
    channels: ClassVar[Tuple[str, ...]] = ("gray", "alpha")
    fields: ClassVar[Tuple[str, ...]] = ("alpha", "gray")
    reinterpretable: ClassVar[bool] = False


gray_fields_to_class = build_registry(
    Gray,
    GrayA,
    AGray,
)
