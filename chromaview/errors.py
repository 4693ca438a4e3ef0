"""Exceptions raised by the view layer.

Each one derives from the builtin a caller would naturally catch, so
``except ValueError`` keeps working for shape problems and ``except
IndexError`` for bounds problems.
"""


class DimensionMismatch(ValueError):
    """Array shape or rank does not fit the requested view."""


class ChannelCountMismatch(DimensionMismatch):
    """Leading extent of a requested shape disagrees with the color's channel count."""


class OutOfBoundsError(IndexError):
    """Index outside the shape of an array or view."""

    def __init__(self, index, shape, owner: str = "array"):
        self.index = tuple(index)
        self.shape = tuple(shape)
        super().__init__(
            f"index {self.index} is out of bounds for {owner} of shape {self.shape}"
        )


class UnresolvedColorType(TypeError):
    """No concrete color type could be determined."""
