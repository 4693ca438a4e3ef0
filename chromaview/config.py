"""
Package-wide configuration.

``SQUEEZE1`` decides whether single-channel colors (``Gray``) use an array
dimension of their own. When True a ``Gray`` image of shape ``(m, n)`` has a
channel view of shape ``(m, n)``; when False the channel view is
``(1, m, n)``. Every view reads this one constant, so two views over the same
data always agree on their shapes.
"""
import numpy as np

SQUEEZE1 = True


def opaque_value(eltype: np.dtype):
    """Return the fully opaque alpha value for the given channel dtype."""
    eltype = np.dtype(eltype)
    if eltype.kind in ("i", "u"):
        return np.iinfo(eltype).max
    if eltype.kind == "b":
        return True
    return 1.0
