from .base import ArrayView
from .channelview import ChannelView
from .colorview import ColorView
from .stacked import StackedView, ZeroArray, zeroarray

__all__ = ['ArrayView', 'ChannelView', 'ColorView', 'StackedView', 'ZeroArray', 'zeroarray']
