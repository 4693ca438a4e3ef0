import numpy as np
import pytest

from chromaview.colors import RGB, BGR, RGBA, Gray, color_type_of
from chromaview.errors import ChannelCountMismatch, DimensionMismatch, OutOfBoundsError
from chromaview.views import ChannelView, ColorView


def test_shape_and_channel_order(rgb_2x2):
    view = ChannelView(rgb_2x2)
    assert view.shape == (3, 2, 2)
    assert view.ndim == 3
    assert view.size == 12
    assert view.dtype == np.uint8
    assert view[0, 0, 0] == 1
    assert view[1, 0, 0] == 2
    assert view[2, 0, 0] == 3
    assert view[0, 0, 1] == 4
    assert view[2, 1, 1] == 12


def test_write_changes_one_channel_of_one_color(rgb_2x2):
    view = ChannelView(rgb_2x2)
    view[0, 0, 0] = 99
    assert tuple(rgb_2x2[0, 0]) == (99, 2, 3)
    assert tuple(rgb_2x2[0, 1]) == (4, 5, 6)
    assert tuple(rgb_2x2[1, 0]) == (7, 8, 9)
    assert view[0, 0, 0] == 99


def test_memory_order_does_not_change_channel_order(bgr_2x2):
    view = ChannelView(bgr_2x2)
    assert [view[k, 0, 0] for k in range(3)] == [1, 2, 3]
    view[0, 1, 1] = 50
    assert bgr_2x2[1, 1]["r"] == 50
    assert bgr_2x2[1, 1]["b"] == 12


def test_parent_writes_are_visible(rgb_2x2):
    view = ChannelView(rgb_2x2)
    rgb_2x2[1, 0] = (70, 80, 90)
    assert [view[k, 1, 0] for k in range(3)] == [70, 80, 90]


def test_negative_indices(rgb_2x2):
    view = ChannelView(rgb_2x2)
    assert view[-1, -1, -1] == 12


def test_out_of_bounds_does_not_touch_parent(rgb_2x2):
    view = ChannelView(rgb_2x2)
    before = rgb_2x2.copy()
    with pytest.raises(OutOfBoundsError):
        view[3, 0, 0]
    with pytest.raises(OutOfBoundsError):
        view[0, 2, 0] = 1
    with pytest.raises(IndexError):
        view[0, 0]
    np.testing.assert_array_equal(rgb_2x2, before)


def test_slices_are_rejected(rgb_2x2):
    view = ChannelView(rgb_2x2)
    with pytest.raises(TypeError):
        view[0, :, 0]


def test_numeric_parent_rejected():
    with pytest.raises(TypeError):
        ChannelView(np.zeros((3, 2)))


def test_ndim_check(rgb_2x2):
    assert ChannelView(rgb_2x2, ndim=3).ndim == 3
    with pytest.raises(DimensionMismatch):
        ChannelView(rgb_2x2, ndim=2)


def test_single_channel_is_squeezed(gray_2x3):
    view = ChannelView(gray_2x3)
    assert view.shape == (2, 3)
    assert view[1, 2] == np.float32(0.5)
    # linear indexing walks the view row by row
    assert view[4] == np.float32(0.4)
    view[5] = 0.75
    assert gray_2x3[1, 2]["gray"] == np.float32(0.75)
    with pytest.raises(OutOfBoundsError):
        view[6]


def test_single_channel_without_squeeze(gray_2x3, no_squeeze):
    view = ChannelView(gray_2x3)
    assert view.shape == (1, 2, 3)
    assert view[0, 1, 2] == np.float32(0.5)
    with pytest.raises(IndexError):
        view[4]


def test_multi_channel_rejects_linear_index(rgb_2x2):
    with pytest.raises(IndexError):
        ChannelView(rgb_2x2)[1]


def test_iteration_is_row_major(rgb_2x2):
    view = ChannelView(rgb_2x2)
    assert list(view) == [1, 4, 7, 10, 2, 5, 8, 11, 3, 6, 9, 12]
    assert next(iter(view.indices())) == (0, 0, 0)
    assert len(view) == 3


def test_over_colorview():
    planes = np.arange(12, dtype=np.float32).reshape(3, 2, 2)
    view = ChannelView(ColorView(RGB, planes))
    assert view.shape == (3, 2, 2)
    assert view[1, 1, 0] == planes[1, 1, 0]
    view[2, 0, 1] = -1.0
    assert planes[2, 0, 1] == -1.0


def test_similar_keeps_family(bgr_2x2):
    view = ChannelView(bgr_2x2)
    new = view.similar()
    assert isinstance(new, ChannelView)
    assert new.shape == (3, 2, 2)
    assert color_type_of(new.parent) is BGR[np.uint8]
    assert new[0, 0, 0] == 0

    f = view.similar(np.float32, (3, 5))
    assert color_type_of(f.parent) is BGR[np.float32]
    assert f.parent.shape == (5,)
    assert f.shape == (3, 5)


def test_similar_checks_channel_count(rgb_2x2):
    view = ChannelView(rgb_2x2)
    with pytest.raises(ChannelCountMismatch):
        view.similar(np.uint8, (4, 2, 2))
    with pytest.raises(DimensionMismatch):
        view.similar(np.uint8, (2, 2))
    with pytest.raises(TypeError):
        view.similar(RGBA)


def test_similar_single_channel(gray_2x3):
    new = ChannelView(gray_2x3).similar(shape=(4,))
    assert new.shape == (4,)
    assert color_type_of(new.parent) is Gray[np.float32]
