import numpy as np
import pytest

from chromaview.colors import RGB, BGR, RGBA, ARGB, Gray, GrayA, HSV, HSVA, HSL, convert


def test_same_type_is_returned_unchanged():
    c = RGB[np.uint8](1, 2, 3)
    assert convert(RGB[np.uint8], c) is c


def test_memory_order_variants_keep_channels():
    c = BGR[np.uint8](1, 2, 3)
    d = convert(RGB[np.uint8], c)
    assert type(d) is RGB[np.uint8]
    assert d.value == (1, 2, 3)


def test_precision_change():
    d = convert(RGB[np.float32], RGB[np.uint8](1, 2, 3))
    assert d.eltype == np.float32
    assert d.value == (1.0, 2.0, 3.0)


def test_partial_target_keeps_source_precision():
    d = convert(BGR, RGB[np.uint16](1, 2, 3))
    assert type(d) is BGR[np.uint16]


def test_adding_and_dropping_alpha():
    a = convert(RGBA[np.uint8], RGB[np.uint8](1, 2, 3))
    assert a.value == (1, 2, 3, 255)
    f = convert(ARGB[np.float32], RGB[np.float32](0.1, 0.2, 0.3))
    assert f.alpha == np.float32(1.0)
    d = convert(RGB[np.uint8], RGBA[np.uint8](1, 2, 3, 4))
    assert d.value == (1, 2, 3)


def test_gray_to_rgb_and_back():
    c = convert(RGB[np.float64], Gray[np.float64](0.5))
    assert c.value == (0.5, 0.5, 0.5)
    g = convert(Gray[np.float64], RGB[np.float64](1.0, 1.0, 1.0))
    assert g.value[0] == pytest.approx(1.0)
    ga = convert(GrayA[np.uint8], Gray[np.uint8](7))
    assert ga.value == (7, 255)


def test_rgb_to_hue_spaces():
    assert convert(HSV[np.float64], RGB[np.float64](1.0, 0.0, 0.0)).value == pytest.approx((0.0, 1.0, 1.0))
    assert convert(HSL[np.float64], RGB[np.float64](0.0, 0.0, 1.0)).value == pytest.approx((240.0, 1.0, 0.5))
    hsva = convert(HSVA[np.float64], RGBA[np.float64](0.0, 1.0, 0.0, 0.5))
    assert hsva.value == pytest.approx((120.0, 1.0, 1.0, 0.5))


def test_hue_spaces_to_rgb_and_gray():
    assert convert(RGB[np.float64], HSV[np.float64](120.0, 1.0, 1.0)).value == pytest.approx((0.0, 1.0, 0.0))
    assert convert(RGB[np.float64], HSL[np.float64](0.0, 1.0, 0.5)).value == pytest.approx((1.0, 0.0, 0.0))
    assert convert(Gray[np.float64], HSV[np.float64](0.0, 0.0, 0.5)).value == pytest.approx((0.5,))


def test_hsv_to_hsl():
    assert convert(HSL[np.float64], HSV[np.float64](0.0, 1.0, 1.0)).value == pytest.approx((0.0, 1.0, 0.5))


def test_hue_conversion_in_integer_precision():
    assert convert(HSV[np.uint8], RGB[np.uint8](255, 0, 0)).value == (0, 255, 255)
    assert convert(RGB[np.uint8], HSV[np.uint8](0, 255, 255)).value == (255, 0, 0)


def test_tuples_and_numbers():
    assert convert(RGB[np.uint8], (1, 2, 3)).value == (1, 2, 3)
    assert convert(RGB[np.uint8], [4, 5, 6]).value == (4, 5, 6)
    assert convert(Gray[np.float32], 0.25).value == (np.float32(0.25),)
    with pytest.raises(ValueError):
        convert(RGB[np.uint8], 1)


def test_records_are_read_by_name():
    img = np.zeros(1, dtype=BGR[np.uint8].dtype)
    img[0] = BGR[np.uint8](1, 2, 3).record()
    assert convert(RGB[np.uint8], img[0]).value == (1, 2, 3)


def test_convert_method():
    c = RGB[np.uint8](1, 2, 3)
    assert c.convert(RGBA[np.uint8]).value == (1, 2, 3, 255)
