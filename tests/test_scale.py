import numpy as np
import pytest

from cvfirst.image import Image, from_array, to_array
from cvfirst.scale import InterpolationMethod, scale


def _gray(rows, cols):
    values = np.arange(rows * cols) % 250 + 1
    return values.astype(np.uint8).reshape(rows, cols)


def _repeat(arr, factor):
    return np.repeat(np.repeat(arr, factor, axis=0), factor, axis=1)


@pytest.mark.parametrize("factor", [1, 2, 3])
def test_nearest_on_gray_repeats_pixels(factor):
    arr = _gray(4, 5)
    out = scale(from_array(arr), InterpolationMethod.NEAREST_NEIGHBOUR, factor)
    np.testing.assert_array_equal(to_array(out), _repeat(arr, factor))


def test_nearest_on_colour_writes_correct_value_or_leaves_black():
    arr = (np.arange(3 * 4 * 3) % 200 + 20).astype(np.uint8).reshape(3, 4, 3)
    out = scale(from_array(arr), InterpolationMethod.NEAREST_NEIGHBOUR, 2)
    result = to_array(out)
    expected = _repeat(arr, 2)
    assert result.shape == expected.shape
    matches = (result == expected).all(axis=-1)
    black = (result == 0).all(axis=-1)
    assert np.all(matches | black)
    assert matches.sum() > 0


def test_bilinear_factor_one_is_identity():
    arr = _gray(5, 6)
    out = scale(from_array(arr), InterpolationMethod.BILINEAR, 1)
    np.testing.assert_array_equal(to_array(out), arr)


def test_bilinear_keeps_source_pixels_on_grid():
    arr = _gray(4, 4)
    out = scale(from_array(arr), InterpolationMethod.BILINEAR, 2)
    result = to_array(out)
    assert result.shape == (8, 8)
    np.testing.assert_array_equal(result[::2, ::2], arr)


def test_bilinear_never_exceeds_source_maximum():
    arr = _gray(6, 7)
    out = scale(from_array(arr), InterpolationMethod.BILINEAR, 3)
    assert to_array(out).max() <= arr.max()


def test_factor_zero_returns_copy():
    img = from_array(_gray(3, 3))
    out = scale(img, InterpolationMethod.BILINEAR, 0)
    assert out.pixels == img.pixels
    assert out.pixels is not img.pixels


def test_empty_image_gives_empty_image():
    out = scale(Image(), InterpolationMethod.NEAREST_NEIGHBOUR, 2)
    assert out.is_empty()
    assert (out.rows, out.cols, out.channels) == (0, 0, 0)


@pytest.mark.parametrize("factor", [-1, 256])
def test_factor_out_of_range_raises(factor):
    with pytest.raises(ValueError):
        scale(from_array(_gray(2, 2)), InterpolationMethod.BILINEAR, factor)


def test_unknown_method_raises():
    with pytest.raises(ValueError):
        scale(from_array(_gray(2, 2)), "cubic", 2)


def test_method_accepts_value_string():
    img = from_array(_gray(3, 3))
    assert scale(img, "nearest", 2).pixels == scale(
        img, InterpolationMethod.NEAREST_NEIGHBOUR, 2
    ).pixels


def test_unsupported_channels_give_black_scaled_image():
    arr = np.full((2, 3, 2), 50, dtype=np.uint8)
    out = scale(from_array(arr), InterpolationMethod.BILINEAR, 2)
    assert (out.rows, out.cols, out.channels) == (4, 6, 2)
    assert not any(out.pixels)