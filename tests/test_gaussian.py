import numpy as np
import pytest

from cvfirst.gaussian import apply_gaussian, compute_kernel, gaussian_pyramid, pad_image
from cvfirst.image import Image, from_array, to_array


def test_kernel_is_normalised_and_symmetric():
    kernel = compute_kernel(5, 1.5)
    assert len(kernel) == 5
    assert sum(kernel) == pytest.approx(1.0, abs=1e-6)
    assert kernel == kernel[::-1]
    assert max(kernel) == kernel[2]


def test_single_tap_kernel_is_one():
    assert compute_kernel(1, 3.0) == [1.0]


def test_kernel_size_out_of_range():
    with pytest.raises(ValueError):
        compute_kernel(256, 1.0)


def test_pad_image_places_original_in_center():
    arr = np.arange(1, 13, dtype=np.uint8).reshape(2, 2, 3)
    padded = pad_image(from_array(arr), 2)
    assert (padded.rows, padded.cols, padded.channels) == (6, 6, 3)
    out = to_array(padded)
    assert np.array_equal(out[2:4, 2:4], arr)
    out[2:4, 2:4] = 0
    assert not np.any(out)


def test_pad_image_rejects_negative_padding():
    with pytest.raises(ValueError):
        pad_image(Image(2, 2, 3), -1)


def test_single_tap_blur_is_identity():
    arr = np.arange(4 * 5 * 3, dtype=np.uint8).reshape(4, 5, 3)
    img = from_array(arr)
    assert apply_gaussian(img, 1, 1.0) == img


def test_blur_of_impulse_is_symmetric():
    arr = np.zeros((5, 5), dtype=np.uint8)
    arr[2, 2] = 255
    out = to_array(apply_gaussian(from_array(arr), 3, 1.0))
    assert out.shape == (5, 5)
    assert out[2, 1] == out[2, 3] == out[1, 2] == out[3, 2]
    assert out[2, 2] == out.max()
    assert out[2, 2] < 255
    assert out[0, 0] == 0


def test_blur_stays_within_input_range():
    rng = np.random.default_rng(7)
    arr = rng.integers(0, 256, size=(8, 9, 3), dtype=np.uint8)
    out = to_array(apply_gaussian(from_array(arr), 5, 2.0))
    assert out.shape == arr.shape
    assert out.max() <= arr.max()


def test_even_kernel_rejected():
    with pytest.raises(ValueError):
        apply_gaussian(Image(3, 3, 3), 4, 1.0)


def test_pyramid_of_empty_image_is_empty():
    assert gaussian_pyramid(Image()) == []


def test_small_image_pyramid_has_one_level():
    img = from_array(np.full((32, 32, 3), 9, dtype=np.uint8))
    levels = gaussian_pyramid(img)
    assert levels == [img]


def test_pyramid_halves_until_small():
    img = from_array(np.full((128, 64, 3), 100, dtype=np.uint8))
    levels = gaussian_pyramid(img)
    assert [(level.rows, level.cols) for level in levels] == [(128, 64), (64, 32), (32, 16)]
    assert levels[0] == img
    assert all(level.channels == 3 for level in levels)


def test_pyramid_rejects_odd_level():
    img = from_array(np.zeros((70, 70), dtype=np.uint8))
    with pytest.raises(ValueError):
        gaussian_pyramid(img)