"""Separable Gaussian blur, zero padding and Gaussian image pyramids."""

from __future__ import annotations

import math

import numpy as np

from cvfirst.image import SUPPORTED_CHANNELS, Image, from_array, to_array

PYRAMID_MIN_SIZE = 32
PYRAMID_KERNEL_SIZE = 3
PYRAMID_STD_DEV = 1.6


def compute_kernel(kernel_size: int, std_dev: float) -> list[float]:
    """Return a normalised 1-D Gaussian kernel of ``kernel_size`` taps."""
    if not 0 <= kernel_size <= 255:
        raise ValueError("kernel size must be between 0 and 255")
    denominator = 2 * std_dev ** 2
    first = -(kernel_size // 2)
    weights = np.array(
        [math.exp(-((first + i) ** 2) / denominator) for i in range(kernel_size)],
        dtype=np.float32,
    )
    weights /= weights.sum(dtype=np.float32)
    return [float(w) for w in weights]


def _channels_last(img: Image) -> np.ndarray:
    return np.atleast_3d(to_array(img))


def pad_image(img: Image, pad_by: int) -> Image:
    """Surround the image with ``pad_by`` black pixels on every side."""
    if pad_by < 0:
        raise ValueError("padding must not be negative")
    if img.channels not in SUPPORTED_CHANNELS:
        return Image(img.rows + 2 * pad_by, img.cols + 2 * pad_by, img.channels)
    padded = np.pad(_channels_last(img), ((pad_by, pad_by), (pad_by, pad_by), (0, 0)))
    return from_array(padded)


def _convolve_axis(values: np.ndarray, kernel: np.ndarray, axis: int) -> np.ndarray:
    pad = len(kernel) // 2
    widths = [(0, 0)] * 3
    widths[axis] = (pad, pad)
    padded = np.pad(values.astype(np.float32), widths)
    length = values.shape[axis]
    acc = np.zeros(values.shape, dtype=np.float32)
    for offset, weight in enumerate(kernel):
        acc += weight * np.take(padded, np.arange(offset, offset + length), axis=axis)
    return np.clip(np.trunc(acc), 0, 255).astype(np.uint8)


def apply_gaussian(img: Image, kernel_size: int, std_dev: float) -> Image:
    """Blur with a separable Gaussian: a horizontal pass, then a vertical pass."""
    if kernel_size % 2 == 0:
        raise ValueError("kernel size must be odd")
    kernel = np.asarray(compute_kernel(kernel_size, std_dev), dtype=np.float32)
    if img.is_empty() or img.channels not in SUPPORTED_CHANNELS:
        return img.copy()
    horizontal = _convolve_axis(_channels_last(img), kernel, axis=1)
    return from_array(_convolve_axis(horizontal, kernel, axis=0))


def gaussian_pyramid(img: Image) -> list[Image]:
    """Return successive blurred, half-size levels until both sides are at most 32.

    The first level is the input itself. A level that must be halved while
    one of its sides is odd raises ValueError.
    """
    if img.is_empty():
        return []
    levels = [img.copy()]
    while levels[-1].rows > PYRAMID_MIN_SIZE or levels[-1].cols > PYRAMID_MIN_SIZE:
        current = levels[-1]
        if current.rows % 2 or current.cols % 2:
            raise ValueError(
                f"cannot halve a {current.rows}x{current.cols} level: sides must be even"
            )
        if current.channels not in SUPPORTED_CHANNELS:
            levels.append(Image(current.rows // 2, current.cols // 2, current.channels))
            continue
        blurred = apply_gaussian(current, PYRAMID_KERNEL_SIZE, PYRAMID_STD_DEV)
        levels.append(from_array(_channels_last(blurred)[::2, ::2]))
    return levels