"""Point-wise intensity adjustments: brightness, inversion and contrast."""

from __future__ import annotations

import numpy as np

from cvfirst.image import SUPPORTED_CHANNELS, Image, from_array, to_array


def _to_uint8(values: np.ndarray) -> np.ndarray:
    return np.clip(values, 0, 255).astype(np.uint8)


def adjust_brightness(img: Image, beta: int) -> Image:
    """Add ``beta`` to every channel value, clamping to 0..255."""
    if beta == 0 or img.channels not in SUPPORTED_CHANNELS:
        return img.copy()
    shifted = to_array(img).astype(np.int64) + int(beta)
    return from_array(_to_uint8(shifted))


def invert(img: Image) -> Image:
    """Return the negative of the image (255 - value)."""
    if img.is_empty():
        return img.copy()
    if img.channels not in SUPPORTED_CHANNELS:
        return Image(img.rows, img.cols, img.channels)
    return from_array(_to_uint8(255 - to_array(img).astype(np.int64)))


def contrast(img: Image, alpha: float) -> Image:
    """Multiply every channel value by ``alpha``, truncating and clamping to 0..255.

    An ``alpha`` of zero leaves the image unchanged.
    """
    if img.is_empty() or alpha == 0:
        return img.copy()
    if img.channels not in SUPPORTED_CHANNELS:
        return Image(img.rows, img.cols, img.channels)
    scaled = np.trunc(to_array(img).astype(np.float32) * np.float32(alpha))
    return from_array(_to_uint8(scaled))