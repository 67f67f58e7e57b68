"""Interleaved 8-bit image container and conversions to and from numpy arrays."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

import numpy as np

T = TypeVar("T")

SUPPORTED_CHANNELS = (1, 3)


@dataclass
class Point(Generic[T]):
    """A 2-D coordinate with the origin in the top-left corner."""

    x: T = 0
    y: T = 0


@dataclass(frozen=True)
class Pixel:
    """One pixel; for single-channel images only ``r`` carries the intensity."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class Image:
    """An image stored as one contiguous, interleaved buffer of bytes.

    Pixels start black. Only 1- and 3-channel images are read or written
    pixel by pixel; other channel counts read as black and ignore writes.
    """

    rows: int = 0
    cols: int = 0
    channels: int = 0
    pixels: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0 or self.channels < 0:
            raise ValueError("image dimensions must not be negative")
        self.pixels = bytearray(self.rows * self.cols * self.channels)

    def _offset(self, y: int, x: int) -> int:
        idx = (x + self.cols * y) * self.channels
        if idx < 0 or idx + self.channels > len(self.pixels):
            raise IndexError(f"pixel ({y}, {x}) is outside the image buffer")
        return idx

    def get_pixel(self, y: int, x: int) -> Pixel:
        """Return the pixel at row ``y``, column ``x``."""
        if self.channels == 3:
            idx = self._offset(y, x)
            return Pixel(*self.pixels[idx:idx + 3])
        if self.channels == 1:
            return Pixel(r=self.pixels[self._offset(y, x)])
        return Pixel()

    def set_pixel(self, y: int, x: int, pixel: Pixel) -> None:
        """Write ``pixel`` at row ``y``, column ``x``."""
        if self.channels == 3:
            idx = self._offset(y, x)
            self.pixels[idx:idx + 3] = bytes((pixel.r, pixel.g, pixel.b))
        elif self.channels == 1:
            self.pixels[self._offset(y, x)] = pixel.r

    def is_empty(self) -> bool:
        """True when the image holds no pixel data."""
        return not self.pixels

    def copy(self) -> Image:
        """Return an independent copy of the image."""
        duplicate = Image(self.rows, self.cols, self.channels)
        duplicate.pixels[:] = self.pixels
        return duplicate


def to_array(img: Image) -> np.ndarray:
    """Return the image as a uint8 array: (rows, cols) for one channel, else (rows, cols, channels)."""
    data = np.frombuffer(bytes(img.pixels), dtype=np.uint8)
    if img.channels == 1:
        return data.reshape(img.rows, img.cols).copy()
    return data.reshape(img.rows, img.cols, img.channels).copy()


def from_array(array: np.ndarray) -> Image:
    """Build an image from a uint8 array of shape (rows, cols) or (rows, cols, channels)."""
    arr = np.asarray(array)
    if arr.dtype != np.uint8:
        raise TypeError(f"expected a uint8 array, got {arr.dtype}")
    if arr.ndim == 2:
        arr = arr[:, :, np.newaxis]
    if arr.ndim != 3:
        raise ValueError(f"expected a 2-D or 3-D array, got {arr.ndim} dimensions")
    rows, cols, channels = arr.shape
    img = Image(rows, cols, channels)
    img.pixels[:] = np.ascontiguousarray(arr).tobytes()
    return img