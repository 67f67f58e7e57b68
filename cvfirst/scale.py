"""Uniform integer up-scaling with nearest-neighbour or bilinear interpolation."""

from __future__ import annotations

from enum import Enum

import numpy as np

from cvfirst.image import SUPPORTED_CHANNELS, Image, from_array, to_array


class InterpolationMethod(Enum):
    """How scaled pixel values are taken from the source image."""

    NEAREST_NEIGHBOUR = "nearest"
    BILINEAR = "bilinear"


def _walk(out_rows: int, out_cols: int, channels: int) -> tuple[np.ndarray, np.ndarray]:
    # Positions are derived from the byte offset of each pixel, stepping by the
    # channel count; for multi-channel images this leaves some pixels black.
    offsets = np.arange(out_rows * out_cols, dtype=np.int64) * channels
    return offsets // out_cols, offsets % out_cols


def _nearest(src: np.ndarray, out: np.ndarray, factor: int) -> None:
    rows, cols = src.shape[:2]
    ys, xs = _walk(out.shape[0], out.shape[1], out.shape[2])
    oy, ox = ys // factor, xs // factor
    valid = (oy < rows) & (ox < cols)
    out[ys[valid], xs[valid]] = src[oy[valid], ox[valid]]


def _bilinear(src: np.ndarray, out: np.ndarray, factor: int) -> None:
    rows, cols = src.shape[:2]
    ys, xs = _walk(out.shape[0], out.shape[1], out.shape[2])
    fx = xs.astype(np.float32) / np.float32(factor)
    fy = ys.astype(np.float32) / np.float32(factor)
    valid = (fx < cols) & (fy < rows)
    ys, xs, fx, fy = ys[valid], xs[valid], fx[valid], fy[valid]

    ulx = np.floor(fx).astype(np.int64)
    uly = np.floor(fy).astype(np.int64)
    lrx = np.minimum(np.ceil(fx).astype(np.int64), cols - 1)
    lry = np.minimum(np.ceil(fy).astype(np.int64), rows - 1)

    a = np.abs(lrx.astype(np.float32) - fx)[:, np.newaxis]
    b = np.abs(lry.astype(np.float32) - fy)[:, np.newaxis]

    ul = src[uly, ulx].astype(np.float32)
    ur = src[uly, lrx].astype(np.float32)
    ll = src[lry, ulx].astype(np.float32)
    lr = src[lry, lrx].astype(np.float32)

    value = (1 - a) * (1 - b) * ul + a * (1 - b) * ur + (1 - a) * b * ll + a * b * lr
    out[ys, xs] = np.clip(np.trunc(value), 0, 255).astype(np.uint8)


def scale(img: Image, method: InterpolationMethod | str, factor: int) -> Image:
    """Enlarge the image by the integer ``factor`` (0..255) on both axes.

    An empty image gives an empty image; a factor of zero returns a copy.
    """
    if not 0 <= factor <= 255:
        raise ValueError("scale factor must be between 0 and 255")
    method = InterpolationMethod(method)
    if img.is_empty():
        return Image()
    if factor == 0:
        return img.copy()
    out_rows, out_cols = img.rows * factor, img.cols * factor
    if img.channels not in SUPPORTED_CHANNELS:
        return Image(out_rows, out_cols, img.channels)
    src = np.atleast_3d(to_array(img))
    out = np.zeros((out_rows, out_cols, img.channels), dtype=np.uint8)
    if method is InterpolationMethod.NEAREST_NEIGHBOUR:
        _nearest(src, out, factor)
    else:
        _bilinear(src, out, factor)
    return from_array(out)