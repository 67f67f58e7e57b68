"""Rotation about the image centre by forward or inverse nearest-neighbour mapping."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

from cvfirst.image import SUPPORTED_CHANNELS, Image, from_array, to_array

PI = 3.14159


class RotateMethod(Enum):
    """How pixels are carried from the source to the rotated image."""

    FWD_MAP = "forward"
    INV_MAP = "inverse"


def _round_scalar(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _round_away(values: np.ndarray) -> np.ndarray:
    return np.copysign(np.floor(np.abs(values) + 0.5), values).astype(np.int64)


def _rotated_size(rows: int, cols: int, angle_rad: float) -> tuple[int, int]:
    cx, cy = cols // 2, rows // 2
    cos_a, sin_a = math.cos(angle_rad), math.sin(angle_rad)
    xs: list[int] = []
    ys: list[int] = []
    for x, y in ((0, 0), (cols - 1, 0), (0, rows - 1), (cols - 1, rows - 1)):
        x -= cx
        y -= cy
        xs.append(_round_scalar(cos_a * x - sin_a * y) + cx)
        ys.append(_round_scalar(sin_a * x + cos_a * y) + cy)
    return max(ys) - min(ys), max(xs) - min(xs)


def _forward(src: np.ndarray, out: np.ndarray, angle_rad: float) -> None:
    rows, cols = src.shape[:2]
    out_rows, out_cols = out.shape[:2]
    ys, xs = (a.ravel() for a in np.indices((rows, cols)))
    cx = xs - cols // 2
    cy = ys - rows // 2
    cos_a, sin_a = math.cos(angle_rad), math.sin(angle_rad)
    nx = _round_away(cos_a * cx - sin_a * cy) + out_cols // 2
    ny = _round_away(sin_a * cx + cos_a * cy) + out_rows // 2
    valid = (nx >= 0) & (ny >= 0) & (nx < out_cols) & (ny < out_rows)
    ys, xs, ny, nx = ys[valid], xs[valid], ny[valid], nx[valid]
    # Several source pixels may land on one target; the last one in scan order wins.
    targets = ny * out_cols + nx
    _, first_from_end = np.unique(targets[::-1], return_index=True)
    keep = len(targets) - 1 - first_from_end
    out[ny[keep], nx[keep]] = src[ys[keep], xs[keep]]


def _inverse(src: np.ndarray, out: np.ndarray, angle_rad: float) -> None:
    rows, cols = src.shape[:2]
    out_rows, out_cols = out.shape[:2]
    yp, xp = (a.ravel() for a in np.indices((out_rows, out_cols)))
    xc = xp - out_cols // 2
    yc = yp - out_rows // 2
    cos_a, sin_a = math.cos(angle_rad), math.sin(angle_rad)
    x = _round_away(cos_a * xc + sin_a * yc) + cols // 2
    y = _round_away(-sin_a * xc + cos_a * yc) + rows // 2
    valid = (y >= 0) & (x >= 0) & (y < rows) & (x < cols)
    out[yp[valid], xp[valid]] = src[y[valid], x[valid]]


def rotate(img: Image, angle: float, method: RotateMethod | str) -> Image:
    """Rotate counter-clockwise by ``angle`` degrees about the image centre.

    The result is sized from the rotated corners and starts black.
    """
    method = RotateMethod(method)
    angle_rad = -angle / 180.0 * PI
    new_rows, new_cols = _rotated_size(img.rows, img.cols, angle_rad)
    if img.channels not in SUPPORTED_CHANNELS:
        return Image(new_rows, new_cols, img.channels)
    src = np.atleast_3d(to_array(img))
    out = np.zeros((new_rows, new_cols, img.channels), dtype=np.uint8)
    if method is RotateMethod.FWD_MAP:
        _forward(src, out, angle_rad)
    else:
        _inverse(src, out, angle_rad)
    return from_array(out)