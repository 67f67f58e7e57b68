"""Translation onto an enlarged canvas."""

from __future__ import annotations

import numpy as np

from cvfirst.image import SUPPORTED_CHANNELS, Image, from_array, to_array


def translate(img: Image, tx: int, ty: int) -> Image:
    """Shift the image right by ``tx`` and down by ``ty`` on a canvas grown to fit.

    The uncovered area is black. Negative shifts reach past the source
    buffer and raise IndexError.
    """
    if img.is_empty():
        return Image()
    new_rows = img.rows + abs(ty)
    new_cols = img.cols + abs(tx)
    if img.channels not in SUPPORTED_CHANNELS:
        return Image(new_rows, new_cols, img.channels)
    if tx < 0 or ty < 0:
        raise IndexError(f"shift ({tx}, {ty}) reads outside the source image")
    out = np.zeros((new_rows, new_cols, img.channels), dtype=np.uint8)
    out[ty:, tx:] = np.atleast_3d(to_array(img))
    return from_array(out)