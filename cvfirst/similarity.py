"""A fixed similarity transform: scale, rotate, then translate."""

from __future__ import annotations

from cvfirst.image import Image
from cvfirst.rotate import RotateMethod, rotate
from cvfirst.scale import InterpolationMethod, scale
from cvfirst.translate import translate

SCALE_FACTOR = 2
ROTATION_DEGREES = 45
SHIFT = 100


def similarity_transform(img: Image) -> Image:
    """Scale by 2 (nearest neighbour), rotate 45 degrees (inverse map), shift by 100, 100."""
    scaled = scale(img, InterpolationMethod.NEAREST_NEIGHBOUR, SCALE_FACTOR)
    rotated = rotate(scaled, ROTATION_DEGREES, RotateMethod.INV_MAP)
    return translate(rotated, SHIFT, SHIFT)