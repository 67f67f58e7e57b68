"""Command line entry point: apply geometric transforms to an image file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from cvfirst.image import Image, from_array, to_array
from cvfirst.rotate import RotateMethod, rotate
from cvfirst.scale import InterpolationMethod, scale
from cvfirst.similarity import similarity_transform
from cvfirst.translate import translate

_GRAY_MODES = {"1", "L", "LA", "I", "I;16", "F"}


def load_image(path: str | Path) -> Image:
    """Read an image file; grayscale files give one channel, all others RGB."""
    with PILImage.open(path) as picture:
        mode = "L" if picture.mode in _GRAY_MODES else "RGB"
        array = np.asarray(picture.convert(mode), dtype=np.uint8)
    return from_array(array)


def save_image(img: Image, path: str | Path) -> None:
    """Write a 1- or 3-channel image; the format follows the file extension."""
    if img.is_empty():
        raise ValueError("cannot save an empty image")
    if img.channels not in (1, 3):
        raise ValueError(f"cannot save an image with {img.channels} channels")
    PILImage.fromarray(to_array(img)).save(path)


def _rotations(img: Image) -> Iterator[tuple[str, Image]]:
    yield "rotated_fwd", rotate(img, 45, RotateMethod.FWD_MAP)
    yield "rotated_inv", rotate(img, 45, RotateMethod.INV_MAP)


def _translation(img: Image) -> Iterator[tuple[str, Image]]:
    yield "translated", translate(img, 50, 50)


def _scalings(img: Image) -> Iterator[tuple[str, Image]]:
    yield "scaled_bilinear_2", scale(img, InterpolationMethod.BILINEAR, 2)
    yield "scaled_nn_3", scale(img, InterpolationMethod.NEAREST_NEIGHBOUR, 3)


def _similarity(img: Image) -> Iterator[tuple[str, Image]]:
    yield "similarity", similarity_transform(img)


_OPERATIONS: dict[str, Callable[[Image], Iterator[tuple[str, Image]]]] = {
    "rotate": _rotations,
    "translate": _translation,
    "scale": _scalings,
    "similarity": _similarity,
}


def main(argv: list[str] | None = None) -> int:
    """Transform INPUT and write the results as PNG files into OUTPUT_DIR."""
    parser = argparse.ArgumentParser(
        prog="cvfirst", description="Apply geometric image transforms."
    )
    parser.add_argument("input", type=Path, help="image file to read")
    parser.add_argument("output_dir", type=Path, help="directory for the results")
    parser.add_argument(
        "--op", choices=sorted(_OPERATIONS), default="similarity",
        help="transform to apply (default: similarity)",
    )
    args = parser.parse_args(argv)

    try:
        img = load_image(args.input)
    except OSError as exc:
        print(f"cvfirst: cannot read {args.input}: {exc}", file=sys.stderr)
        return 1

    args.output_dir.mkdir(parents=True, exist_ok=True)
    for name, result in _OPERATIONS[args.op](img):
        save_image(result, args.output_dir / f"{name}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())