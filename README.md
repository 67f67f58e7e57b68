# cvfirst

Small, readable image-processing routines. Images are held in
`cvfirst.image.Image`: a plain interleaved 8-bit pixel buffer with the origin
at the top-left corner, one or three channels. The routines use NumPy for the
arithmetic; Pillow is used by `cvfirst.cli` to read and write image files.

What is included:

- **`cvfirst.image`**: `Image` (rows, cols, channels; starts black) with
  `get_pixel`, `set_pixel`, `is_empty` and `copy`; the `Pixel` and `Point`
  records; `to_array` and `from_array` for exchanging images with NumPy
  `uint8` arrays.
- **`cvfirst.enhancements`**: `adjust_brightness(img, beta)` adds `beta` to
  every value, `invert(img)` gives `255 - value`, and `contrast(img, alpha)`
  multiplies every value by `alpha` (truncated); all results are clipped to
  0–255. A `beta` or `alpha` of zero returns an unchanged copy.
- **`cvfirst.gaussian`**: `compute_kernel` builds a normalised 1-D Gaussian
  kernel, `pad_image` adds a black border, `apply_gaussian` blurs with a
  separable (horizontal then vertical) pass and needs an odd kernel size, and
  `gaussian_pyramid` returns the original image followed by blurred half-size
  levels until both sides are at most 32 pixels. A level that has to be
  halved while one of its sides is odd raises `ValueError`.
- **`cvfirst.rotate`**: `rotate(img, angle, method)` turns the image
  counter-clockwise by `angle` degrees about its centre onto a canvas sized
  from the rotated corners, using `RotateMethod.FWD_MAP` or
  `RotateMethod.INV_MAP` (nearest-neighbour in both cases).
- **`cvfirst.scale`**: `scale(img, method, factor)` enlarges by an integer
  factor from 0 to 255 with `InterpolationMethod.NEAREST_NEIGHBOUR` or
  `InterpolationMethod.BILINEAR`. A factor of zero returns a copy. Output
  positions are walked by byte offset in steps of the channel count, so in a
  three-channel result some pixels stay black.
- **`cvfirst.translate`**: `translate(img, tx, ty)` moves the image right by
  `tx` and down by `ty` on a canvas grown by `|tx|` and `|ty|`; negative
  shifts raise `IndexError`.
- **`cvfirst.similarity`**: `similarity_transform(img)` scales by 2 (nearest
  neighbour), rotates 45° (inverse map) and translates by 100, 100.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from cvfirst.cli import load_image, save_image
from cvfirst.enhancements import adjust_brightness, contrast, invert
from cvfirst.gaussian import apply_gaussian, gaussian_pyramid
from cvfirst.rotate import RotateMethod, rotate
from cvfirst.scale import InterpolationMethod, scale
from cvfirst.translate import translate
from cvfirst.similarity import similarity_transform

img = load_image("boat.png")            # grayscale files give 1 channel, others RGB

brighter = adjust_brightness(img, 100)
darker = adjust_brightness(img, -100)
negative = invert(img)
punchy = contrast(img, 1.5)

blurred = apply_gaussian(img, 5, 5.0)
levels = gaussian_pyramid(img)          # level 1 is the original image

turned = rotate(img, 45, RotateMethod.INV_MAP)
bigger = scale(img, InterpolationMethod.BILINEAR, 2)
shifted = translate(img, 50, 50)        # +x right, +y down
transformed = similarity_transform(img)

save_image(blurred, "boat-blurred.png")
for number, level in enumerate(levels, start=1):
    save_image(level, f"boat-level-{number}.png")
```

Images can also be built by hand or exchanged with NumPy:

```python
import numpy as np
from cvfirst.image import Image, Pixel, from_array, to_array

img = Image(4, 4, 3)                    # rows, cols, channels; starts black
img.set_pixel(1, 2, Pixel(255, 0, 0))
print(img.get_pixel(1, 2))

arr = to_array(img)                     # shape (rows, cols, channels), uint8
same = from_array(np.asarray(arr))
```

`save_image` refuses empty images and images with other than one or three
channels; the file format follows the extension.

## Command line

Installing the package provides a `cvfirst` command:

```
cvfirst INPUT OUTPUT_DIR [--op {rotate,scale,similarity,translate}]
```

It reads `INPUT`, applies the chosen transform (default `similarity`) and
writes PNG files into `OUTPUT_DIR`, creating it if needed:

- `rotate`: `rotated_fwd.png` and `rotated_inv.png` (45°)
- `scale`: `scaled_bilinear_2.png` and `scaled_nn_3.png`
- `translate`: `translated.png` (by 50, 50)
- `similarity`: `similarity.png`

It exits with status 1 if the input cannot be read.

## What it does not do

- There is no grayscale conversion routine.
- Results are not shown in windows; the command only writes files.
- The brightness, contrast, blur and pyramid routines have no command-line
  options; call them from Python.