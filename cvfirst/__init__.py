"""Image processing from first principles: enhancements, Gaussian filtering and geometric transforms."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "enhancements",
    "gaussian",
    "image",
    "rotate",
    "scale",
    "similarity",
    "translate",
]