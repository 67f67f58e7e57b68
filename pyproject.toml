[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cvfirst"
version = "0.1.0"
description = "Image processing from first principles: brightness, contrast, Gaussian blur and pyramids, rotation, scaling, translation and similarity transforms."
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = [
    "image-processing",
    "computer-vision",
    "gaussian-blur",
    "image-pyramid",
    "rotation",
    "interpolation",
    "bilinear",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
    "pillow",
]

[project.scripts]
cvfirst = "cvfirst.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cvfirst"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
