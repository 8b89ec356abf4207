[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planegfx"
version = "0.1.0"
description = "2D graphics toolkit: vectors, 3x3 matrices, cameras, transforms, meshes, vertex packing, sprite animation, images and bitmap-font text layout"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["graphics", "2d", "matrix", "vector", "camera", "mesh", "bitmap font", "sprite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["planegfx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
