[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "raycube"
version = "0.1.0"
description = "A grid-map raycasting engine: scene file parsing, XPM textures, DDA ray casting and column rendering into pixel buffers"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "raycaster", "xpm", "dda", "game", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["raycube*"]

[tool.pytest.ini_options]
addopts = "-ra"
