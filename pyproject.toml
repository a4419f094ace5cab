[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubcast"
version = "0.1.0"
description = "A small textured raycasting renderer for grid maze scenes described by .cub files"
requires-python = ">=3.10"
keywords = ["raycasting", "raycaster", "game", "maze", "3d", "bmp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubcast = "cubcast.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cubcast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
