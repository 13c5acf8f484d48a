[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "collectatron"
version = "1.0.0"
description = "A tile-based collecting puzzle game played on .ber maps, with an XPM sprite loader"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tile map", "xpm", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
collectatron = "collectatron.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["collectatron"]

[tool.pytest.ini_options]
addopts = "-ra"
