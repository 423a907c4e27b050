[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonrl"
version = "0.1.0"
description = "Grid, field-of-view, pathfinding, combat and data-parsing core for a tile-based dungeon role-playing game"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "dungeon", "pathfinding", "field-of-view", "shadowcasting", "tilemap"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dungeonrl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
