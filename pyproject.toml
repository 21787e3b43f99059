[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "towerdefense"
version = "0.1.0"
description = "Game rules for a grid-based tower defense game: maps, path finding, enemy waves, turrets, effects, scoreboard and scene flow."
requires-python = ">=3.10"
dependencies = []
keywords = ["tower defense", "game", "pathfinding", "bfs", "strategy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["towerdefense"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
