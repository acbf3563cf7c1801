[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventpuzzles"
version = "0.1.0"
description = "Solvers for Advent of Code puzzles: days 1 to 11 of the 2023 and 2024 seasons"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "solvers", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventpuzzles = "adventpuzzles.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventpuzzles"]

[tool.pytest.ini_options]
addopts = "-ra"
