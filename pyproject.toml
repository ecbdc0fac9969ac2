[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2024"
version = "0.1.0"
description = "Solutions to the Advent of Code 2024 puzzles, runnable from the command line."
requires-python = ">=3.11"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2024"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc = "aoc2024.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2024"]

[tool.pytest.ini_options]
addopts = "-ra"
