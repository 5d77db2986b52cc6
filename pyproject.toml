[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlesolve"
version = "0.1.0"
description = "Solvers for eleven days of two-part programming puzzles, from list distances and safe reports to disk compaction and splitting stones."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "solver", "grid", "recursion", "command-line"]
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
puzzlesolve-day01 = "puzzlesolve.day01:main"
puzzlesolve-day02 = "puzzlesolve.day02:main"
puzzlesolve-day03 = "puzzlesolve.day03:main"
puzzlesolve-day04 = "puzzlesolve.day04:main"
puzzlesolve-day05 = "puzzlesolve.day05:main"
puzzlesolve-day06 = "puzzlesolve.day06:main"
puzzlesolve-day07 = "puzzlesolve.day07:main"
puzzlesolve-day08 = "puzzlesolve.day08:main"
puzzlesolve-day09 = "puzzlesolve.day09:main"
puzzlesolve-day10 = "puzzlesolve.day10:main"
puzzlesolve-day11 = "puzzlesolve.day11:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlesolve"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
