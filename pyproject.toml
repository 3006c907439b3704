[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicum"
version = "0.1.0"
description = "Classic sorting algorithms, small containers, an arbitrary-precision integer, recursive enumerations and a few console games."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "algorithms",
    "linked-list",
    "big-integer",
    "recursion",
    "partitions",
    "minesweeper",
    "snake",
]
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
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
practicum-recursion = "practicum.recursion:main"
practicum-travel = "practicum.travel:main"
practicum-minesweeper = "practicum.minesweeper:main"

[tool.hatch.build.targets.wheel]
packages = ["practicum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
