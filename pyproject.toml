[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "game2048"
version = "0.1.0"
description = "Game logic for the 2048 sliding-tile puzzle, with a random-move bot and a text view of the board"
requires-python = ">=3.10"
dependencies = []
keywords = ["2048", "puzzle", "game", "bot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.setuptools.packages.find]
include = ["game2048*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
