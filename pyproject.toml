[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "termpacman"
version = "0.1.0"
description = "A Pac-Man style maze game for the terminal, drawn with curses."
requires-python = ">=3.10"
dependencies = []
keywords = ["pacman", "game", "arcade", "curses", "terminal", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termpacman = "termpacman.cli:main"

[tool.setuptools.packages.find]
include = ["termpacman*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
