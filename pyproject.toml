[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spartysudoku"
version = "0.1.0"
description = "An action sudoku game: steer Sparty around the board, eat digits and place them on the grid."
requires-python = ">=3.10"
keywords = ["sudoku", "game", "puzzle", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spartysudoku = "spartysudoku.view:main"

[tool.hatch.build.targets.wheel]
packages = ["spartysudoku"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
