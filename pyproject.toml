[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazerun"
version = "0.1.0"
description = "A small grid maze game: walk the maze, collect the coins."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["maze", "game", "grid", "coins", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mazerun = "mazerun.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mazerun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
