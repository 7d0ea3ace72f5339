[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "symgrid"
version = "0.1.0"
description = "Backtracking solver for a 10x10 grid puzzle with symmetric (S) and asymmetric (A) blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "solver", "backtracking", "grid", "symmetry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
symgrid = "symgrid.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["symgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
