[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roundsolve"
version = "0.1.0"
description = "Solvers for five contest problems, with a small number theory toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "number-theory", "algorithms", "trees", "union-find"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
roundsolve-min-digit = "roundsolve.min_digit:main"
roundsolve-zero-runs = "roundsolve.zero_runs:main"
roundsolve-climb = "roundsolve.climb:main"
roundsolve-portals = "roundsolve.portals:main"
roundsolve-tree-colors = "roundsolve.tree_colors:main"

[tool.hatch.build.targets.wheel]
packages = ["roundsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
