[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathkit"
version = "0.1.0"
description = "Pathfinding, maximum flow and directed-graph algorithms for grids and graphs described by callables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pathfinding",
    "graph",
    "maximum-flow",
    "minimum-cut",
    "edmonds-karp",
    "ida-star",
    "fringe-search",
    "iddfs",
    "strongly-connected-components",
    "topological-sort",
    "k-shortest-paths",
    "grid",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pathkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
