[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shortest_time_planner"
version = "0.1.0"
description = "Find the shortest-time sequence of actions between two states described in JSON files"
requires-python = ">=3.10"
dependencies = []
keywords = ["dijkstra", "shortest path", "planning", "graph", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
plan-shortest-time = "shortest_time_planner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shortest_time_planner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
