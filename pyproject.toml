[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphtint"
version = "0.1.0"
description = "Vertex colouring of undirected graphs: greedy and tabu-search colourers, a random graph generator and a DIMACS converter"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "coloring", "colouring", "tabu search", "greedy", "dimacs", "metaheuristic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
graphtint-dimacs = "graphtint.dimacs:main"
graphtint-greedy = "graphtint.greedy:main"
graphtint-generate = "graphtint.generate:main"
graphtint-tabu = "graphtint.tabu:main"
graphtint-stages = "graphtint.stages:main"

[tool.hatch.build.targets.wheel]
packages = ["graphtint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
