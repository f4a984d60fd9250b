[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "socialgraph"
version = "0.1.0"
description = "Structural analysis of social network edge lists: path lengths, densest subgraph, degree distributions and centralities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "social network",
    "centrality",
    "betweenness",
    "closeness",
    "power law",
    "densest subgraph",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
socialgraph = "socialgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["socialgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
