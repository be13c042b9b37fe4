[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "craphs"
version = "0.1.0"
description = "Undirected graphs with traversal, paths, connected components, eccentricity and closeness centrality"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "graph-theory",
    "breadth-first-search",
    "depth-first-search",
    "connected-components",
    "eccentricity",
    "closeness-centrality",
    "gexf",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
craphs = "craphs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["craphs"]

[tool.pytest.ini_options]
addopts = "-ra"
