[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "megastore_graphs"
version = "0.1.0"
description = "Product catalogue graph with similarity links, search and recommendations"
requires-python = ">=3.10"
dependencies = []
keywords = ["catalog", "graph", "recommendation", "search", "products"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
megastore-graphs = "megastore_graphs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["megastore_graphs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
