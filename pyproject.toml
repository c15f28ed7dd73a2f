[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autog"
version = "0.1.0"
description = "Building blocks for layered graph drawing: graph model, plane geometry, spline fitting and shortest paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "layout", "sugiyama", "layered", "diagram", "spline", "bezier", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["autog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
