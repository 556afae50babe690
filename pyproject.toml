[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "droneroute"
version = "0.1.0"
description = "Road-graph loading and path finding for drone delivery simulations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "routing",
    "graph",
    "openstreetmap",
    "wavefront-obj",
    "a-star",
    "path-finding",
    "drone",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["droneroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
