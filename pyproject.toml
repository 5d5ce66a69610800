[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridmapping"
version = "0.1.0"
description = "Geometry, statistics, sensor and grid utilities for laser-based occupancy grid mapping"
requires-python = ">=3.10"
dependencies = []
keywords = ["slam", "robotics", "occupancy grid", "laser", "odometry", "bresenham", "eigen decomposition"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["gridmapping"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
