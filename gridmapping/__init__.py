"""Geometry, statistics, sensor, grid and pose-search utilities for occupancy grid mapping."""

__version__ = "0.1.0"