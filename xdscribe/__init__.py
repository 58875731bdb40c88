"""Geometry and sparse voxel-grid tools for 3D polytopes: location, rasterization, sampling."""

__version__ = "0.1.0"