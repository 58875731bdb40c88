[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xdscribe"
version = "0.1.0"
description = "Geometry and sparse voxel-grid tools for 3D polytopes: point location, overlap tests, rasterization and sampling"
requires-python = ">=3.10"
keywords = ["geometry", "polytope", "voxel", "rasterization", "point location", "convex decomposition"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["xdscribe"]

[tool.pytest.ini_options]
addopts = "-ra"
