# xdscribe

`xdscribe` is a library of geometry and sparse voxel-grid tools for
three-dimensional triangulated polytopes. Its main uses are locating points
against a polytope and rasterizing a polytope onto a voxel grid.

## Contents

- **Geometry kernel** (`xdscribe.kernel`, `xdscribe.shapes`,
  `xdscribe.perpendicular`, `xdscribe.linear_test`)
  - `int_floor` and `floor_point` floor values with a small tolerance.
  - `preceding` orders grid coordinates lexicographically.
  - `bounding_box` builds a `BoundingBox`. `BoundingBox.to_box()` turns it
    into a cubic `Placement`.
  - `common_perpendicular` and `unit_normal` compute perpendicular vectors.
  - `LinearTest` evaluates a plane test.
- **Point location** (`xdscribe.locations`, `xdscribe.axis_distance`,
  `xdscribe.point_location`, `xdscribe.simplex_overlap`)
  - `locate_point` places a point against a closed surface. It returns
    `Location.OUTER`, `Location.BOUNDARY` or `Location.INNER`.
  - `AxisDistance` gives the distance along the last axis from a point to a
    facet, as a `DistanceResult`.
  - `SimplexFacetOverlap` is a separating-axis overlap test between a
    simplex and a facet.
  - `location_in_face` locates a point from its coordinates in a face's
    basis.
- **Polytopes** (`xdscribe.polytope`, `xdscribe.convex_decomposition`)
  - `Polytope` gives access to its facets, its faces of any dimension
    (`faces`) and adjacent facets (`neighbor_facet_indices`).
  - `load_obj` reads a polytope from a Wavefront OBJ file.
  - `invert` reflects a polytope through the origin.
  - `star_decomposition` yields one simplex per facet from the origin.
  - `dummy_decomposition` yields the whole vertex set as one part.
- **Sparse voxel grids** (`xdscribe.xd_iterator`, `xdscribe.sparse_raster`,
  `xdscribe.mapper`, `xdscribe.sampling`, `xdscribe.refinement`)
  - `iterate_grid` walks every point of a grid.
  - `SparseRaster` keeps voxels sorted and offers `find` and
    `vertical_slice`. `full_raster` builds a filled raster and
    `raster_capacity` gives the number of voxels in a full raster.
  - `Mapper` converts between global and grid coordinates.
  - `Sampling` is a raster with a mapper, and `full_sampling` builds a
    filled one.
  - `shrink` crops a sampling to its non-empty voxels and `refine` splits
    every non-empty voxel into finer ones. `voxels_bounding_box` gives a
    voxel-aligned box around a selection.
- **Rasterization** (`xdscribe.facet_box_overlap`,
  `xdscribe.facet_rasterizer`, `xdscribe.inner_region`,
  `xdscribe.polytope_rasterizer`)
  - `FacetBoxOverlap` tests a facet against boxes of one size, with
    `lowest_point` as a helper.
  - Facets are marked with `rasterize_facet_by_overlap` or with
    `bbox_facet_rasterizer(coarse_threshold)`.
  - The inner region is filled by one of three rasterizers:
    `rasterize_inner_region_sequentially`,
    `rasterize_inner_region_by_facets` or `rasterize_inner_region_by_rays`.
  - `polytope_rasterizer` combines a facet rasterizer with an
    inner-region rasterizer.
- **Diagnostics** (`xdscribe.stats`, `xdscribe.stopwatch`,
  `xdscribe.image_stats`, `xdscribe.drawing`)
  - `global_stats()` returns the process-wide `Stats` counters.
  - `Stopwatch(index, name)` is a context manager that adds elapsed time to
    a measurement slot. Slots are read with `measurement`, written out with
    `dump` and cleared with `reset_measurements`.
  - `report_sampling_distribution` classifies a sampling by `ImageType`.
  - `ObjBuilder`, `draw_points`, `draw_facets` and `draw_sampling` write
    Wavefront OBJ models. `dump_sampling` writes a sampling as text layers.
    `format_point` and `location_name` format values for display.

## Installation

```
pip install .
```

## Example

```python
from xdscribe.drawing import dump_sampling
from xdscribe.facet_rasterizer import bbox_facet_rasterizer
from xdscribe.inner_region import rasterize_inner_region_by_rays
from xdscribe.locations import Location
from xdscribe.polytope import load_obj
from xdscribe.polytope_rasterizer import polytope_rasterizer
from xdscribe.sampling import full_sampling
from xdscribe.shapes import bounding_box

polytope = load_obj("model.obj")
container = bounding_box(polytope.vertices).to_box()
sampling = full_sampling(container, 16, Location.OUTER)

rasterize = polytope_rasterizer(
    bbox_facet_rasterizer(2.0),
    rasterize_inner_region_by_rays,
)
rasterize(sampling.to_local_facets(polytope.facet_geometries()), sampling)

dump_sampling("layers.txt", sampling)
```

`layers.txt` has one symbol per voxel:

| Symbol | Voxel |
| ------ | ----- |
| `.` | outer |
| `+` | boundary |
| `#` | inner |
| `_` | missing from the sampling |

## What the package does not do

This is a library only. It has no command-line program. It has no solver
that searches for a placement of one polytope inside another. The building
blocks are provided, but the search has to be written by the caller. The
only convex decompositions available are `star_decomposition` and
`dummy_decomposition`.

## Running the tests

```
pip install .[test]
pytest
```