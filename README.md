# hullcut

Geometry building blocks for approximate convex decomposition of triangle
meshes, written in plain Python with no third-party dependencies.

## What it provides

- `hullcut.quickhull`: a 3D QuickHull implementation.
  `convex_hull(points, ccw=False, use_original_indices=False, eps=1e-7)`
  returns a pair `(hull, flag)`. `hull` is a `ConvexHull`. `flag` is `False`
  when the initial base triangle degenerated. The `QuickHull` class offers the
  same through `QuickHull.convex_hull`, and `QuickHull.convex_hull_as_mesh`
  returns a `HalfEdgeMesh`. Degenerate inputs still yield a hull: a single
  point, collinear points or coplanar points. After a run,
  `QuickHull.diagnostics` (a `DiagnosticsData`) counts in
  `failed_horizon_edges` how many horizon loops could not be formed.
- `hullcut.convex_hull`: `ConvexHull`, with `vertices`, a flat `indices`
  buffer, `triangles()` to group the indices in threes, and
  `write_obj(path, object_name="quickhull")` to export a Wavefront OBJ file.
- `hullcut.halfedge_mesh`: `HalfEdgeMesh`, a compact half-edge mesh built
  with `HalfEdgeMesh.from_builder`.
- `hullcut.mesh_builder`, `hullcut.hull_setup`, `hullcut.hullmath`,
  `hullcut.vector3`, `hullcut.point_source`: the pieces the hull builder is
  made of.
  - `MeshBuilder`, `Face` and `HalfEdge`.
  - The initial-tetrahedron setup.
  - `HullPlane`, `Ray` and the distance helpers.
  - An immutable `Vector3`.
  - `PointSource` and a small `Pool`.
- `hullcut.shape`: general 3D geometry helpers.
  - `Plane`, with `side`, `bool_side` and `cut_side`. `intersect_segment`
    returns the intersection point and whether it lies on the segment.
  - `Edge`.
  - `cross_product`, `cal_face_normal`, `area`, `volume`, `pt_norm`,
    `same_point_detect` and `same_vector_direction`.
  - `diagonalize(a)`, which returns `(Q, D)` for a symmetric 3x3 matrix using
    Jacobi rotations.
- `hullcut.hausdorff`: `dist_point2point`, `dist_point2segment`,
  `dist_point2triangle` and `face_hausdorff_distance`. The last one is a
  symmetric Hausdorff distance between two sampled meshes.
- `hullcut.config`: `Params`, a dataclass of decomposition settings with their
  defaults. Among them are `threshold` 0.05, `resolution` 2000, `seed` 1234,
  `mcts_iteration` 150 and `mcts_max_depth` 3.
- `hullcut.costmatrix`: `find_minimum_element(d, begin=0, end=None)`, which
  returns `(index, value)` for a packed merge-cost matrix, and
  `edge_neighbors(edge_map, edge, idx)` for triangle adjacency lookups.

## What it does not do

The package holds the geometry and settings that a decomposition needs. It
does not contain a decomposition pipeline itself: there is no cutting-plane
search, no mesh clipping, no merging of hulls and no mesh file reader. It has
no command-line program. `Params` only records settings; nothing in the
package reads them.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from hullcut.quickhull import convex_hull

points = [
    (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0),
    (0.2, 0.2, 0.2),  # interior point, not part of the hull
]
hull, ok = convex_hull(points, ccw=True)
print(ok, len(hull.triangles()))  # True 4
hull.write_obj("hull.obj", "tetra")
```

```python
from hullcut.shape import Plane

plane = Plane(0.0, 0.0, 1.0, -0.5)
print(plane.side((0.0, 0.0, 1.0), 1e-6))  # 1
point, on_segment = plane.intersect_segment((0.0, 0.0, 0.0), (0.0, 0.0, 1.0))
print(point, on_segment)  # (0.0, 0.0, 0.5) True
```