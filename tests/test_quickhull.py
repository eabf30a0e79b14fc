import random
from collections import Counter

import pytest

from hullcut.quickhull import DEFAULT_EPS, DiagnosticsData, QuickHull, convex_hull
from hullcut.vector3 import Vector3

CUBE = [(x, y, z) for x in (0.0, 1.0) for y in (0.0, 1.0) for z in (0.0, 1.0)]


def _signed_volume(hull):
    total = 0.0
    for a, b, c in hull.triangles():
        va, vb, vc = hull.vertices[a], hull.vertices[b], hull.vertices[c]
        total += va.dot(vb.cross(vc)) / 6.0
    return total


def _is_closed(triangles):
    directed = Counter()
    for a, b, c in triangles:
        for e in ((a, b), (b, c), (c, a)):
            directed[e] += 1
    return all(n == 1 for n in directed.values()) and all(
        (b, a) in directed for (a, b) in directed
    )


def _random_cloud(seed, n):
    rng = random.Random(seed)
    return [(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1)) for _ in range(n)]


def test_cube_hull_counts():
    hull, flag = convex_hull(CUBE)
    assert flag is True
    assert len(hull.vertices) == 8
    assert len(hull.triangles()) == 12
    assert _is_closed(hull.triangles())


def test_cube_volume_and_orientation():
    hull, _ = convex_hull(CUBE, ccw=False)
    hull_ccw, _ = convex_hull(CUBE, ccw=True)
    assert abs(_signed_volume(hull)) == pytest.approx(1.0)
    assert _signed_volume(hull_ccw) == pytest.approx(-_signed_volume(hull))


def test_interior_points_are_excluded():
    points = CUBE + [(0.5, 0.5, 0.5), (0.2, 0.3, 0.4), (0.7, 0.1, 0.9)]
    hull, _ = convex_hull(points)
    assert {tuple(v) for v in hull.vertices} == set(CUBE)


def test_use_original_indices_refers_to_input():
    points = [(0.5, 0.5, 0.5)] + CUBE
    hull, _ = convex_hull(points, use_original_indices=True)
    assert [tuple(v) for v in hull.vertices] == points
    used = {i for tri in hull.triangles() for i in tri}
    assert 0 not in used
    assert used == set(range(1, 9))


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_random_cloud_invariants(seed):
    points = _random_cloud(seed, 200)
    hull, _ = convex_hull(points)
    tris = hull.triangles()
    assert _is_closed(tris)
    v = len(hull.vertices)
    assert len(tris) == 2 * v - 4
    inputs = {p for p in points}
    assert all(tuple(p) in inputs for p in hull.vertices)
    # Every input point lies inside or on every face (outward normals).
    sign = 1.0 if _signed_volume(hull) > 0 else -1.0
    for a, b, c in tris:
        va, vb, vc = hull.vertices[a], hull.vertices[b], hull.vertices[c]
        n = (vb - va).cross(vc - va) * sign
        for p in points:
            assert n.dot(Vector3(*p) - va) <= 1e-9


def test_tetrahedron_of_four_points():
    points = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)]
    hull, flag = convex_hull(points)
    assert flag is True
    assert len(hull.triangles()) == 4
    assert {tuple(v) for v in hull.vertices} == set(points)
    assert _is_closed(hull.triangles())


def test_planar_cloud_uses_only_input_points():
    points = [(0.0, 0.0, 0.0), (2.0, 0.0, 0.0), (2.0, 2.0, 0.0), (0.0, 2.0, 0.0), (1.0, 1.0, 0.0), (1.5, 0.5, 0.0)]
    hull, _ = convex_hull(points)
    assert hull.triangles()
    assert {tuple(v) for v in hull.vertices} <= set(points)
    assert all(0 <= i < len(hull.vertices) for i in hull.indices)


def test_empty_input():
    hull, flag = convex_hull([])
    assert flag is True
    assert hull.vertices == []
    assert hull.indices == []


def test_diagnostics_reset_and_counted():
    qh = QuickHull()
    assert qh.diagnostics == DiagnosticsData()
    qh.convex_hull(CUBE)
    assert qh.diagnostics.failed_horizon_edges == 0


def test_builder_is_reusable():
    qh = QuickHull()
    first, _ = qh.convex_hull(_random_cloud(7, 50))
    second, _ = qh.convex_hull(CUBE)
    again, _ = convex_hull(_random_cloud(7, 50))
    assert len(second.triangles()) == 12
    assert first.indices == again.indices


def test_accepts_vector3_input():
    hull_tuples, _ = convex_hull(CUBE)
    hull_vectors, _ = convex_hull([Vector3(*p) for p in CUBE], eps=DEFAULT_EPS)
    assert hull_tuples.indices == hull_vectors.indices
    assert hull_tuples.vertices == hull_vectors.vertices


def test_convex_hull_as_mesh_structure():
    mesh = QuickHull().convex_hull_as_mesh(CUBE)
    assert len(mesh.vertices) == 8
    assert len(mesh.faces) == 12
    assert len(mesh.half_edges) == 36
    for i, he in enumerate(mesh.half_edges):
        assert mesh.half_edges[he.opp].opp == i
        nxt = mesh.half_edges[he.next]
        assert mesh.half_edges[mesh.half_edges[nxt.next].next] is he
        assert nxt.face == he.face
    assert {tuple(v) for v in mesh.vertices} == set(CUBE)