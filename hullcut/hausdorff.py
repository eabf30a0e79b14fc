"""Point, segment and triangle distances and a face-based Hausdorff distance."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence

from hullcut.shape import INF, Plane, cal_face_normal, cross_product, same_vector_direction

_NEIGHBOURS = 10


def _sub(u, v) -> tuple[float, float, float]:
    return (u[0] - v[0], u[1] - v[1], u[2] - v[2])


def _length(v) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def dist_point2point(pt, p) -> float:
    """Euclidean distance between two points."""
    return _length(_sub(pt, p))


def dist_point2segment(pt, s0, s1) -> float:
    """Distance from ``pt`` to the segment s0-s1.

    Returns ``INF`` when the foot of the perpendicular falls outside the
    segment, and NaN for a zero-length segment.
    """
    ba = _sub(pt, s1)
    bc = _sub(s0, s1)
    len_bc = _length(bc)
    if len_bc == 0:
        return math.nan
    proj_dist = (ba[0] * bc[0] + ba[1] * bc[1] + ba[2] * bc[2]) / len_bc
    val_ab = _length(ba)
    if proj_dist < 0 or proj_dist > len_bc:
        return INF
    return math.sqrt(max(val_ab * val_ab - proj_dist * proj_dist, 0.0))


def dist_point2triangle(pt, a, b, c) -> float:
    """Distance from ``pt`` to the triangle a b c.

    If the projection of ``pt`` onto the triangle plane lies inside the
    triangle the plane distance is used, otherwise the smallest distance to
    the edges and corners.
    """
    na = (b[1] - a[1]) * (c[2] - a[2]) - (b[2] - a[2]) * (c[1] - a[1])
    nb = (b[2] - a[2]) * (c[0] - a[0]) - (b[0] - a[0]) * (c[2] - a[2])
    nc = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    n_len = math.sqrt(na * na + nb * nb + nc * nc)
    if n_len == 0:
        pa = pb = pc = math.nan
    else:
        pa, pb, pc = na / n_len, nb / n_len, nc / n_len
    pd = -(pa * a[0] + pb * a[1] + pc * a[2])

    unit = math.sqrt(pa * pa + pb * pb + pc * pc)
    dist = abs(pa * pt[0] + pb * pt[1] + pc * pt[2] + pd) / unit if unit else math.nan

    side = Plane(pa, pb, pc, pd).side(pt, 1e-8)
    if side == 1:
        proj = (pt[0] - pa * dist, pt[1] - pb * dist, pt[2] - pc * dist)
    elif side == -1:
        proj = (pt[0] + pa * dist, pt[1] + pb * dist, pt[2] + pc * dist)
    else:
        proj = tuple(pt)

    normal = cal_face_normal(a, b, c)
    inside = all(
        same_vector_direction(cross_product(_sub(end, start), _sub(proj, start)), normal)
        for start, end in ((a, b), (b, c), (c, a))
    )
    if inside:
        return dist

    d_ab = dist_point2segment(pt, a, b)
    d_bc = dist_point2segment(pt, b, c)
    d_ca = dist_point2segment(pt, c, a)
    d_a = dist_point2point(pt, a)
    d_b = dist_point2point(pt, b)
    d_c = dist_point2point(pt, c)
    return min(min(min(d_ab, d_bc), d_ca), min(min(d_a, d_b), d_c))


def _nearest(cloud: Sequence, query, k: int) -> list[tuple[float, int]]:
    """The ``k`` nearest cloud points as (squared distance, index), nearest first."""
    return heapq.nsmallest(
        k,
        (
            ((q[0] - query[0]) ** 2 + (q[1] - query[1]) ** 2 + (q[2] - query[2]) ** 2, i)
            for i, q in enumerate(cloud)
        ),
    )


def _one_sided(queries, cloud, ids, points, triangles) -> float:
    cmax = 0.0
    for query in queries:
        neighbours = _nearest(cloud, query, _NEIGHBOURS)
        cmin = INF
        for _, index in neighbours:
            tri = triangles[ids[index]]
            distance = dist_point2triangle(query, points[tri[0]], points[tri[1]], points[tri[2]])
            if distance < cmin:
                cmin = distance
                if cmin < 1e-14:
                    break
        if cmin > 10:
            cmin = math.sqrt(neighbours[0][0]) if neighbours else 0.0
        if cmax < cmin < INF:
            cmax = cmin
    return cmax


def face_hausdorff_distance(
    points_a, triangles_a, samples_a, ids_a,
    points_b, triangles_b, samples_b, ids_b,
) -> float:
    """Symmetric Hausdorff distance between two sampled meshes.

    ``samples_x`` are points on mesh x and ``ids_x[i]`` is the index of the
    triangle of mesh x that sample ``i`` was taken from.  Each sample is
    measured against the triangles of its nearest samples on the other mesh.
    """
    forward = _one_sided(samples_b, samples_a, ids_a, points_a, triangles_a)
    backward = _one_sided(samples_a, samples_b, ids_b, points_b, triangles_b)
    return max(forward, backward)