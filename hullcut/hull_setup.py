"""Steps of the QuickHull algorithm that set up the initial simplex."""

from __future__ import annotations

from collections.abc import Sequence

from hullcut.hullmath import (
    HullPlane,
    Ray,
    signed_distance_to_plane,
    squared_distance_point_ray,
    triangle_normal,
)
from hullcut.mesh_builder import Face, MeshBuilder
from hullcut.vector3 import Vector3


def extreme_values(points: Sequence[Vector3]) -> tuple[int, int, int, int, int, int]:
    """Indices of the points with max x, min x, max y, min y, max z, min z."""
    if not points:
        raise ValueError("no points given")
    out = [0] * 6
    first = points[0]
    vals = [first.x, first.x, first.y, first.y, first.z, first.z]
    for i, pos in enumerate(points):
        if i == 0:
            continue
        for axis, value in enumerate((pos.x, pos.y, pos.z)):
            hi, lo = 2 * axis, 2 * axis + 1
            if value > vals[hi]:
                vals[hi] = value
                out[hi] = i
            elif value < vals[lo]:
                vals[lo] = value
                out[lo] = i
    return tuple(out)


def point_cloud_scale(points: Sequence[Vector3], extremes: Sequence[int]) -> float:
    """Largest absolute extreme coordinate of the point cloud."""
    scale = 0.0
    for i, index in enumerate(extremes):
        value = abs(tuple(points[index])[i // 2])
        if value > scale:
            scale = value
    return scale


def add_point_to_face(
    face: Face, point_index: int, points: Sequence[Vector3], epsilon_squared: float
) -> bool:
    """Assign a point to ``face`` if it lies clearly on its positive side."""
    d = signed_distance_to_plane(points[point_index], face.plane)
    if d > 0 and d * d > epsilon_squared * face.plane.sqr_n_length:
        if face.points_on_positive_side is None:
            face.points_on_positive_side = []
        face.points_on_positive_side.append(point_index)
        if d > face.most_distant_point_dist:
            face.most_distant_point_dist = d
            face.most_distant_point = point_index
        return True
    return False


def reorder_horizon_edges(mesh: MeshBuilder, horizon_edges: list[int]) -> bool:
    """Reorder ``horizon_edges`` in place so consecutive edges join up.

    Returns False if no closed loop can be formed.
    """
    edges = mesh.half_edges
    count = len(horizon_edges)
    for i in range(count - 1):
        end_vertex = edges[horizon_edges[i]].end_vertex
        for j in range(i + 1, count):
            begin_vertex = edges[edges[horizon_edges[j]].opp].end_vertex
            if begin_vertex == end_vertex:
                horizon_edges[i + 1], horizon_edges[j] = horizon_edges[j], horizon_edges[i + 1]
                break
        else:
            return False
    return True


def setup_initial_tetrahedron(
    mesh: MeshBuilder,
    points: Sequence[Vector3],
    extremes: Sequence[int],
    epsilon: float,
) -> tuple[bool, list[Vector3], bool]:
    """Build the starting tetrahedron in ``mesh`` and distribute the points.

    ``epsilon`` is already scaled to the point cloud.  Returns
    ``(flag, vertices, planar)``: ``flag`` is False when the base triangle
    degenerated, ``vertices`` is the point data the mesh refers to (one extra
    point is appended when the cloud is planar) and ``planar`` tells whether
    that happened.
    """
    vertices = list(points)
    count = len(vertices)
    if count == 0:
        raise ValueError("no points given")
    epsilon_squared = epsilon * epsilon
    flag = True

    if count <= 4:
        v = [0, min(1, count - 1), min(2, count - 1), min(3, count - 1)]
        normal = triangle_normal(vertices[v[0]], vertices[v[1]], vertices[v[2]])
        plane = HullPlane.from_normal_and_point(normal, vertices[v[0]])
        if plane.is_point_on_positive_side(vertices[v[3]]):
            v[0], v[1] = v[1], v[0]
        mesh.setup(*v)
        return flag, vertices, False

    # Two most distant extreme points.
    max_d = epsilon_squared
    selected = (0, 0)
    for i in range(6):
        for j in range(i + 1, 6):
            d = vertices[extremes[i]].squared_distance_to(vertices[extremes[j]])
            if d > max_d:
                max_d = d
                selected = (extremes[i], extremes[j])
    if max_d == epsilon_squared:
        mesh.setup(0, 1, 2, 3)
        return flag, vertices, False

    first, second = vertices[selected[0]], vertices[selected[1]]

    # Most distant point from the line through them.
    ray = Ray(first, second - first)
    max_d = epsilon_squared
    max_i = -1
    for i, p in enumerate(vertices):
        d = squared_distance_point_ray(p, ray)
        if d > max_d:
            max_d = d
            max_i = i
    if max_d == epsilon_squared:
        third = next(
            (i for i, p in enumerate(vertices) if p != first and p != second),
            selected[0],
        )
        third_point = vertices[third]
        fourth = next(
            (i for i, p in enumerate(vertices) if p != first and p != second and p != third_point),
            selected[0],
        )
        mesh.setup(selected[0], selected[1], third, fourth)
        return flag, vertices, False

    if max_i in selected:
        flag = False
    base = [selected[0], selected[1], max_i]
    base_vertices = [vertices[k] for k in base]

    # Fourth vertex: farthest from the base triangle plane.
    max_d = epsilon
    max_i = 0
    normal = triangle_normal(*base_vertices)
    base_plane = HullPlane.from_normal_and_point(normal, base_vertices[0])
    for i, p in enumerate(vertices):
        d = abs(signed_distance_to_plane(p, base_plane))
        if d > max_d:
            max_d = d
            max_i = i

    planar = max_d == epsilon
    if planar:
        n1 = triangle_normal(base_vertices[1], base_vertices[2], base_vertices[0])
        vertices.append(n1 + vertices[0])
        max_i = len(vertices) - 1

    if base_plane.is_point_on_positive_side(vertices[max_i]):
        base[0], base[1] = base[1], base[0]

    mesh.setup(base[0], base[1], base[2], max_i)
    for face in mesh.faces:
        va, vb, vc = (vertices[k] for k in mesh.vertex_indices_of_face(face))
        face.plane = HullPlane.from_normal_and_point(triangle_normal(va, vb, vc), va)

    for i in range(count):
        for face in mesh.faces:
            if add_point_to_face(face, i, vertices, epsilon_squared):
                break

    return flag, vertices, planar