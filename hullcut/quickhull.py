"""Incremental 3D QuickHull.

Start from a tetrahedron of extreme points. Then repeatedly take the farthest
outside point of a face, remove every face that point can see, and close the
hole with new faces fanned from the point to the horizon loop.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from hullcut.convex_hull import ConvexHull
from hullcut.halfedge_mesh import HalfEdgeMesh
from hullcut.hull_setup import (
    add_point_to_face,
    extreme_values,
    point_cloud_scale,
    reorder_horizon_edges,
    setup_initial_tetrahedron,
)
from hullcut.hullmath import HullPlane, triangle_normal
from hullcut.mesh_builder import MeshBuilder
from hullcut.point_source import PointSource
from hullcut.vector3 import Vector3

DEFAULT_EPS = 1e-7


@dataclass
class DiagnosticsData:
    """Statistics about the last hull computation."""

    # How often a horizon loop could not be formed; each failure slightly
    # degrades the resulting hull.
    failed_horizon_edges: int = 0


class QuickHull:
    """Convex hull builder. One instance must not be shared between threads."""

    def __init__(self) -> None:
        self.diagnostics = DiagnosticsData()
        self._mesh = MeshBuilder()
        self._vertices: list[Vector3] = []
        self._epsilon_squared = 0.0

    def convex_hull(
        self,
        points: Iterable[Vector3 | Iterable[float]],
        ccw: bool = False,
        use_original_indices: bool = False,
        eps: float = DEFAULT_EPS,
    ) -> tuple[ConvexHull, bool]:
        """Compute the convex hull of ``points``.

        ``eps`` is the minimum distance from a plane at which a point counts as
        outside it, for a point cloud of scale 1. Returns the hull and a flag
        that is False when the initial base triangle degenerated.
        """
        cloud = PointSource(points)
        flag = self._build_mesh(cloud, eps)
        hull = ConvexHull.from_builder(self._mesh, cloud, ccw, use_original_indices)
        return hull, flag

    def convex_hull_as_mesh(
        self,
        points: Iterable[Vector3 | Iterable[float]],
        ccw: bool = False,
        eps: float = DEFAULT_EPS,
    ) -> HalfEdgeMesh:
        """Compute the convex hull of ``points`` as a half-edge mesh."""
        cloud = PointSource(points)
        self._build_mesh(cloud, eps)
        return HalfEdgeMesh.from_builder(self._mesh, cloud)

    def _build_mesh(self, cloud: PointSource, eps: float) -> bool:
        if len(cloud) == 0:
            self._mesh = MeshBuilder()
            self._vertices = []
            return True

        extremes = extreme_values(cloud)
        scale = point_cloud_scale(cloud, extremes)
        epsilon = eps * scale
        self._epsilon_squared = epsilon * epsilon
        self.diagnostics = DiagnosticsData()
        self._mesh = MeshBuilder()

        flag, self._vertices, planar = setup_initial_tetrahedron(
            self._mesh, cloud, extremes, epsilon
        )
        self._expand()

        if planar:
            # The helper point added above the plane is folded back onto point 0.
            extra = len(self._vertices) - 1
            for he in self._mesh.half_edges:
                if he.end_vertex == extra:
                    he.end_vertex = 0
        self._vertices = list(cloud)
        return flag

    def _expand(self) -> None:
        mesh = self._mesh
        vertices = self._vertices

        face_list: deque[int] = deque()
        for i, face in enumerate(mesh.faces[:4]):
            if face.points_on_positive_side:
                face_list.append(i)
                face.in_face_stack = True

        iteration = 0
        while face_list:
            iteration += 1
            top = face_list.popleft()
            tf = mesh.faces[top]
            tf.in_face_stack = False
            if not tf.points_on_positive_side or tf.is_disabled():
                continue

            active_index = tf.most_distant_point
            active_point = vertices[active_index]

            visible, horizon = self._find_visible_faces(top, active_point, iteration)

            if not reorder_horizon_edges(mesh, horizon):
                self.diagnostics.failed_horizon_edges += 1
                if active_index in tf.points_on_positive_side:
                    tf.points_on_positive_side.remove(active_index)
                if not tf.points_on_positive_side:
                    tf.points_on_positive_side = None
                continue

            horizon_count = len(horizon)
            needed = 2 * horizon_count
            new_half_edges: list[int] = []
            orphaned_points: list[list[int]] = []

            # Half edges of visible faces that are not on the horizon are
            # recycled: first for this step, the rest for later steps.
            for face_index in visible:
                face = mesh.faces[face_index]
                he_indices = mesh.half_edge_indices_of_face(face)
                for j, he_index in enumerate(he_indices):
                    if face.horizon_edges_on_current_iteration & (1 << j):
                        continue
                    if len(new_half_edges) < needed:
                        new_half_edges.append(he_index)
                    else:
                        mesh.disable_half_edge(he_index)
                points = mesh.disable_face(face_index)
                if points:
                    orphaned_points.append(points)
            while len(new_half_edges) < needed:
                new_half_edges.append(mesh.add_half_edge())

            new_faces: list[int] = []
            half_edges = mesh.half_edges
            for i, ab in enumerate(horizon):
                a, b = mesh.vertex_indices_of_half_edge(half_edges[ab])
                new_face_index = mesh.add_face()
                new_faces.append(new_face_index)

                ca = new_half_edges[2 * i]
                bc = new_half_edges[2 * i + 1]

                half_edges[ab].next = bc
                half_edges[bc].next = ca
                half_edges[ca].next = ab

                half_edges[bc].face = new_face_index
                half_edges[ca].face = new_face_index
                half_edges[ab].face = new_face_index

                half_edges[ca].end_vertex = a
                half_edges[bc].end_vertex = active_index

                new_face = mesh.faces[new_face_index]
                normal = triangle_normal(vertices[a], vertices[b], active_point)
                new_face.plane = HullPlane.from_normal_and_point(normal, active_point)
                new_face.he = ab

                half_edges[ca].opp = new_half_edges[2 * i - 1 if i > 0 else needed - 1]
                half_edges[bc].opp = new_half_edges[(2 * (i + 1)) % needed]

            for points in orphaned_points:
                for point in points:
                    if point == active_index:
                        continue
                    for face_index in new_faces:
                        if add_point_to_face(
                            mesh.faces[face_index], point, vertices, self._epsilon_squared
                        ):
                            break

            for face_index in new_faces:
                face = mesh.faces[face_index]
                if face.points_on_positive_side and not face.in_face_stack:
                    face_list.append(face_index)
                    face.in_face_stack = True

    def _find_visible_faces(
        self, top: int, active_point: Vector3, iteration: int
    ) -> tuple[list[int], list[int]]:
        """Faces that see ``active_point`` and the half edges bounding them."""
        mesh = self._mesh
        half_edges = mesh.half_edges
        visible: list[int] = []
        horizon: list[int] = []
        pending: list[tuple[int, int | None]] = [(top, None)]

        while pending:
            face_index, entered = pending.pop()
            face = mesh.faces[face_index]

            if face.visibility_checked_on_iteration == iteration:
                if face.is_visible_face_on_current_iteration:
                    continue
            else:
                face.visibility_checked_on_iteration = iteration
                d = face.plane.n.dot(active_point) + face.plane.d
                if d > 0:
                    face.is_visible_face_on_current_iteration = True
                    face.horizon_edges_on_current_iteration = 0
                    visible.append(face_index)
                    for he_index in mesh.half_edge_indices_of_face(face):
                        opp = half_edges[he_index].opp
                        if opp != entered:
                            pending.append((half_edges[opp].face, he_index))
                    continue

            # Not visible: the half edge we arrived through lies on the horizon.
            face.is_visible_face_on_current_iteration = False
            horizon.append(entered)
            owner = mesh.faces[half_edges[entered].face]
            owner_edges = mesh.half_edge_indices_of_face(owner)
            slot = owner_edges.index(entered) if entered in owner_edges[:2] else 2
            owner.horizon_edges_on_current_iteration |= 1 << slot

        return visible, horizon


def convex_hull(
    points: Iterable[Vector3 | Iterable[float]],
    ccw: bool = False,
    use_original_indices: bool = False,
    eps: float = DEFAULT_EPS,
) -> tuple[ConvexHull, bool]:
    """Convex hull of ``points`` with a fresh builder; see QuickHull.convex_hull."""
    return QuickHull().convex_hull(points, ccw, use_original_indices, eps)