"""Half-edge mesh under construction, with slot reuse for removed elements."""

from __future__ import annotations

from dataclasses import dataclass, field

from hullcut.hullmath import HullPlane

DISABLED = -1


@dataclass
class HalfEdge:
    """Directed edge ending at ``end_vertex``, belonging to ``face``."""

    end_vertex: int = 0
    opp: int = 0
    face: int = 0
    next: int = 0

    def disable(self) -> None:
        self.end_vertex = DISABLED

    def is_disabled(self) -> bool:
        return self.end_vertex == DISABLED


@dataclass
class Face:
    """Triangle of the hull together with the points lying above it."""

    he: int = DISABLED
    plane: HullPlane = field(default_factory=HullPlane)
    most_distant_point_dist: float = 0.0
    most_distant_point: int = 0
    visibility_checked_on_iteration: int = 0
    is_visible_face_on_current_iteration: bool = False
    in_face_stack: bool = False
    horizon_edges_on_current_iteration: int = 0
    points_on_positive_side: list[int] | None = None

    def disable(self) -> None:
        self.he = DISABLED

    def is_disabled(self) -> bool:
        return self.he == DISABLED


# Half edges of the initial tetrahedron ABCD, as
# (end vertex slot, opposite, face, next); slots 0..3 stand for a, b, c, d.
_TETRAHEDRON = (
    (1, 6, 0, 1),    # AB
    (2, 9, 0, 2),    # BC
    (0, 3, 0, 0),    # CA
    (2, 2, 1, 4),    # AC
    (3, 11, 1, 5),   # CD
    (0, 7, 1, 3),    # DA
    (0, 0, 2, 7),    # BA
    (3, 5, 2, 8),    # AD
    (1, 10, 2, 6),   # DB
    (1, 1, 3, 10),   # CB
    (3, 8, 3, 11),   # BD
    (2, 4, 3, 9),    # DC
)


class MeshBuilder:
    """Mutable half-edge mesh; removed faces and edges leave reusable slots."""

    def __init__(self) -> None:
        self.faces: list[Face] = []
        self.half_edges: list[HalfEdge] = []
        self.disabled_faces: list[int] = []
        self.disabled_half_edges: list[int] = []

    def add_face(self) -> int:
        """Index of a fresh face, reusing a disabled slot when there is one."""
        if self.disabled_faces:
            index = self.disabled_faces.pop()
            face = self.faces[index]
            assert face.is_disabled()
            assert face.points_on_positive_side is None
            face.most_distant_point_dist = 0.0
            return index
        self.faces.append(Face())
        return len(self.faces) - 1

    def add_half_edge(self) -> int:
        """Index of a fresh half edge, reusing a disabled slot when there is one."""
        if self.disabled_half_edges:
            return self.disabled_half_edges.pop()
        self.half_edges.append(HalfEdge())
        return len(self.half_edges) - 1

    def disable_face(self, face_index: int) -> list[int] | None:
        """Disable a face and hand back the points that were above it."""
        face = self.faces[face_index]
        face.disable()
        self.disabled_faces.append(face_index)
        points = face.points_on_positive_side
        face.points_on_positive_side = None
        return points

    def disable_half_edge(self, he_index: int) -> None:
        self.half_edges[he_index].disable()
        self.disabled_half_edges.append(he_index)

    def setup(self, a: int, b: int, c: int, d: int) -> None:
        """Reset to the tetrahedron ABCD.

        The dot product of AB with the normal of triangle ABC should be negative.
        """
        corners = (a, b, c, d)
        self.faces = [Face(he=he) for he in (0, 3, 6, 9)]
        self.half_edges = [
            HalfEdge(corners[end], opp, face, nxt)
            for end, opp, face, nxt in _TETRAHEDRON
        ]
        self.disabled_faces = []
        self.disabled_half_edges = []

    def vertex_indices_of_face(self, face: Face) -> tuple[int, int, int]:
        he = self.half_edges[face.he]
        v0 = he.end_vertex
        he = self.half_edges[he.next]
        v1 = he.end_vertex
        he = self.half_edges[he.next]
        return v0, v1, he.end_vertex

    def vertex_indices_of_half_edge(self, he: HalfEdge) -> tuple[int, int]:
        """(start vertex, end vertex) of a half edge."""
        return self.half_edges[he.opp].end_vertex, he.end_vertex

    def half_edge_indices_of_face(self, face: Face) -> tuple[int, int, int]:
        second = self.half_edges[face.he].next
        return face.he, second, self.half_edges[second].next