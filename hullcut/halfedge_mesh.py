"""Compact half-edge mesh with disabled elements removed."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from hullcut.mesh_builder import HalfEdge, MeshBuilder
from hullcut.vector3 import Vector3


@dataclass
class HalfEdgeMesh:
    """Half-edge mesh; ``faces`` holds one half-edge index per face."""

    vertices: list[Vector3] = field(default_factory=list)
    faces: list[int] = field(default_factory=list)
    half_edges: list[HalfEdge] = field(default_factory=list)

    @classmethod
    def from_builder(
        cls, builder: MeshBuilder, vertex_data: Sequence[Vector3]
    ) -> HalfEdgeMesh:
        """Copy the enabled part of ``builder`` and renumber everything densely."""
        face_mapping: dict[int, int] = {}
        half_edge_mapping: dict[int, int] = {}
        vertex_mapping: dict[int, int] = {}
        vertices: list[Vector3] = []
        faces: list[int] = []
        half_edges: list[HalfEdge] = []

        for i, face in enumerate(builder.faces):
            if face.is_disabled():
                continue
            faces.append(face.he)
            face_mapping[i] = len(faces) - 1
            for he_index in builder.half_edge_indices_of_face(face):
                vertex_index = builder.half_edges[he_index].end_vertex
                if vertex_index not in vertex_mapping:
                    vertices.append(vertex_data[vertex_index])
                    vertex_mapping[vertex_index] = len(vertices) - 1

        for i, he in enumerate(builder.half_edges):
            if he.is_disabled():
                continue
            half_edges.append(HalfEdge(he.end_vertex, he.opp, he.face, he.next))
            half_edge_mapping[i] = len(half_edges) - 1

        faces = [half_edge_mapping[he_index] for he_index in faces]
        for he in half_edges:
            he.face = face_mapping[he.face]
            he.opp = half_edge_mapping[he.opp]
            he.next = half_edge_mapping[he.next]
            he.end_vertex = vertex_mapping[he.end_vertex]

        return cls(vertices, faces, half_edges)