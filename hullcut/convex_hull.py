"""Vertex and index buffers of a finished convex hull."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike

from hullcut.mesh_builder import MeshBuilder
from hullcut.vector3 import Vector3


@dataclass
class ConvexHull:
    """Triangle mesh: ``indices`` holds three vertex indices per triangle."""

    vertices: list[Vector3] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @classmethod
    def from_builder(
        cls,
        mesh: MeshBuilder,
        point_cloud: Sequence[Vector3],
        ccw: bool,
        use_original_indices: bool,
    ) -> ConvexHull:
        """Collect the enabled faces of ``mesh``, walking them by adjacency.

        With ``use_original_indices`` the indices refer to ``point_cloud``;
        otherwise a compact vertex list holding only hull vertices is built.
        """
        start = next((i for i, f in enumerate(mesh.faces) if not f.is_disabled()), None)
        if start is None:
            return cls()

        processed = [False] * len(mesh.faces)
        stack = [start]
        mapping: dict[int, int] = {}
        compact: list[Vector3] = []
        indices: list[int] = []
        i_ccw = 1 if ccw else 0

        while stack:
            top = stack.pop()
            if processed[top]:
                continue
            processed[top] = True
            face = mesh.faces[top]
            for he_index in mesh.half_edge_indices_of_face(face):
                adjacent = mesh.half_edges[mesh.half_edges[he_index].opp].face
                if not processed[adjacent] and not mesh.faces[adjacent].is_disabled():
                    stack.append(adjacent)
            vertices = list(mesh.vertex_indices_of_face(face))
            if not use_original_indices:
                for k, v in enumerate(vertices):
                    if v not in mapping:
                        compact.append(point_cloud[v])
                        mapping[v] = len(compact) - 1
                    vertices[k] = mapping[v]
            indices.extend((vertices[0], vertices[1 + i_ccw], vertices[2 - i_ccw]))

        hull_vertices = list(point_cloud) if use_original_indices else compact
        return cls(hull_vertices, indices)

    def triangles(self) -> list[tuple[int, int, int]]:
        """The index buffer grouped into triangles."""
        it = iter(self.indices)
        return list(zip(it, it, it))

    def write_obj(self, path: str | PathLike, object_name: str = "quickhull") -> None:
        """Write the hull as a Wavefront OBJ file."""
        with open(path, "w", encoding="utf-8") as out:
            out.write(f"o {object_name}\n")
            for v in self.vertices:
                out.write(f"v {v.x:g} {v.y:g} {v.z:g}\n")
            for a, b, c in self.triangles():
                out.write(f"f {a + 1} {b + 1} {c + 1}\n")