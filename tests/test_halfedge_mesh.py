import pytest

from hullcut.halfedge_mesh import HalfEdgeMesh
from hullcut.mesh_builder import MeshBuilder
from hullcut.vector3 import Vector3

CLOUD = [Vector3(float(i), float(i * i), float(-i)) for i in range(9)]


@pytest.fixture
def builder():
    b = MeshBuilder()
    b.setup(5, 6, 7, 8)
    return b


def _check_consistent(mesh):
    for i, he in enumerate(mesh.half_edges):
        assert mesh.half_edges[he.opp].opp == i
        assert 0 <= he.end_vertex < len(mesh.vertices)
        assert 0 <= he.face < len(mesh.faces)
    for f, he_index in enumerate(mesh.faces):
        a = mesh.half_edges[he_index]
        b = mesh.half_edges[a.next]
        c = mesh.half_edges[b.next]
        assert c.next == he_index
        assert a.face == b.face == c.face == f


def test_sizes(builder):
    mesh = HalfEdgeMesh.from_builder(builder, CLOUD)
    assert len(mesh.faces) == 4
    assert len(mesh.half_edges) == 12
    assert len(mesh.vertices) == 4


def test_vertices_are_used_points(builder):
    mesh = HalfEdgeMesh.from_builder(builder, CLOUD)
    assert sorted(mesh.vertices, key=tuple) == sorted(CLOUD[5:9], key=tuple)
    assert mesh.vertices[0] == CLOUD[6]


def test_renumbering_is_consistent(builder):
    _check_consistent(HalfEdgeMesh.from_builder(builder, CLOUD))


def test_geometry_preserved(builder):
    mesh = HalfEdgeMesh.from_builder(builder, CLOUD)
    for face, he_index in zip(builder.faces, mesh.faces):
        original = [CLOUD[v] for v in builder.vertex_indices_of_face(face)]
        a = mesh.half_edges[he_index]
        b = mesh.half_edges[a.next]
        c = mesh.half_edges[b.next]
        assert [mesh.vertices[h.end_vertex] for h in (a, b, c)] == original


def test_disabled_elements_are_dropped(builder):
    he_index = builder.add_half_edge()
    builder.disable_half_edge(he_index)
    face_index = builder.add_face()
    builder.disable_face(face_index)
    mesh = HalfEdgeMesh.from_builder(builder, CLOUD)
    assert len(mesh.half_edges) == 12
    assert len(mesh.faces) == 4
    _check_consistent(mesh)


def test_builder_unchanged(builder):
    before = [(h.end_vertex, h.opp, h.face, h.next) for h in builder.half_edges]
    HalfEdgeMesh.from_builder(builder, CLOUD)
    after = [(h.end_vertex, h.opp, h.face, h.next) for h in builder.half_edges]
    assert before == after