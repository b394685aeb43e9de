import numpy as np
import pytest

from replicator import matrix_op
from replicator.mesh import Mesh, MeshBuilder, MeshCreationError


def test_add_vertex_appends_w_one():
    builder = MeshBuilder()
    builder.add_vertex((1.0, 2.0, 3.0))
    np.testing.assert_allclose(builder.vertices[0], (1.0, 2.0, 3.0, 1.0))


def test_add_vertex_count_repeats():
    builder = MeshBuilder()
    builder.add_vertex((0.0, 0.0, 0.0, 1.0), count=3)
    assert len(builder.vertices) == 3
    assert all(np.array_equal(v, builder.vertices[0]) for v in builder.vertices)


def test_add_color_appends_alpha_one():
    builder = MeshBuilder()
    builder.add_color((0.1, 0.2, 0.3))
    np.testing.assert_allclose(builder.colors[0], (0.1, 0.2, 0.3, 1.0))


def test_add_normal_normalizes():
    builder = MeshBuilder()
    builder.add_normal((3.0, 0.0, 4.0))
    normal = builder.normals[0]
    assert np.linalg.norm(normal) == pytest.approx(1.0)
    assert normal[3] == 0.0
    assert np.cross(normal[:3], (3.0, 0.0, 4.0)) == pytest.approx(np.zeros(3))


def test_add_normal_rejects_zero():
    with pytest.raises(ValueError):
        MeshBuilder().add_normal((0.0, 0.0, 0.0))


def test_add_texcoord_rejects_wrong_shape():
    with pytest.raises(ValueError):
        MeshBuilder().add_texcoord((0.0, 1.0, 2.0))


def test_add_index_rejects_negative():
    with pytest.raises(ValueError):
        MeshBuilder().add_index(-1)


def test_build_without_indices_uses_sequence():
    builder = MeshBuilder()
    for x in range(5):
        builder.add_vertex((float(x), 0.0, 0.0))
    mesh = builder.build()
    assert mesh.indices.tolist() == list(range(5))
    assert mesh.index_count == 5


def test_mesh_rejects_color_mismatch():
    with pytest.raises(MeshCreationError):
        Mesh([0], [(0, 0, 0, 1), (1, 0, 0, 1)], colors=[(1, 1, 1, 1)])


def test_mesh_rejects_normal_mismatch():
    with pytest.raises(MeshCreationError):
        Mesh([0], [(0, 0, 0, 1)], normals=[(0, 0, 1, 0), (0, 1, 0, 0)])


def test_mesh_rejects_texcoord_mismatch():
    with pytest.raises(MeshCreationError):
        Mesh([0], [(0, 0, 0, 1)], texcoords=[(0, 0), (1, 1)])


def test_mesh_allows_missing_attributes():
    mesh = Mesh([0, 1, 2], [(0, 0, 0, 1), (1, 0, 0, 1), (0, 1, 0, 1)])
    assert mesh.colors.shape == (0, 4)
    assert mesh.texcoords.shape == (0, 2)
    assert len(mesh.vertices) == 3


def test_rect_indices_and_normal():
    builder = MeshBuilder()
    builder.rect((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 0.0, 0.0))
    assert builder.indices == [0, 2, 1, 0, 3, 2]
    assert len(builder.vertices) == len(builder.normals) == len(builder.texcoords)
    for normal in builder.normals:
        np.testing.assert_allclose(normal[:3], np.cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)))


def test_cube_faces_point_outward():
    builder = MeshBuilder()
    builder.cube(2.0)
    assert len(builder.vertices) == len(builder.normals) == len(builder.texcoords)
    assert len(builder.indices) % 3 == 0
    assert max(builder.indices) < len(builder.vertices)
    for start in range(0, len(builder.vertices), 4):
        centre = np.mean([v[:3] for v in builder.vertices[start:start + 4]], axis=0)
        assert np.dot(builder.normals[start][:3], centre) > 0


def test_cube_bounding_box_matches_side():
    builder = MeshBuilder()
    builder.cube(2.0, (1.0, 1.0, 1.0))
    box = builder.bounding_box()
    assert box.width() == pytest.approx(2.0)
    assert box.height() == pytest.approx(2.0)
    assert box.length() == pytest.approx(2.0)
    np.testing.assert_allclose(box.min, (0.0, 0.0, 0.0), atol=1e-9)


def test_bounding_box_follows_transform():
    builder = MeshBuilder()
    builder.cube(1.0)
    plain = builder.bounding_box()
    moved = builder.bounding_box(matrix_op.translation(1.0, 2.0, 3.0))
    np.testing.assert_allclose(moved.min - plain.min, (1.0, 2.0, 3.0))
    np.testing.assert_allclose(moved.max - plain.max, (1.0, 2.0, 3.0))


def test_bounding_box_without_vertices_raises():
    with pytest.raises(ValueError):
        MeshBuilder().bounding_box()


def test_circle_rim_lies_in_plane():
    builder = MeshBuilder()
    sections = 8
    builder.circle((1.0, 0.0, 1.0), (0.0, 0.0, 1.0), sections, (0.0, 0.0, 2.0))
    assert len(builder.vertices) == sections + 1
    assert len(builder.normals) == sections + 1
    assert len(builder.indices) == 3 * sections
    np.testing.assert_allclose(builder.vertices[0][:3], (0.0, 0.0, 2.0))
    for vertex in builder.vertices[1:]:
        assert vertex[2] == pytest.approx(2.0)
        assert np.linalg.norm(vertex[:2]) == pytest.approx(1.0)


def test_cylinder_vertices_within_extent():
    builder = MeshBuilder()
    builder.cylinder((1.0, 0.0, 0.0), (0.0, 0.5, 0.0), 6)
    assert len(builder.vertices) == len(builder.normals)
    assert len(builder.indices) % 3 == 0
    assert max(builder.indices) < len(builder.vertices)
    radial = [np.hypot(v[0], v[2]) for v in builder.vertices]
    assert sum(1 for r in radial if r == pytest.approx(0.0)) == 2
    for vertex, r in zip(builder.vertices, radial):
        assert abs(vertex[1]) == pytest.approx(0.5)
        assert r == pytest.approx(0.0) or r == pytest.approx(1.0)


def test_icosphere_base_shape():
    builder = MeshBuilder()
    builder.icosphere(1.0, 0)
    assert len(builder.vertices) == 12
    assert len(builder.indices) == 3 * 20


@pytest.mark.parametrize("divisions", [0, 1, 2])
def test_icosphere_is_closed_sphere(divisions):
    builder = MeshBuilder()
    builder.icosphere(2.0, divisions, (1.0, 0.0, 0.0))
    faces = len(builder.indices) // 3
    assert len(builder.vertices) == faces // 2 + 2
    for vertex, normal in zip(builder.vertices, builder.normals):
        offset = vertex[:3] - np.array((1.0, 0.0, 0.0))
        assert np.linalg.norm(offset) == pytest.approx(2.0)
        assert np.linalg.norm(normal) == pytest.approx(1.0)


def test_icosphere_division_quadruples_triangles():
    coarse = MeshBuilder()
    coarse.icosphere(1.0, 1)
    fine = MeshBuilder()
    fine.icosphere(1.0, 2)
    assert len(fine.indices) == 4 * len(coarse.indices)


def test_clear_vertices_empties_list():
    builder = MeshBuilder()
    builder.cube(1.0)
    builder.clear_vertices()
    builder.clear_normals()
    assert builder.vertices == []
    assert builder.normals == []
    assert len(builder.texcoords) > 0