"""Unit tests for objwriter mesh descriptors."""

import dataclasses
import unittest
import numpy as np

from objwriter.core.mesh import MeshDescriptor, Polygon, MeshError, MeshValidationError


class TestPolygon(unittest.TestCase):
    """Test class for polygon records."""

    def test_indices_are_owned_and_read_only(self):
        source = [0, 1, 2]
        polygon = Polygon(source, uv_indices=[2, 1, 0])
        source[0] = 7

        self.assertEqual(polygon.vertex_indices.tolist(), [0, 1, 2])
        self.assertEqual(polygon.vertex_count, 3)
        self.assertTrue(polygon.has_uvs)
        with self.assertRaises(ValueError):
            polygon.vertex_indices[0] = 5

    def test_uv_length_mismatch(self):
        with self.assertRaises(MeshValidationError):
            Polygon([0, 1, 2], uv_indices=[0, 1])

    def test_empty_polygon_rejected(self):
        with self.assertRaises(MeshValidationError):
            Polygon([])

    def test_float_indices_rejected(self):
        with self.assertRaises(MeshValidationError):
            Polygon([0, 1.9, 2])
        with self.assertRaises(MeshValidationError):
            Polygon([0, 1, 2], uv_indices=[0.0, 1.0, 2.0])

    def test_boolean_indices_rejected(self):
        with self.assertRaises(MeshValidationError):
            Polygon([True, False, True])

    def test_integer_arrays_accepted(self):
        polygon = Polygon(np.array([2, 0, 1], dtype=np.uint8))
        self.assertEqual(polygon.vertex_indices.dtype, np.int64)
        self.assertEqual(polygon.vertex_indices.tolist(), [2, 0, 1])

    def test_fields_cannot_be_reassigned(self):
        polygon = Polygon([0, 1, 2])
        with self.assertRaises(dataclasses.FrozenInstanceError):
            polygon.vertex_indices = [5, 6, 7]

    def test_nested_indices_rejected(self):
        with self.assertRaises(MeshValidationError):
            Polygon([[0, 1], [2, 3]])

    def test_dict_round_trip(self):
        polygon = Polygon.from_dict({'vertex_indices': [3, 4, 5, 6]})
        self.assertFalse(polygon.has_uvs)
        self.assertEqual(polygon.as_dict(), {'vertex_indices': [3, 4, 5, 6]})

        with self.assertRaises(MeshValidationError):
            Polygon.from_dict({'uv_indices': [0]})


class TestMeshDescriptor(unittest.TestCase):
    """Test class for mesh descriptors."""

    def setUp(self):
        """Set up test fixtures."""
        self.vertices = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
        self.uvs = [(0, 0), (1, 0), (1, 1), (0, 1)]
        self.normals = [(0, 0, 1)] * 4

    def test_counts(self):
        mesh = MeshDescriptor(
            "Quad", self.vertices,
            [Polygon([0, 1, 2, 3], uv_indices=[0, 1, 2, 3])],
            uv_coordinates=self.uvs[:4],
            vertex_normals=self.normals,
        )
        self.assertEqual(mesh.vertex_count, 4)
        self.assertEqual(mesh.uv_count, 4)
        self.assertEqual(mesh.polygon_count, 1)
        self.assertEqual(mesh.vertices.dtype, np.float32)

    def test_uv_count_without_uvs(self):
        mesh = MeshDescriptor("Quad", self.vertices, [[0, 1, 2]])
        self.assertEqual(mesh.uv_count, 0)
        # Plain index lists are turned into Polygon records
        self.assertIsInstance(mesh.polygons[0], Polygon)

    def test_arrays_are_read_only(self):
        mesh = MeshDescriptor("Quad", self.vertices, vertex_normals=self.normals)
        with self.assertRaises(ValueError):
            mesh.vertices[0, 0] = 5.0
        with self.assertRaises(ValueError):
            mesh.vertex_normals[0, 2] = 0.0

    def test_empty_mesh(self):
        mesh = MeshDescriptor("Empty", [])
        self.assertEqual(mesh.vertices.shape, (0, 3))
        self.assertEqual(mesh.polygon_count, 0)

    def test_invalid_vertex_shape(self):
        with self.assertRaises(MeshValidationError):
            MeshDescriptor("Bad", [(0, 0), (1, 0)])

    def test_invalid_uv_shape(self):
        with self.assertRaises(MeshValidationError):
            MeshDescriptor("Bad", self.vertices, uv_coordinates=[(0, 0, 0)])

    def test_normals_must_match_vertices(self):
        with self.assertRaises(MeshValidationError):
            MeshDescriptor("Bad", self.vertices, vertex_normals=self.normals[:3])

    def test_vertex_index_out_of_range(self):
        with self.assertRaises(MeshValidationError):
            MeshDescriptor("Bad", self.vertices, [Polygon([0, 1, 4])])
        with self.assertRaises(MeshValidationError):
            MeshDescriptor("Bad", self.vertices, [Polygon([-1, 1, 2])])

    def test_uv_index_out_of_range(self):
        with self.assertRaises(MeshValidationError):
            MeshDescriptor(
                "Bad", self.vertices,
                [Polygon([0, 1, 2], uv_indices=[0, 1, 4])],
                uv_coordinates=self.uvs,
            )

    def test_uv_indices_without_coordinates(self):
        with self.assertRaises(MeshValidationError):
            MeshDescriptor("Bad", self.vertices, [Polygon([0, 1, 2], uv_indices=[0, 1, 2])])

    def test_check_channels(self):
        mesh = MeshDescriptor("Quad", self.vertices, [Polygon([0, 1, 2])])
        mesh.check_channels(export_uv=False, export_normals=False)

        with self.assertRaises(MeshValidationError):
            mesh.check_channels(export_uv=True, export_normals=False)
        with self.assertRaises(MeshValidationError):
            mesh.check_channels(export_uv=False, export_normals=True)

    def test_check_channels_needs_uv_indices_on_every_polygon(self):
        mesh = MeshDescriptor(
            "Quad", self.vertices,
            [Polygon([0, 1, 2], uv_indices=[0, 1, 2]), Polygon([0, 2, 3])],
            uv_coordinates=self.uvs,
        )
        with self.assertRaises(MeshValidationError):
            mesh.check_channels(export_uv=True, export_normals=False)

    def test_check_channels_without_polygons(self):
        mesh = MeshDescriptor("Points", self.vertices)
        mesh.check_channels(export_uv=True, export_normals=True)

    def test_dict_round_trip(self):
        mesh = MeshDescriptor(
            "Quad", self.vertices,
            [Polygon([0, 1, 2], uv_indices=[0, 1, 2])],
            uv_coordinates=self.uvs,
            vertex_normals=self.normals,
        )
        data = mesh.as_dict()
        self.assertEqual(data['name'], "Quad")
        self.assertEqual(data['polygons'], [{'vertex_indices': [0, 1, 2], 'uv_indices': [0, 1, 2]}])

        restored = MeshDescriptor.from_dict(data)
        np.testing.assert_array_equal(restored.vertices, mesh.vertices)
        np.testing.assert_array_equal(restored.uv_coordinates, mesh.uv_coordinates)
        np.testing.assert_array_equal(restored.vertex_normals, mesh.vertex_normals)

    def test_from_dict_missing_fields(self):
        with self.assertRaises(MeshValidationError):
            MeshDescriptor.from_dict({'name': "NoVertices"})

    def test_name_must_be_string(self):
        with self.assertRaises(MeshValidationError):
            MeshDescriptor(None, self.vertices)
        with self.assertRaises(MeshValidationError):
            MeshDescriptor.from_dict({'name': None, 'vertices': self.vertices})

    def test_fields_cannot_be_reassigned(self):
        mesh = MeshDescriptor("Quad", self.vertices, [Polygon([0, 1, 2])])
        with self.assertRaises(dataclasses.FrozenInstanceError):
            mesh.name = "Other"
        with self.assertRaises(dataclasses.FrozenInstanceError):
            mesh.vertices = np.zeros((1, 3))
        self.assertIsInstance(mesh.polygons, tuple)

    def test_errors_share_base_class(self):
        self.assertTrue(issubclass(MeshValidationError, MeshError))

    def test_repr(self):
        mesh = MeshDescriptor("Quad", self.vertices, vertex_normals=self.normals)
        self.assertEqual(repr(mesh), "MeshDescriptor(name='Quad', vertices=4, polygons=0, normals=True)")


if __name__ == '__main__':
    unittest.main()
