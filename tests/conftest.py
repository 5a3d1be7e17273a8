"""
Pytest fixtures shared across test modules.
"""
import json

import pytest

from objwriter.core.mesh import MeshDescriptor, Polygon
from objwriter.export.config import ObjExportConfig


@pytest.fixture
def triangle_mesh():
    """Three vertices and one triangle, no optional channels."""
    return MeshDescriptor(
        name="A",
        vertices=[(0, 0, 0), (1, 0, 0), (0, 1, 0)],
        polygons=[Polygon([0, 1, 2])],
    )


@pytest.fixture
def segment_mesh():
    """Two vertices joined by a two-sided polygon."""
    return MeshDescriptor(
        name="B",
        vertices=[(2, 0, 0), (3, 0, 0)],
        polygons=[Polygon([0, 1])],
    )


@pytest.fixture
def quad_mesh():
    """Unit square split into two triangles, with UVs and +Z vertex normals."""
    return MeshDescriptor(
        name="Quad",
        vertices=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)],
        polygons=[
            Polygon([0, 1, 2], uv_indices=[0, 1, 2]),
            Polygon([0, 2, 3], uv_indices=[0, 2, 3]),
        ],
        uv_coordinates=[(0, 0), (1, 0), (1, 1), (0, 1)],
        vertex_normals=[(0, 0, 1)] * 4,
    )


@pytest.fixture
def flipped_triangle_mesh():
    """Triangle with UVs and -Z vertex normals."""
    return MeshDescriptor(
        name="Tri2",
        vertices=[(0, 0, 1), (1, 0, 1), (0, 1, 1)],
        polygons=[Polygon([0, 1, 2], uv_indices=[0, 1, 2])],
        uv_coordinates=[(0, 0), (1, 0), (0, 1)],
        vertex_normals=[(0, 0, -1)] * 3,
    )


@pytest.fixture
def plain_config():
    """Configuration with both optional channels disabled and a fixed header."""
    return ObjExportConfig(export_uv=False, export_normals=False, tool_version="9.9")


@pytest.fixture
def scene_file(tmp_path, quad_mesh, flipped_triangle_mesh):
    """JSON scene document holding the quad and the flipped triangle."""
    path = tmp_path / "scene.json"
    document = {'meshes': [quad_mesh.as_dict(), flipped_triangle_mesh.as_dict()]}
    path.write_text(json.dumps(document))
    return path
