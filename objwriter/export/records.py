"""
Per-object OBJ record writer.

Each mesh is written as one block of records:

    o <name>
    v <x> <y> <z>          one per vertex
    vt <u> <v>             one per UV coordinate (UV export only)
    vn <nx> <ny> <nz>      one quantized normal per polygon (normal export only)
    f <refs...>            one per polygon

Face references are 1-based and file-global. The i-th polygon always refers
to the i-th normal written for its object, so normal references are
``position + 1 + offsets.normal``.
"""

import logging
from enum import Enum
from typing import TextIO, Iterable, Optional

from objwriter.core.mesh import MeshDescriptor, Polygon
from objwriter.export.config import ObjExportConfig
from objwriter.export.normals import estimate_face_normals
from objwriter.export.offsets import IndexOffsets

# Set up logging
logger = logging.getLogger(__name__)


class FaceFormat(str, Enum):
    """Layout of the vertex references in a face record."""
    VERTEX = "v"
    VERTEX_UV = "v/vt"
    VERTEX_NORMAL = "v//vn"
    VERTEX_UV_NORMAL = "v/vt/vn"

    @property
    def has_uv(self) -> bool:
        return self in (FaceFormat.VERTEX_UV, FaceFormat.VERTEX_UV_NORMAL)

    @property
    def has_normal(self) -> bool:
        return self in (FaceFormat.VERTEX_NORMAL, FaceFormat.VERTEX_UV_NORMAL)

    @classmethod
    def select(cls, export_uv: bool, export_normals: bool) -> 'FaceFormat':
        """Pick the layout for the enabled channels."""
        if export_normals:
            return cls.VERTEX_UV_NORMAL if export_uv else cls.VERTEX_NORMAL
        return cls.VERTEX_UV if export_uv else cls.VERTEX


def format_float(value: float) -> str:
    """Format a coordinate the way C's ``%f`` does."""
    return f"{float(value):f}"


def format_face_record(
    polygon: Polygon,
    position: int,
    offsets: IndexOffsets,
    face_format: FaceFormat
) -> str:
    """
    Build the face record of one polygon.

    Args:
        polygon: Polygon to write
        position: Position of the polygon within its object
        offsets: Offsets of the object being written
        face_format: Reference layout for the whole object

    Returns:
        The ``f`` record without its line break
    """
    normal_ref = position + 1 + offsets.normal
    refs = []
    for j, vertex_index in enumerate(polygon.vertex_indices):
        vertex_ref = int(vertex_index) + 1 + offsets.vertex
        uv_ref = ""
        if face_format.has_uv:
            uv_ref = str(int(polygon.uv_indices[j]) + 1 + offsets.uv)

        if face_format.has_normal:
            refs.append(f"{vertex_ref}/{uv_ref}/{normal_ref}")
        elif face_format.has_uv:
            refs.append(f"{vertex_ref}/{uv_ref}")
        else:
            refs.append(str(vertex_ref))

    return "f " + " ".join(refs)


def _write_lines(stream: TextIO, lines: Iterable[str]) -> None:
    for line in lines:
        stream.write(line)
        stream.write("\n")


def write_mesh_records(
    stream: TextIO,
    mesh: MeshDescriptor,
    offsets: IndexOffsets,
    config: Optional[ObjExportConfig] = None
) -> IndexOffsets:
    """
    Write all records of one mesh.

    Args:
        stream: Text stream the records are appended to
        mesh: Mesh to write
        offsets: Offsets accumulated from earlier objects
        config: Export configuration (defaults if None)

    Returns:
        Offsets for the next object
    """
    config = config or ObjExportConfig()
    mesh.check_channels(config.export_uv, config.export_normals)
    face_format = FaceFormat.select(config.export_uv, config.export_normals)

    stream.write(f"o {mesh.name}\n")

    _write_lines(stream, (
        f"v {format_float(x)} {format_float(y)} {format_float(z)}"
        for x, y, z in mesh.vertices
    ))

    if config.export_uv and mesh.uv_coordinates is not None:
        _write_lines(stream, (
            f"vt {format_float(u)} {format_float(v)}"
            for u, v in mesh.uv_coordinates
        ))

    if config.export_normals and mesh.polygon_count:
        face_normals = estimate_face_normals(mesh)
        _write_lines(stream, (f"vn {nx} {ny} {nz}" for nx, ny, nz in face_normals))

    _write_lines(stream, (
        format_face_record(polygon, position, offsets, face_format)
        for position, polygon in enumerate(mesh.polygons)
    ))

    logger.debug(
        f"Wrote {mesh.name}: {mesh.vertex_count} vertices, {mesh.uv_count} uvs, "
        f"{mesh.polygon_count} polygons as '{face_format.value}' at offsets {offsets.as_tuple()}"
    )
    return offsets.advance(mesh)
