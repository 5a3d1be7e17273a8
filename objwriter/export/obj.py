"""
OBJ exporter implementation for objwriter.

This module provides the OBJExporter class and related functions for writing
a sequence of mesh descriptors to a single Wavefront OBJ file, with face
indices numbered across all objects of the file.
"""

import logging
from typing import Optional, Sequence, TextIO

from objwriter.core.mesh import MeshDescriptor
from objwriter.exceptions import ObjDestinationError
from objwriter.export.config import ObjExportConfig, ConfigManager
from objwriter.export.offsets import IndexOffsets
from objwriter.export.records import write_mesh_records
from objwriter.utils.logging import export_logger

# Set up logging
logger = logging.getLogger(__name__)


class OBJExporter:
    """Exporter for OBJ format."""

    @classmethod
    def get_extension(cls) -> str:
        """Get file extension."""
        return "obj"

    @classmethod
    def get_format_name(cls) -> str:
        """Get format name."""
        return "Wavefront OBJ"

    @classmethod
    def supports_binary(cls) -> bool:
        """Check if binary format is supported."""
        return False  # OBJ is a text-based format

    @classmethod
    def export(cls,
               meshes: Sequence[MeshDescriptor],
               filename: str,
               config: Optional[ObjExportConfig] = None,
               **kwargs) -> Optional[str]:
        """
        Export meshes to OBJ format.

        Args:
            meshes: Ordered mesh descriptors
            filename: Output filename
            config: Export configuration
            **kwargs: Configuration overrides

        Returns:
            Path to the created file if successful, None otherwise
        """
        return export_meshes_to_obj(meshes, filename, config, **kwargs)


def open_destination(filename: str) -> TextIO:
    """
    Open the output file for writing.

    Raises:
        ObjDestinationError: If the file cannot be opened or created
    """
    try:
        return open(filename, 'w', encoding='utf-8', newline='\n')
    except OSError as e:
        raise ObjDestinationError(f"Cannot open {filename} for writing: {e}") from e


def write_obj_stream(
    stream: TextIO,
    meshes: Sequence[MeshDescriptor],
    config: Optional[ObjExportConfig] = None
) -> IndexOffsets:
    """
    Write the header and every mesh to an open text stream.

    Args:
        stream: Destination stream
        meshes: Ordered mesh descriptors
        config: Export configuration (defaults if None)

    Returns:
        Totals of vertices, UV coordinates and polygons written
    """
    config = config or ObjExportConfig()

    stream.write(config.header_line() + "\n")

    offsets = IndexOffsets()
    for mesh in meshes:
        offsets = write_mesh_records(stream, mesh, offsets, config)

    return offsets


def export_meshes_to_obj(
    meshes: Sequence[MeshDescriptor],
    filename: str,
    config: Optional[ObjExportConfig] = None,
    **kwargs
) -> Optional[str]:
    """
    Write meshes to an OBJ file.

    The meshes are checked against the enabled channels before the file is
    opened. If the destination cannot be opened the export is abandoned: an
    error is logged, nothing is created, and None is returned.

    Args:
        meshes: Ordered mesh descriptors
        filename: Output filename
        config: Export configuration (defaults if None)
        **kwargs: Configuration overrides (e.g. export_uv=False)

    Returns:
        Path to the created file or None if the destination could not be opened

    Raises:
        MeshValidationError: If a mesh lacks a channel the flags require
    """
    if kwargs:
        config = ConfigManager.create_config(config, **kwargs)
    config = config or ObjExportConfig()

    meshes = list(meshes)
    for mesh in meshes:
        mesh.check_channels(config.export_uv, config.export_normals)

    try:
        outfile = open_destination(filename)
    except ObjDestinationError as e:
        logger.error(f"Error creating OBJ file: {e}")
        return None

    log = export_logger.bind(path=str(filename))
    log.debug("Writing OBJ file", objects=len(meshes))

    with outfile:
        totals = write_obj_stream(outfile, meshes, config)

    log.info(
        "Exported OBJ file",
        objects=len(meshes),
        vertices=totals.vertex,
        uvs=totals.uv,
        polygons=totals.normal,
        export_uv=config.export_uv,
        export_normals=config.export_normals,
    )
    return filename
