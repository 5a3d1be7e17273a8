"""
objwriter Package.

A package for writing in-memory polygon meshes to Wavefront OBJ files, with
optional texture coordinates and quantized face normals, and face indices
numbered across every object of the file.
"""

__version__ = "0.1.0"

# Import the main exception classes for easy access
from objwriter.exceptions import ObjWriterException, ObjDestinationError, SceneError
from objwriter.core.mesh import MeshDescriptor, Polygon, MeshValidationError

# Import export functionality
from objwriter.export import (
    ObjExportConfig,
    ConfigManager,
    IndexOffsets,
    OBJExporter,
    export_meshes_to_obj,
    write_obj_stream,
)
from objwriter.utils.scene import load_scene, save_scene
