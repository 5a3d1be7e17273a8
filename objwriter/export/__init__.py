"""OBJ export package for objwriter."""
from .config import ObjExportConfig, ConfigManager
from .offsets import IndexOffsets
from .normals import estimate_face_normal, estimate_face_normals, quantize_components
from .records import FaceFormat, format_face_record, write_mesh_records
from .obj import OBJExporter, export_meshes_to_obj, write_obj_stream, open_destination

__all__ = [
    'ObjExportConfig',
    'ConfigManager',
    'IndexOffsets',
    'estimate_face_normal',
    'estimate_face_normals',
    'quantize_components',
    'FaceFormat',
    'format_face_record',
    'write_mesh_records',
    'OBJExporter',
    'export_meshes_to_obj',
    'write_obj_stream',
    'open_destination',
]
