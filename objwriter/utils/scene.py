"""
Scene documents.

A scene document is a JSON file holding the mesh descriptors to export:

    {"meshes": [{"name": "Cube",
                 "vertices": [[x, y, z], ...],
                 "polygons": [{"vertex_indices": [...], "uv_indices": [...]}],
                 "uv_coordinates": [[u, v], ...],
                 "vertex_normals": [[nx, ny, nz], ...]}]}

A bare list of mesh records is accepted as well.
"""

import json
import logging
from pathlib import Path
from typing import List, Sequence, Union

from objwriter.core.mesh import MeshDescriptor, MeshError
from objwriter.exceptions import SceneError

logger = logging.getLogger(__name__)


def meshes_from_document(document: Union[dict, list]) -> List[MeshDescriptor]:
    """
    Build mesh descriptors from a decoded scene document.

    Raises:
        SceneError: If the document has the wrong structure or a mesh is invalid
    """
    if isinstance(document, dict):
        if 'meshes' not in document:
            raise SceneError("Scene document has no 'meshes' entry")
        records = document['meshes']
    else:
        records = document

    if not isinstance(records, list):
        raise SceneError(f"'meshes' must be a list, got {type(records).__name__}")

    meshes = []
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise SceneError(f"Mesh record {position} must be an object")
        try:
            meshes.append(MeshDescriptor.from_dict(record))
        except MeshError as e:
            raise SceneError(f"Mesh record {position} is invalid: {e}") from e

    return meshes


def load_scene(path: Union[str, Path]) -> List[MeshDescriptor]:
    """
    Load mesh descriptors from a JSON scene document.

    Args:
        path: Path to the scene document

    Returns:
        Mesh descriptors in document order

    Raises:
        SceneError: If the file cannot be read or decoded
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except OSError as e:
        raise SceneError(f"Cannot read scene {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SceneError(f"Scene {path} is not valid JSON: {e}") from e

    meshes = meshes_from_document(document)
    logger.info(f"Loaded {len(meshes)} meshes from {path}")
    return meshes


def save_scene(meshes: Sequence[MeshDescriptor], path: Union[str, Path]) -> None:
    """
    Save mesh descriptors as a JSON scene document.

    Raises:
        SceneError: If the file cannot be written
    """
    document = {'meshes': [mesh.as_dict() for mesh in meshes]}
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2)
    except OSError as e:
        raise SceneError(f"Cannot write scene {path}: {e}") from e
