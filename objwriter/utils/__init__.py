"""Utility functions for objwriter."""

from objwriter.utils.logging import StructuredLogger, export_logger
from objwriter.utils.scene import load_scene, save_scene, meshes_from_document

__all__ = [
    'StructuredLogger',
    'export_logger',
    'load_scene',
    'save_scene',
    'meshes_from_document',
]
