"""Core data structures for objwriter."""

from objwriter.core.mesh import MeshDescriptor, Polygon, MeshError, MeshValidationError

__all__ = [
    'MeshDescriptor',
    'Polygon',
    'MeshError',
    'MeshValidationError',
]
