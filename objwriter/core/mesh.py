"""Mesh descriptors handed to the OBJ writer."""

import numpy as np
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Sequence, Union
import logging

from objwriter.exceptions import ObjWriterException

logger = logging.getLogger(__name__)

ArrayLike = Union[np.ndarray, Sequence]


class MeshError(ObjWriterException):
    """Base class for mesh-related exceptions."""
    pass

class MeshValidationError(MeshError):
    """Raised when mesh data fails validation."""
    pass


def _owned_array(values: ArrayLike, width: int, dtype, label: str) -> np.ndarray:
    """Copy values into a read-only (N, width) array."""
    try:
        array = np.array(values, dtype=dtype)
    except (TypeError, ValueError) as e:
        raise MeshValidationError(f"Invalid {label} data: {e}")

    if array.size == 0:
        array = array.reshape(0, width)
    if array.ndim != 2 or array.shape[1] != width:
        raise MeshValidationError(
            f"{label} must have shape (N, {width}), got {array.shape}"
        )

    array.setflags(write=False)
    return array


def _owned_indices(values: ArrayLike, label: str) -> np.ndarray:
    """Copy values into a read-only 1D integer array, rejecting non-integers."""
    try:
        array = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise MeshValidationError(f"Invalid {label}: {e}")

    if array.size and not np.issubdtype(array.dtype, np.integer):
        raise MeshValidationError(f"{label} must be integers, got {array.dtype} values")

    array = array.astype(np.int64)

    if array.ndim != 1:
        raise MeshValidationError(f"{label} must be a flat sequence, got shape {array.shape}")

    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class Polygon:
    """One face: 0-based vertex indices and optional parallel UV indices."""
    vertex_indices: np.ndarray
    uv_indices: Optional[np.ndarray] = None

    def __post_init__(self):
        object.__setattr__(self, "vertex_indices", _owned_indices(self.vertex_indices, "vertex_indices"))
        if len(self.vertex_indices) == 0:
            raise MeshValidationError("Polygon must reference at least one vertex")

        if self.uv_indices is not None:
            object.__setattr__(self, "uv_indices", _owned_indices(self.uv_indices, "uv_indices"))
            if len(self.uv_indices) != len(self.vertex_indices):
                raise MeshValidationError(
                    f"uv_indices length ({len(self.uv_indices)}) doesn't match "
                    f"vertex_indices length ({len(self.vertex_indices)})"
                )

    @property
    def vertex_count(self) -> int:
        """Number of sides of the polygon."""
        return len(self.vertex_indices)

    @property
    def has_uvs(self) -> bool:
        return self.uv_indices is not None

    def as_dict(self) -> Dict[str, Any]:
        result = {'vertex_indices': self.vertex_indices.tolist()}
        if self.uv_indices is not None:
            result['uv_indices'] = self.uv_indices.tolist()
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Polygon':
        if 'vertex_indices' not in data:
            raise MeshValidationError("Polygon record is missing 'vertex_indices'")
        return cls(data['vertex_indices'], data.get('uv_indices'))


@dataclass(frozen=True, eq=False)
class MeshDescriptor:
    """
    A fully resolved mesh object ready to be written.

    Coordinates are stored as float32 and indices as int64, all in owned,
    read-only arrays; polygons are kept in a tuple and fields cannot be
    reassigned. Polygon indices are 0-based and local to this mesh.
    """
    name: str
    vertices: np.ndarray
    polygons: Sequence[Polygon] = field(default_factory=tuple)
    uv_coordinates: Optional[np.ndarray] = None
    vertex_normals: Optional[np.ndarray] = None

    def __post_init__(self):
        """Copy and validate mesh data on creation."""
        if not isinstance(self.name, str):
            raise MeshValidationError(f"Mesh name must be a string, got {type(self.name).__name__}")
        object.__setattr__(self, "vertices", _owned_array(self.vertices, 3, np.float32, "vertices"))

        if self.uv_coordinates is not None:
            object.__setattr__(self, "uv_coordinates", _owned_array(self.uv_coordinates, 2, np.float32, "uv_coordinates"))

        if self.vertex_normals is not None:
            object.__setattr__(self, "vertex_normals", _owned_array(self.vertex_normals, 3, np.float32, "vertex_normals"))
            if self.vertex_normals.shape != self.vertices.shape:
                raise MeshValidationError(
                    f"vertex_normals shape {self.vertex_normals.shape} doesn't match "
                    f"vertices shape {self.vertices.shape}"
                )

        object.__setattr__(self, "polygons", tuple(
            p if isinstance(p, Polygon) else Polygon(p) for p in self.polygons
        ))
        self._validate_indices()

    def _validate_indices(self) -> None:
        for position, polygon in enumerate(self.polygons):
            indices = polygon.vertex_indices
            if np.any(indices < 0) or np.any(indices >= self.vertex_count):
                raise MeshValidationError(
                    f"{self.name}: polygon {position} references a vertex outside "
                    f"[0, {self.vertex_count})"
                )
            if polygon.uv_indices is not None:
                uv_indices = polygon.uv_indices
                if np.any(uv_indices < 0) or np.any(uv_indices >= self.uv_count):
                    raise MeshValidationError(
                        f"{self.name}: polygon {position} references a UV coordinate outside "
                        f"[0, {self.uv_count})"
                    )

    @property
    def vertex_count(self) -> int:
        """Get number of vertices."""
        return len(self.vertices)

    @property
    def uv_count(self) -> int:
        """Get number of UV coordinates (0 when the mesh has none)."""
        return 0 if self.uv_coordinates is None else len(self.uv_coordinates)

    @property
    def polygon_count(self) -> int:
        """Get number of polygons."""
        return len(self.polygons)

    def check_channels(self, export_uv: bool, export_normals: bool) -> None:
        """
        Check that the mesh carries every channel the export flags require.

        Raises:
            MeshValidationError: If a required channel is missing
        """
        if export_uv and self.polygons:
            if self.uv_coordinates is None:
                raise MeshValidationError(f"{self.name}: UV export enabled but mesh has no uv_coordinates")
            if not all(p.has_uvs for p in self.polygons):
                raise MeshValidationError(f"{self.name}: UV export enabled but a polygon has no uv_indices")

        if export_normals and self.polygons and self.vertex_normals is None:
            raise MeshValidationError(f"{self.name}: normal export enabled but mesh has no vertex_normals")

    def as_dict(self) -> Dict[str, Any]:
        """
        Get mesh data as a plain dictionary.

        Returns:
            Dictionary with lists in place of arrays
        """
        result = {
            'name': self.name,
            'vertices': self.vertices.tolist(),
            'polygons': [p.as_dict() for p in self.polygons],
        }

        if self.uv_coordinates is not None:
            result['uv_coordinates'] = self.uv_coordinates.tolist()

        if self.vertex_normals is not None:
            result['vertex_normals'] = self.vertex_normals.tolist()

        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MeshDescriptor':
        """
        Create a mesh descriptor from a dictionary.

        Args:
            data: Dictionary with 'name', 'vertices' and optional
                'polygons', 'uv_coordinates', 'vertex_normals'

        Returns:
            New MeshDescriptor instance
        """
        missing = [k for k in ('name', 'vertices') if k not in data]
        if missing:
            raise MeshValidationError(f"Mesh record is missing {missing}")

        return cls(
            name=data['name'],
            vertices=data['vertices'],
            polygons=[Polygon.from_dict(p) for p in data.get('polygons', [])],
            uv_coordinates=data.get('uv_coordinates'),
            vertex_normals=data.get('vertex_normals'),
        )

    def __repr__(self) -> str:
        """String representation of the mesh."""
        attrs = [f"name={self.name!r}", f"vertices={self.vertex_count}", f"polygons={self.polygon_count}"]
        if self.uv_coordinates is not None:
            attrs.append(f"uvs={self.uv_count}")
        if self.vertex_normals is not None:
            attrs.append("normals=True")

        return f"MeshDescriptor({', '.join(attrs)})"
