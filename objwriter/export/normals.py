"""
Quantized face normals.

One normal is derived per polygon by averaging the normals of the vertices
it references. The average is then quantized to a signed 16-bit integer per
axis: truncated toward zero, with no renormalization and no rounding, and
wrapped (two's complement) when it falls outside the int16 range.

This quantization is lossy. Unit-length vertex normals average to components
in [-1, 1], so most face normals come out as 0 on every axis unless all of a
face's vertex normals agree on an axis-aligned direction. It is kept as an
explicit step so it can be revised once the intended behaviour (truncate or
round, unit or raw) is settled.
"""

import numpy as np
import logging
from typing import Sequence, Tuple, Union

from objwriter.core.mesh import MeshDescriptor

# Set up logging
logger = logging.getLogger(__name__)

NORMAL_DTYPE = np.int16
_INT16_MIN = int(np.iinfo(NORMAL_DTYPE).min)
_INT16_SPAN = 1 << 16

QuantizedNormal = Tuple[int, int, int]


def quantize_components(values: Union[np.ndarray, Sequence[float]]) -> np.ndarray:
    """
    Truncate float components toward zero and wrap them into int16.

    Args:
        values: Float components (any shape)

    Returns:
        int16 array of the same shape
    """
    truncated = np.trunc(np.asarray(values, dtype=np.float64)).astype(np.int64)
    wrapped = (truncated - _INT16_MIN) % _INT16_SPAN + _INT16_MIN
    return wrapped.astype(NORMAL_DTYPE)


def estimate_face_normal(
    vertex_indices: Union[np.ndarray, Sequence[int]],
    vertex_normals: np.ndarray
) -> QuantizedNormal:
    """
    Estimate one polygon's normal from its vertices' normals.

    Args:
        vertex_indices: 0-based indices of the polygon's vertices
        vertex_normals: (N, 3) per-vertex normals of the mesh

    Returns:
        Quantized (nx, ny, nz) integer tuple
    """
    indices = np.asarray(vertex_indices, dtype=np.int64)
    contributing = np.asarray(vertex_normals, dtype=np.float32)[indices]
    averaged = contributing.sum(axis=0, dtype=np.float32) / np.float32(len(indices))
    nx, ny, nz = quantize_components(averaged)
    return int(nx), int(ny), int(nz)


def estimate_face_normals(mesh: MeshDescriptor) -> np.ndarray:
    """
    Estimate the quantized normal of every polygon of a mesh.

    Args:
        mesh: Mesh descriptor carrying vertex normals

    Returns:
        (P, 3) int16 array, one row per polygon in polygon order
    """
    normals = np.zeros((mesh.polygon_count, 3), dtype=NORMAL_DTYPE)
    if mesh.polygon_count == 0:
        return normals

    for position, polygon in enumerate(mesh.polygons):
        normals[position] = estimate_face_normal(polygon.vertex_indices, mesh.vertex_normals)

    logger.debug(f"Estimated {mesh.polygon_count} face normals for {mesh.name}")
    return normals
