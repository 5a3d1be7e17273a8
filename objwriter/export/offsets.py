"""File-wide index offsets shared by consecutive objects in one OBJ file."""

from dataclasses import dataclass
from typing import Tuple

from objwriter.core.mesh import MeshDescriptor


@dataclass(frozen=True)
class IndexOffsets:
    """
    Running totals of the records written by all earlier objects.

    Local indices of the next object are shifted by these values so every
    reference points into the single numbering space of the file.
    """
    vertex: int = 0
    uv: int = 0
    normal: int = 0

    def advance(self, mesh: MeshDescriptor) -> 'IndexOffsets':
        """Return the offsets that apply to the object following ``mesh``."""
        return IndexOffsets(
            vertex=self.vertex + mesh.vertex_count,
            uv=self.uv + mesh.uv_count,
            normal=self.normal + mesh.polygon_count,
        )

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.vertex, self.uv, self.normal
