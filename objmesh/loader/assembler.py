# objmesh/loader/assembler.py
"""
Сборка плоского vertex‑буфера из накопленных записей v / vn.
"""

from enum import Enum
from typing import Sequence

import numpy as np

from objmesh.loader.errors import AttributeCountMismatch
from objmesh.loader.records import NormalRecord, PositionRecord


class VertexLayout(Enum):
    """Раскладка атрибутов в vertex‑буфере."""

    INLINED = "inlined"       # v0 n0 v1 n1 …
    SEGMENTED = "segmented"   # v0 v1 … n0 n1 …

    @classmethod
    def from_name(cls, name) -> "VertexLayout":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            names = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown vertex layout {name!r} (expected one of: {names})") from None


def assemble_vertex_data(positions: Sequence[PositionRecord],
                         normals: Sequence[NormalRecord],
                         layout: VertexLayout = VertexLayout.INLINED) -> np.ndarray:
    """Собрать float32‑буфер по выбранной раскладке."""
    data = []
    if layout is VertexLayout.INLINED:
        if len(positions) != len(normals):
            raise AttributeCountMismatch(len(positions), len(normals))
        for position, normal in zip(positions, normals):
            data.extend(position)
            data.extend(normal)
    else:
        for position in positions:
            data.extend(position)
        for normal in normals:
            data.extend(normal)
    return np.array(data, dtype=np.float32)


def assemble_indices(faces) -> np.ndarray:
    """Индексы граней в порядке появления → плоский uint32‑буфер."""
    data = []
    for face in faces:
        data.extend(face)
    # без проверки границ отрицательные индексы заворачиваются, как в C
    return np.array(data, dtype=np.int64).astype(np.uint32)
