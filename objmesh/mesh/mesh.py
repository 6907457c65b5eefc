# objmesh/mesh/mesh.py
import numpy as np
from objmesh.utils import logger


class Mesh:
    """Результат загрузки – плоский vertex‑буфер + индексы треугольников.

    Раскладку буфер не описывает: потребитель должен знать настройки
    загрузчика, которым меш был собран.
    """

    def __init__(self,
                 vertex_data: np.ndarray,
                 indices: np.ndarray,
                 name="Mesh"):
        self.name = name
        self.vertex_data = np.ascontiguousarray(vertex_data, dtype=np.float32).ravel()
        self.indices = np.ascontiguousarray(indices, dtype=np.uint32).ravel()
        if len(self.indices) % 3 != 0:
            raise ValueError(f"Index buffer length {len(self.indices)} is not a multiple of 3")

        # GPU‑ресурсы (создаются лениво в upload)
        self.vb = None
        self.ib = None

    # -----------------------------------------------------------------
    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    # -----------------------------------------------------------------
    def upload(self, backend):
        """Передать буферы бекенду; повторный вызов ничего не делает."""
        if self.vb is not None:
            return self.vb, self.ib

        self.vb = backend.create_buffer(self.vertex_data.tobytes(), usage="vertex")
        self.ib = backend.create_buffer(self.indices.tobytes(), usage="index")
        logger.debug(
            f"[Mesh] {self.name}: uploaded {self.vertex_data.nbytes} B vertex data, "
            f"{self.index_count} indices"
        )
        return self.vb, self.ib

    def release(self, backend):
        """Освободить GPU‑ресурсы, созданные в upload()."""
        for res in (self.vb, self.ib):
            if res is not None:
                backend.release_resource(res)
        self.vb = None
        self.ib = None

    # -----------------------------------------------------------------
    def __repr__(self) -> str:
        return (f"Mesh({self.name!r}, floats={len(self.vertex_data)}, "
                f"triangles={self.triangle_count})")
